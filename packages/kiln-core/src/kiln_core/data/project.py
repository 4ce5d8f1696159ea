# kiln_core/data/project.py
from pathlib import Path

from kiln_core.data.loader import load_json_typed
from kiln_core.models.project import PackageManifest, ProjectConfig


def load_project_config(path: str | Path) -> ProjectConfig:
    """Load project.config.json written by the scaffolding generator."""
    return load_json_typed(Path(path), model=ProjectConfig)


def load_package_manifest(path: str | Path) -> PackageManifest:
    return load_json_typed(Path(path), model=PackageManifest)
