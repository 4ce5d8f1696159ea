"""Fixed file layout of a scaffolded project, relative to its root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE = "project.config.json"

INFRA_DIR = "infra"
TERRAFORM_FILES = ("main.tf", "variables.tf", "outputs.tf", "versions.tf")
TERRAFORM_OUTPUTS_FILE = "outputs.tf"

APP_DIR = "app"
LEGACY_APPS_DIR = "apps"
MANIFEST_FILE = "package.json"
GATEWAY_FILE = "wrangler.toml"
MIGRATIONS_DIR = "migrations"
MIGRATION_SUFFIX = ".sql"

DEPLOY_WORKFLOW = ".github/workflows/deploy.yml"


@dataclass(frozen=True)
class ProjectLayout:
    root: Path

    @classmethod
    def at(cls, root: Path | str) -> "ProjectLayout":
        return cls(root=Path(root))

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILE

    @property
    def infra_dir(self) -> Path:
        return self.root / INFRA_DIR

    def terraform_file(self, name: str) -> Path:
        return self.infra_dir / name

    @property
    def app_dir(self) -> Path:
        return self.root / APP_DIR

    @property
    def legacy_apps_dir(self) -> Path:
        return self.root / LEGACY_APPS_DIR

    @property
    def manifest_path(self) -> Path:
        return self.app_dir / MANIFEST_FILE

    @property
    def gateway_path(self) -> Path:
        return self.app_dir / GATEWAY_FILE

    @property
    def migrations_dir(self) -> Path:
        return self.app_dir / MIGRATIONS_DIR

    @property
    def deploy_workflow_path(self) -> Path:
        return self.root / DEPLOY_WORKFLOW

    def relative(self, path: Path) -> str:
        """Project-relative display form, e.g. 'app/package.json'."""
        return path.relative_to(self.root).as_posix()
