from .loader import load_json_typed
from .project import load_package_manifest, load_project_config

__all__ = [
    "load_json_typed",
    "load_package_manifest",
    "load_project_config",
]
