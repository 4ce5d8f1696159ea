from .finding import Finding, FindingKind, Report, Severity
from .project import PackageManifest, ProjectConfig, ProjectInfo, ProjectResources

__all__ = [
    "Finding",
    "FindingKind",
    "PackageManifest",
    "ProjectConfig",
    "ProjectInfo",
    "ProjectResources",
    "Report",
    "Severity",
]
