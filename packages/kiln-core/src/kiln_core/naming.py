"""
Naming scheme for kiln projects.

Every resource name in a scaffolded project is derived from the domain alone:

    my-site.org  ->  project  "mysite"
                     database "mysite_db"
                     kv       "MYSITE_PUBLISHED"
                     bucket   "mysite-media"
                     worker   "mysite-sonicjs"
                     hostname "my-site.org"

The generator writes these into project.config.json; the Configuration stage
re-derives them to detect drift.
"""

from __future__ import annotations

import re

from kiln_core.models.project import ProjectConfig, ProjectInfo, ProjectResources

DOMAIN_PATTERN = re.compile(r"^[a-z0-9.-]+\.[a-z]{2,}$")
DEFAULT_DESCRIPTION = "A community website built with SonicJS template"
DEFAULT_VERSION = "1.0.0"


def is_valid_domain(domain: str) -> bool:
    return bool(DOMAIN_PATTERN.fullmatch(domain))


def derive_project_name(domain: str) -> str:
    """First label of the domain, lowercased, with non-alphanumerics stripped."""
    first_label = domain.split(".")[0].lower()
    return re.sub(r"[^a-z0-9]", "", first_label)


def database_name(project_name: str) -> str:
    return f"{project_name}_db"


def validate_domain(domain: str) -> None:
    """Raise ValueError when the domain cannot seed a naming scheme."""
    if not is_valid_domain(domain):
        raise ValueError('Invalid domain format. Use lowercase domain like "example.com"')

    if len(domain.split(".")) < 2:
        raise ValueError('Domain must have at least a name and TLD (e.g., "example.com")')

    if not derive_project_name(domain):
        raise ValueError("Domain must start with alphanumeric characters")


def derive_project_config(domain: str, description: str | None = None) -> ProjectConfig:
    """Build the full configuration record the generator would persist for a domain."""
    validate_domain(domain)
    name = derive_project_name(domain)

    return ProjectConfig(
        domain=domain,
        project=ProjectInfo(
            name=name,
            description=description or DEFAULT_DESCRIPTION,
            version=DEFAULT_VERSION,
        ),
        resources=ProjectResources(
            database=database_name(name),
            kv_namespace=f"{name.upper()}_PUBLISHED",
            r2_bucket=f"{name}-media",
            worker=f"{name}-sonicjs",
            hostname=domain,
        ),
    )
