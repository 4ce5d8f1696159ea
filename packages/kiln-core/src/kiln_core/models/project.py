# kiln_core/models/project.py
from pydantic import BaseModel, ConfigDict, Field

# ---- project.config.json ----


class ProjectInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")
    name: str
    description: str | None = None
    version: str | None = None


class CloudflareIds(BaseModel):
    model_config = ConfigDict(extra="ignore")
    account_id: str | None = None
    zone_id: str | None = None


class ProjectResources(BaseModel):
    model_config = ConfigDict(extra="ignore")
    database: str
    hostname: str
    # written by the generator, not checked by the validator
    kv_namespace: str | None = None
    r2_bucket: str | None = None
    worker: str | None = None


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    domain: str
    project: ProjectInfo
    cloudflare: CloudflareIds = Field(default_factory=CloudflareIds)
    resources: ProjectResources


# ---- app/package.json ----


class PackageManifest(BaseModel):
    """Only the scripts mapping matters; everything else in package.json is ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    scripts: dict[str, str] = Field(default_factory=dict)

    def has_script(self, name: str) -> bool:
        return bool(self.scripts.get(name))
