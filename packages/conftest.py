"""Shared fixtures: a healthy scaffolded project tree and stub probes."""

import json
from pathlib import Path

import pytest
from kiln_core.validation.probes import ExternalProbe

REQUIRED_ENV = {
    "TF_VAR_cloudflare_api_token": "token",
    "CF_ACCOUNT_ID": "account",
    "CF_ZONE_ID": "zone",
}

WRANGLER_TOML = """\
name = "example-sonicjs"
main = "src/index.ts"
compatibility_date = "2024-09-23"

[[d1_databases]]
binding = "DB"
database_name = "example_db"
database_id = "{{D1_DATABASE_ID}}"

[[kv_namespaces]]
binding = "CACHE_KV"
id = "{{KV_NAMESPACE_ID}}"

[[r2_buckets]]
binding = "MEDIA_BUCKET"
bucket_name = "example-media"
"""

DEPLOY_YML = """\
name: Deploy
on:
  push:
    branches: [main]
jobs:
  deploy:
    runs-on: ubuntu-latest
    defaults:
      run:
        working-directory: app
    steps:
      - uses: actions/checkout@v4
      - name: Substitute placeholders
        run: |
          sed -i "s/{{D1_DATABASE_ID}}/$D1_ID/" wrangler.toml
          sed -i "s/{{KV_NAMESPACE_ID}}/$KV_ID/" wrangler.toml
      - run: npm run deploy
"""

OUTPUTS_TF = """\
output "hostname" {
  value = var.hostname
}
"""


class StubProbe(ExternalProbe):
    """Probe with a canned syntax-check result and an in-memory environment."""

    def __init__(self, syntax_ok: bool = True, environ: dict | None = None):
        super().__init__(environ=dict(REQUIRED_ENV) if environ is None else environ)
        self.syntax_ok = syntax_ok
        self.syntax_calls: list[Path] = []

    def syntax_check(self, directory: Path) -> bool:
        self.syntax_calls.append(directory)
        return self.syntax_ok


def write_project(root: Path, domain: str = "example.com") -> Path:
    """Lay down a project tree that passes every stage."""
    name = domain.split(".")[0]
    config = {
        "domain": domain,
        "project": {"name": name, "description": "test site", "version": "1.0.0"},
        "cloudflare": {"account_id": "{{CLOUDFLARE_ACCOUNT_ID}}", "zone_id": "{{CLOUDFLARE_ZONE_ID}}"},
        "resources": {
            "database": f"{name}_db",
            "kv_namespace": f"{name.upper()}_PUBLISHED",
            "r2_bucket": f"{name}-media",
            "worker": f"{name}-sonicjs",
            "hostname": domain,
        },
    }
    (root / "project.config.json").write_text(json.dumps(config, indent=2))

    infra = root / "infra"
    infra.mkdir()
    (infra / "main.tf").write_text('resource "cloudflare_d1_database" "db" {}\n')
    (infra / "variables.tf").write_text('variable "hostname" {}\n')
    (infra / "outputs.tf").write_text(OUTPUTS_TF)
    (infra / "versions.tf").write_text("terraform {}\n")

    app = root / "app"
    (app / "migrations").mkdir(parents=True)
    (app / "migrations" / "0001_init.sql").write_text("CREATE TABLE posts (id INTEGER);\n")
    (app / "wrangler.toml").write_text(WRANGLER_TOML)
    manifest = {
        "name": f"{name}-sonicjs",
        "scripts": {
            "dev": "wrangler dev",
            "build": "tsc",
            "deploy": "wrangler deploy",
            "db:migrate": "wrangler d1 migrations apply DB",
        },
    }
    (app / "package.json").write_text(json.dumps(manifest, indent=2))

    workflows = root / ".github" / "workflows"
    workflows.mkdir(parents=True)
    (workflows / "deploy.yml").write_text(DEPLOY_YML)

    return root


@pytest.fixture
def project_root(tmp_path):
    """A healthy project tree."""
    return write_project(tmp_path)


@pytest.fixture
def probe():
    """Probe whose syntax check passes and whose environment is fully set."""
    return StubProbe()


@pytest.fixture
def make_probe():
    return StubProbe


@pytest.fixture
def make_project():
    return write_project
