from kiln_core.data.project import load_project_config
from kiln_core.naming import database_name, derive_project_name, is_valid_domain
from kiln_core.validation.store import FindingStore

from .base import BaseStage


class ConfigurationStage(BaseStage):
    CATEGORY = "config"
    TITLE = "Project configuration"

    def check(self, store: FindingStore) -> None:
        config_path = self.layout.config_path
        if not config_path.exists():
            self.fail(
                store,
                f"{config_path.name} not found",
                'Run: node scripts/setup.js yourdomain.com "Your Description"',
                kind="structural_absence",
            )
            return

        config = load_project_config(config_path)
        self.logger.debug("Loaded %s for %s", config_path, config.domain)

        if is_valid_domain(config.domain):
            self.ok(store, f"Domain format valid: {config.domain}")
        else:
            self.fail(
                store,
                f"Invalid domain format: {config.domain}",
                'Use lowercase domain like "example.com"',
                kind="convention_mismatch",
            )

        expected_project = derive_project_name(config.domain)
        if config.project.name == expected_project:
            self.ok(store, "Project name follows domain convention")
        else:
            self.fail(
                store,
                "Project name doesn't match domain",
                f"Expected: {expected_project}, Got: {config.project.name}",
                kind="convention_mismatch",
            )

        expected_db = database_name(config.project.name)
        if config.resources.database == expected_db:
            self.ok(store, "Database name follows convention")
        else:
            self.fail(
                store,
                "Database name doesn't follow convention",
                f"Expected: {expected_db}, Got: {config.resources.database}",
                kind="convention_mismatch",
            )

        if config.resources.hostname == config.domain:
            self.ok(store, "Single hostname architecture confirmed")
        else:
            self.fail(
                store,
                "Hostname architecture mismatch",
                "Should use single hostname with /admin routes",
                kind="convention_mismatch",
            )
