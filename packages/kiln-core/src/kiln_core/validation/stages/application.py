from kiln_core.data.project import load_package_manifest
from kiln_core.validation.layout import MIGRATION_SUFFIX
from kiln_core.validation.store import FindingStore

from .base import BaseStage

REQUIRED_SCRIPTS = ("dev", "build", "deploy", "db:migrate")


class ApplicationStructureStage(BaseStage):
    CATEGORY = "app"
    TITLE = "Application structure"

    def check(self, store: FindingStore) -> None:
        layout = self.layout

        if layout.legacy_apps_dir.exists():
            self.fail(
                store,
                "Old apps/ directory found",
                "Remove apps/ directory - should use single app/ directory",
                kind="legacy_pattern",
            )
            return

        if not layout.app_dir.is_dir():
            self.fail(store, "app/ directory not found", "Create app/ directory structure", kind="structural_absence")
            return

        self.ok(store, "Single app/ directory structure confirmed")

        for path in (layout.manifest_path, layout.gateway_path, layout.migrations_dir):
            rel = layout.relative(path)
            if path.exists():
                self.ok(store, f"Required file/directory exists: {rel}")
            else:
                self.fail(
                    store,
                    f"Missing required file/directory: {rel}",
                    "Create missing application structure",
                    kind="structural_absence",
                )

        if layout.manifest_path.exists():
            manifest = load_package_manifest(layout.manifest_path)
            for script in REQUIRED_SCRIPTS:
                if manifest.has_script(script):
                    self.ok(store, f"Required script defined: {script}")
                else:
                    self.fail(
                        store,
                        f"Missing package.json script: {script}",
                        "Add required npm scripts to package.json",
                        kind="structural_absence",
                    )

        if layout.migrations_dir.is_dir():
            migrations = [p for p in layout.migrations_dir.iterdir() if p.name.endswith(MIGRATION_SUFFIX)]
            if migrations:
                self.ok(store, f"Database migrations found: {len(migrations)} files")
            else:
                self.warn(
                    store,
                    "No database migration files found",
                    "Create initial database schema migration",
                    kind="structural_absence",
                )
