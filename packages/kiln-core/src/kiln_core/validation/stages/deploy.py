from kiln_core.validation import predicates
from kiln_core.validation.store import FindingStore

from .base import BaseStage
from .gateway import PLACEHOLDERS

SINGLE_APP_MARKER = "working-directory: app"
LEGACY_APP_PATHS = ("apps/admin-sonicjs", "apps/web-astro")


class DeployPipelineStage(BaseStage):
    CATEGORY = "deploy"
    TITLE = "Deploy pipeline"

    def check(self, store: FindingStore) -> None:
        workflow_path = self.layout.deploy_workflow_path
        if not workflow_path.exists():
            self.warn(
                store,
                "GitHub Actions deploy workflow not found",
                f"Create {self.layout.relative(workflow_path)} for automated deployment",
                kind="structural_absence",
            )
            return

        text = workflow_path.read_text(encoding="utf-8")

        if predicates.mentions(text, SINGLE_APP_MARKER) and not predicates.mentions_any(text, LEGACY_APP_PATHS):
            self.ok(store, "Deploy workflow uses single-worker architecture")
        else:
            self.fail(
                store,
                "Deploy workflow still references dual-worker setup",
                "Update deploy.yml to use single app/ directory",
                kind="legacy_pattern",
            )

        if predicates.has_all_placeholders(text, PLACEHOLDERS) and predicates.uses_in_place_substitution(text):
            self.ok(store, "Placeholder substitution logic present")
        else:
            self.fail(
                store,
                "Missing placeholder substitution in deploy workflow",
                "Add sed commands to substitute placeholders in CI",
                kind="convention_mismatch",
            )
