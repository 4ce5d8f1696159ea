from kiln_core.validation import predicates
from kiln_core.validation.store import FindingStore

from .base import BaseStage

PLACEHOLDERS = ("{{D1_DATABASE_ID}}", "{{KV_NAMESPACE_ID}}")
BINDING_SECTIONS = ("d1_databases", "kv_namespaces", "r2_buckets")


class GatewayConfigStage(BaseStage):
    CATEGORY = "wrangler"
    TITLE = "Wrangler configuration"

    def check(self, store: FindingStore) -> None:
        gateway_path = self.layout.gateway_path
        if not gateway_path.exists():
            self.fail(store, "wrangler.toml not found", kind="structural_absence")
            return

        text = gateway_path.read_text(encoding="utf-8")

        for placeholder in PLACEHOLDERS:
            if predicates.has_placeholder(text, placeholder):
                self.ok(store, f"Placeholder found: {placeholder}")
            else:
                self.fail(
                    store,
                    f"Missing placeholder: {placeholder}",
                    "Ensure wrangler.toml uses placeholders for CI substitution",
                    kind="convention_mismatch",
                )

        for binding in BINDING_SECTIONS:
            if predicates.has_binding(text, binding):
                self.ok(store, f"Binding section found: {binding}")
            else:
                self.fail(
                    store,
                    f"Missing binding section: {binding}",
                    "Add required resource bindings to wrangler.toml",
                    kind="structural_absence",
                )

        if predicates.has_worker_name(text):
            self.ok(store, "Worker name defined")
        else:
            self.fail(
                store,
                "Worker name not defined",
                'Add name = "project-name" to wrangler.toml',
                kind="structural_absence",
            )
