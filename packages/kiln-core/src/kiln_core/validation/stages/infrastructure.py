from kiln_core.validation import predicates
from kiln_core.validation.layout import TERRAFORM_FILES, TERRAFORM_OUTPUTS_FILE
from kiln_core.validation.store import FindingStore

from .base import BaseStage

REQUIRED_ENV_VARS = ("TF_VAR_cloudflare_api_token", "CF_ACCOUNT_ID", "CF_ZONE_ID")

# outputs from the retired root + admin worker split
LEGACY_HOSTNAME_OUTPUTS = ("root_hostname", "admin_hostname")


class InfrastructureStage(BaseStage):
    CATEGORY = "terraform"
    TITLE = "Infrastructure"

    def check(self, store: FindingStore) -> None:
        for name in TERRAFORM_FILES:
            if self.layout.terraform_file(name).exists():
                self.ok(store, f"Terraform file exists: {name}")
            else:
                self.fail(store, f"Missing Terraform file: {name}", kind="structural_absence")

        if self.probe.syntax_check(self.layout.infra_dir):
            self.ok(store, "Terraform configuration is valid")
        else:
            self.fail(
                store,
                "Terraform validation failed",
                "Check terraform validate output for syntax errors",
                kind="external_tool_failure",
            )

        for env_var in REQUIRED_ENV_VARS:
            if self.probe.env_is_set(env_var):
                self.ok(store, f"Environment variable set: {env_var}")
            else:
                self.warn(
                    store,
                    f"Environment variable not set: {env_var}",
                    "Set in your shell or CI/CD environment",
                    kind="environment_unset",
                )

        outputs_path = self.layout.terraform_file(TERRAFORM_OUTPUTS_FILE)
        if not outputs_path.exists():
            # already reported as a missing file above
            return

        outputs = outputs_path.read_text(encoding="utf-8")
        if predicates.mentions_any(outputs, LEGACY_HOSTNAME_OUTPUTS):
            self.fail(
                store,
                "outputs.tf contains old dual-hostname references",
                "Update to use single hostname variable",
                kind="legacy_pattern",
            )
        else:
            self.ok(store, "outputs.tf uses correct single-hostname architecture")
