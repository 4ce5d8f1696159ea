from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["PASS", "WARN", "FAIL"]

FindingKind = Literal[
    "structural_absence",
    "convention_mismatch",
    "legacy_pattern",
    "environment_unset",
    "external_tool_failure",
    "unexpected_error",
]


class Finding(BaseModel):
    """A single validation finding with severity, category, message, and an optional fix."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    severity: Severity
    category: str
    message: str
    fix: str | None = None
    kind: FindingKind | None = None


class Report(BaseModel):
    """Complete validation report with summary counts and findings."""

    model_config = ConfigDict(extra="ignore")

    summary: dict[str, int]
    findings: list[Finding] = Field(default_factory=list)
