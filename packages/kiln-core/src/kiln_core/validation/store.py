"""Accumulates findings for one validation run, partitioned by severity."""

from __future__ import annotations

from kiln_core.models.finding import Finding, FindingKind, Report, Severity

SEVERITIES: tuple[Severity, ...] = ("PASS", "WARN", "FAIL")

# summary keys, in report order
_SUMMARY_KEYS: dict[Severity, str] = {"PASS": "pass", "WARN": "warn", "FAIL": "fail"}


class FindingStore:
    def __init__(self) -> None:
        self._partitions: dict[Severity, list[Finding]] = {severity: [] for severity in SEVERITIES}

    def record(
        self,
        severity: Severity,
        category: str,
        message: str,
        fix: str | None = None,
        kind: FindingKind | None = None,
    ) -> Finding:
        if severity not in self._partitions:
            raise ValueError(f"Unknown severity: {severity!r}")
        finding = Finding(severity=severity, category=category, message=message, fix=fix, kind=kind)
        self._partitions[severity].append(finding)
        return finding

    def all(self, severity: Severity) -> tuple[Finding, ...]:
        """Findings of one severity in insertion order."""
        return tuple(self._partitions[severity])

    @property
    def passed(self) -> tuple[Finding, ...]:
        return self.all("PASS")

    @property
    def warnings(self) -> tuple[Finding, ...]:
        return self.all("WARN")

    @property
    def failed(self) -> tuple[Finding, ...]:
        return self.all("FAIL")

    @property
    def has_failures(self) -> bool:
        return bool(self._partitions["FAIL"])

    def counts(self) -> dict[str, int]:
        return {_SUMMARY_KEYS[severity]: len(items) for severity, items in self._partitions.items()}

    def to_report(self) -> Report:
        findings = [finding for severity in SEVERITIES for finding in self._partitions[severity]]
        return Report(summary=self.counts(), findings=findings)

    def __len__(self) -> int:
        return sum(len(items) for items in self._partitions.values())
