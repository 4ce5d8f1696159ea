"""Tests for the severity-partitioned finding store."""

import pytest
from kiln_core.validation.store import FindingStore


class TestRecord:
    def test_partitions_by_severity(self):
        store = FindingStore()
        store.record("PASS", "config", "ok")
        store.record("WARN", "terraform", "env missing", fix="set it", kind="environment_unset")
        store.record("FAIL", "app", "no app/", kind="structural_absence")

        assert [f.message for f in store.passed] == ["ok"]
        assert [f.message for f in store.warnings] == ["env missing"]
        assert [f.message for f in store.failed] == ["no app/"]
        assert store.warnings[0].fix == "set it"
        assert store.failed[0].kind == "structural_absence"

    def test_insertion_order_preserved(self):
        store = FindingStore()
        for i in range(5):
            store.record("FAIL", "deploy", f"failure {i}")

        assert [f.message for f in store.all("FAIL")] == [f"failure {i}" for i in range(5)]

    def test_unknown_severity_rejected(self):
        store = FindingStore()
        with pytest.raises(ValueError):
            store.record("INFO", "config", "nope")  # type: ignore[arg-type]

    def test_fix_defaults_to_none(self):
        store = FindingStore()
        finding = store.record("PASS", "config", "ok")
        assert finding.fix is None
        assert finding.kind is None


class TestQueries:
    def test_counts(self):
        store = FindingStore()
        store.record("PASS", "config", "a")
        store.record("PASS", "config", "b")
        store.record("WARN", "terraform", "c")

        assert store.counts() == {"pass": 2, "warn": 1, "fail": 0}
        assert len(store) == 3

    def test_all_is_restartable(self):
        store = FindingStore()
        store.record("WARN", "app", "x")
        store.record("WARN", "app", "y")

        warnings = store.all("WARN")
        assert list(warnings) == list(warnings)

    def test_all_is_a_snapshot(self):
        store = FindingStore()
        store.record("PASS", "config", "a")
        snapshot = store.all("PASS")
        store.record("PASS", "config", "b")

        assert len(snapshot) == 1
        assert len(store.all("PASS")) == 2

    def test_has_failures_ignores_warnings(self):
        store = FindingStore()
        for _ in range(5):
            store.record("WARN", "terraform", "w")
        assert not store.has_failures

        store.record("FAIL", "terraform", "f")
        assert store.has_failures


class TestReport:
    def test_to_report_orders_by_severity(self):
        store = FindingStore()
        store.record("FAIL", "app", "f")
        store.record("PASS", "config", "p")
        store.record("WARN", "deploy", "w")

        report = store.to_report()
        assert report.summary == {"pass": 1, "warn": 1, "fail": 1}
        assert [f.severity for f in report.findings] == ["PASS", "WARN", "FAIL"]
