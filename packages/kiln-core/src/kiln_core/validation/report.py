"""Terminal and YAML rendering of a finished validation run."""

from __future__ import annotations

from typing import TextIO

import yaml
from rich.console import Console
from rich.markup import escape

from kiln_core.models.finding import Finding
from kiln_core.validation.store import FindingStore

NEXT_STEPS = (
    "Infrastructure deployment (terraform apply)",
    "SonicJS application setup",
    "Database migrations",
    "Production deployment",
)


def _print_findings(console: Console, findings: tuple[Finding, ...], color: str, with_fix: bool) -> None:
    for finding in findings:
        console.print(f"[{color}]  • {escape(finding.category)}: {escape(finding.message)}[/{color}]")
        if with_fix and finding.fix:
            console.print(f"[blue]    Fix: {escape(finding.fix)}[/blue]")


def render_report(store: FindingStore, console: Console | None = None) -> None:
    """Print passed, warning and failed findings in that order, then the closing banner."""
    console = console or Console()

    console.print("\n[bold cyan]Validation Results Summary[/bold cyan]")
    console.print()

    if store.passed:
        console.print("[green]✅ PASSED VALIDATIONS:[/green]")
        _print_findings(console, store.passed, "green", with_fix=False)
        console.print()

    if store.warnings:
        console.print("[yellow]⚠️  WARNINGS:[/yellow]")
        _print_findings(console, store.warnings, "yellow", with_fix=True)
        console.print()

    if store.failed:
        console.print("[red]❌ FAILED VALIDATIONS:[/red]")
        _print_findings(console, store.failed, "red", with_fix=True)
        console.print()
        return

    console.print("[green]🎉 All validations passed! Project is ready for deployment.[/green]")
    console.print()
    console.print("[cyan]🚀 READY FOR:[/cyan]")
    for step in NEXT_STEPS:
        console.print(f"[cyan]  • {step}[/cyan]")


def render_yaml(store: FindingStore, stream: TextIO) -> None:
    """Dump the run as a YAML report (summary + findings)."""
    report = store.to_report()
    yaml.safe_dump(report.model_dump(), stream, default_flow_style=False, sort_keys=False, allow_unicode=True)
