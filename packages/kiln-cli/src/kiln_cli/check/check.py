import sys
from typing import Optional

import click


@click.command("check")
@click.option(
    "--root",
    type=click.Path(path_type=str, file_okay=False, exists=True),
    default=".",
    show_default=True,
    help="Project root to validate.",
)
@click.option(
    "--fix",
    "apply_fix",
    is_flag=True,
    help="Reserved; findings are reported, never repaired.",
)
@click.option("--verbose", is_flag=True, help="Log each check as it runs.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["terminal", "yaml"], case_sensitive=False),
    default="terminal",
    show_default=True,
    help="Report format.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for terraform validate (default: no limit, or KILN_SYNTAX_TIMEOUT).",
)
def check(root: str, apply_fix: bool, verbose: bool, fmt: str, timeout: Optional[float]) -> None:
    """Validate a scaffolded project tree against its naming and layout conventions."""
    from rich.console import Console
    from rich.markup import escape

    console = Console()

    try:
        from kiln_core.log import configure_logging, get_logger
        from kiln_core.settings import KilnSettings
        from kiln_core.validation.pipeline import build_probe, exit_status, run_validation
        from kiln_core.validation.report import render_report, render_yaml

        configure_logging(verbose)
        if apply_fix:
            get_logger("cli").info("--fix has no effect; findings are reported, never repaired")
        settings = KilnSettings.from_env().with_timeout(timeout)

        if fmt.lower() == "terminal":
            console.print("[bold cyan]🧪 kiln project validation[/bold cyan]")
            console.print(f"[blue]Validating project setup in {escape(root)}...[/blue]")

        store = run_validation(root, probe=build_probe(settings))

        if fmt.lower() == "yaml":
            render_yaml(store, sys.stdout)
        else:
            render_report(store, console)

        status = exit_status(store)
    except Exception as e:
        console.print(f"[red]Validation script error: {escape(str(e))}[/red]")
        sys.exit(1)

    sys.exit(status)
