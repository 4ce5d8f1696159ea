import sys
from typing import Optional

import click


@click.command("names")
@click.argument("domain")
@click.option("--description", type=str, default=None, help="Project description to include.")
def names(domain: str, description: Optional[str]) -> None:
    """Show the naming scheme a domain produces (project, database, bucket, ...)."""
    from kiln_core.naming import derive_project_config
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    console = Console()

    try:
        config = derive_project_config(domain, description)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=f"Naming scheme for {config.domain}")
    table.add_column("Resource", style="cyan")
    table.add_column("Name")

    table.add_row("Project", config.project.name)
    table.add_row("Database", config.resources.database)
    table.add_row("KV namespace", config.resources.kv_namespace or "")
    table.add_row("R2 bucket", config.resources.r2_bucket or "")
    table.add_row("Worker", config.resources.worker or "")
    table.add_row("Hostname", config.resources.hostname)

    console.print(table)
