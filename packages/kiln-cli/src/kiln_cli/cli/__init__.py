import click
from kiln_cli.check.check import check
from kiln_cli.names.names import names


@click.group()
def cli():
    """kiln: scaffold naming and project health checks."""
    pass


# add cli commands here

cli.add_command(check)
cli.add_command(names)
