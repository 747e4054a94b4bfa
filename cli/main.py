#!/usr/bin/env python3
"""
deviceid CLI - Deterministic Device Identifiers

Main entrypoint for the deviceid command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import compute

# Initialize Typer app
app = typer.Typer(
    name="deviceid",
    help="Deterministic device identifier CLI",
    add_completion=False,
)

console = Console()

app.command("compute")(compute.compute_command)
app.command("algorithms")(compute.algorithms_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]deviceid CLI[/bold]", f"v{__version__}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
