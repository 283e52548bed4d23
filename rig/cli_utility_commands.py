"""Utility CLI commands - version, transforms."""
import typer
from rich.console import Console
from rich.table import Table

from rig import __version__
from rig.template.transforms import Transform

# Module-level console instance (will be set by register function)
console: Console = Console()


def version():
    """Show Rig version."""
    console.print(f"Rig v{__version__} - Generate new projects from templates")


def transforms():
    """List the transforms placeholders can apply, with their accepted names."""
    table = Table(title="Transforms")
    table.add_column("Transform", style="cyan")
    table.add_column("Names")

    for transform in Transform:
        if transform is Transform.IDENTITY:
            continue
        table.add_row(transform.value, ", ".join(transform.names))

    console.print(table)


def register_utility_commands(
    app: typer.Typer,
    shared_console: Console,
):
    """Register utility commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(version)
    app.command()(transforms)
