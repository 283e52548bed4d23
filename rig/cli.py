#!/usr/bin/env python3
"""Rig CLI - Generate new projects from templates hosted in git repositories."""

import typer
from rich.console import Console

from rig.cli_generate_commands import register_generate_commands
from rig.cli_utility_commands import register_utility_commands

app = typer.Typer(
    name="rig",
    help="""Rig - Generate new projects from templates

Clones a template repository, fills in its $placeholders$ and writes a new
project tree.

Quick start:
  rig new owner/template-repo            # Prompt for parameters, then generate
  rig new owner/template-repo -Y         # Accept every template default
  rig new ./local-template --dry-run     # Preview the generated layout
  rig render 'Hello, $name;upper$' -p name=world

More commands: rig --help
""",
    add_completion=False,
)

console = Console()

# Attach modular subcommands
register_generate_commands(app, console)
register_utility_commands(app, console)


def main():
    app()


if __name__ == "__main__":
    main()
