"""Shared utilities for Rig CLI modules."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console

from rig.template.transforms import normalize

PARAM_SEPARATORS = ("=", ":")


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from rig.core.logger import set_verbose
    from rig.core.logger import setup_file_logging as _setup_file_logging

    set_verbose(verbose)
    if log_file or verbose:
        _setup_file_logging(log_file=log_file, verbose=verbose)


def parse_param_assignments(assignments: List[str]) -> Dict[str, str]:
    """Parse repeated ``-p key=value`` (or ``key:value``) options.

    Raises:
        ValueError: If an assignment has no separator or an empty key
    """
    params: Dict[str, str] = {}
    for raw in assignments:
        for sep in PARAM_SEPARATORS:
            if sep in raw:
                key, value = raw.split(sep, 1)
                key = key.strip()
                if key:
                    params[key] = value
                    break
        else:
            raise ValueError(f"Invalid parameter {raw!r}. Expect key=value.")
    return params


def collect_params(params: Dict[str, str], name: Optional[str] = None) -> Dict[str, str]:
    """Prompt for every parameter, offering its default.

    The ``name`` parameter is taken from ``--name`` when given instead of
    prompting for it.
    """
    for key, default in list(params.items()):
        if key == "name" and name is not None:
            params[key] = name
            continue
        answer = typer.prompt(key, default=default, show_default=True)
        if answer.strip():
            params[key] = answer.strip()
    return params


def get_output_dir(output: Optional[str], project_name: str, cwd: Optional[Path] = None) -> Path:
    """Decide where the project is generated.

    Absolute ``--output`` values are used as given, relative ones are
    normalized below the working directory. Without ``--output`` the
    normalized project name is used.
    """
    cwd = cwd or Path.cwd()
    if output:
        path = Path(output)
        if path.is_absolute():
            return path
        return cwd / normalize(output)
    return cwd / normalize(project_name)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[blue]{prefix}[/blue] {message}")
