"""Project generation CLI commands - new, render."""
import tempfile
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from rig.cli_support import (
    collect_params,
    get_output_dir,
    handle_cli_error,
    parse_param_assignments,
    print_info,
    print_success,
    print_warning,
    setup_file_logging,
)
from rig.config.formats import ConfigFormat
from rig.core.config import get_config
from rig.core.errors import RigError
from rig.core.logger import get_logger
from rig.project.generator import PlannedEntry, Project
from rig.services.git_manager import GitManager, normalize_repository_url
from rig.template.engine import Template
from rig.template.placeholder import Style

# Module-level console instance (will be set by register function)
console: Console = Console()
logger = get_logger(__name__)


def _parse_choice(enum_cls, value: str, option: str):
    try:
        return enum_cls(value.lower())
    except ValueError:
        choices = ", ".join(item.value for item in enum_cls)
        raise typer.BadParameter(f"{value!r} is not one of: {choices}", param_hint=option)


def _fetch_template(repository: str, stack: ExitStack) -> Path:
    """Return a local template root, cloning into a temporary directory if needed."""
    local = Path(repository).expanduser()
    if local.is_dir():
        logger.debug(f"Using local template directory {local}")
        return local

    url = normalize_repository_url(repository)
    clone_dir = Path(stack.enter_context(tempfile.TemporaryDirectory(prefix="rig__template")))
    manager = GitManager(timeout=get_config().clone_timeout)
    return manager.clone(url, clone_dir / "template", proxy=manager.find_proxy_url())


def _print_plan(planned: List[PlannedEntry], template_root: Path) -> None:
    table = Table(title="Planned project layout")
    table.add_column("Template entry", style="dim")
    table.add_column("Destination", style="cyan")
    table.add_column("Mode")

    for entry in planned:
        try:
            source = entry.source.relative_to(template_root)
        except ValueError:
            source = entry.source
        mode = "dir" if entry.is_dir else ("copy" if entry.verbatim else "render")
        table.add_row(str(source), str(entry.destination), mode)

    console.print(table)


def new(
    repository: str = typer.Argument(..., help="Template: git URL, owner/repo on GitHub, or a local directory"),
    name: Optional[str] = typer.Option(None, "--name", help="Project name (overrides the template default)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Directory to generate the project in"),
    root: Optional[str] = typer.Option(None, "--root", help="Directory inside the repository where the template lives"),
    config_format: str = typer.Option("toml", "--config-format", help="Defaults file format: toml, yaml or properties"),
    verbatim: Optional[str] = typer.Option(None, "--verbatim", help="Space separated file extensions copied without templating"),
    packaged: bool = typer.Option(False, "--packaged", "-p", help="Render the `package` parameter as a directory tree"),
    yes: bool = typer.Option(False, "--yes", "-Y", "--confirm", help="Use template defaults for every parameter"),
    giter8: bool = typer.Option(False, "--giter8", help="Treat the template as a giter8 template"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the generated layout without writing files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Path to log file"),
):
    """Generate a new project from a template.

    Examples:
        rig new rust-lang/cargo-template --name "My Tool"
        rig new https://github.com/foundweekends/giter8.g8 --giter8 -Y
        rig new ./my-template --dry-run
    """
    setup_file_logging(log_file=log_file or get_config().log_file, verbose=verbose)
    fmt = _parse_choice(ConfigFormat, config_format, "--config-format")
    extensions = verbatim.split() if verbatim else []

    if giter8:
        project = Project.giter8(inner_root=root, verbatim_extensions=extensions)
    else:
        project = Project(
            inner_root=root,
            config_format=fmt,
            force_packaged=packaged,
            verbatim_extensions=extensions,
        )

    try:
        with ExitStack() as stack:
            template_dir = _fetch_template(repository, stack)

            params = project.default_params(template_dir)
            logger.debug(f"Successfully read default parameters: {params}")

            if name is not None:
                params["name"] = name
            if not yes:
                collect_params(params, name)
                logger.debug(f"Parameters updated with user input: {params}")

            project_name = params.get("name", get_config().default_project_name)
            output_dir = get_output_dir(output, project_name)
            if output_dir.exists() and not dry_run:
                print_warning(console, f"{output_dir} already exists, files may be overwritten")

            planned = project.generate(params, template_dir, output_dir, dry_run=dry_run)

            if dry_run:
                print_info(console, f"Dry run: nothing written to {output_dir}")
                _print_plan(planned, project.resolve_root_dir(template_dir))
                return
    except RigError as e:
        handle_cli_error(e, console, verbose)

    print_success(console, f"Project successfully generated: {output_dir}")


def render(
    template: str = typer.Argument(..., help="Template text, e.g. 'Hello, $name;upper$'"),
    param: List[str] = typer.Option([], "--param", "-p", help="Parameter assignment key=value (repeatable)"),
    style: str = typer.Option("content", "--style", "-s", help="Placeholder grammar: content, legacy or path"),
):
    """Render an inline template and print the result.

    Examples:
        rig render 'Hello, $name$!' -p name=Rust
        rig render '$name;format="Camel"$' -s legacy -p 'name=my cool app'
    """
    selected = _parse_choice(Style, style, "--style")
    try:
        params = parse_param_assignments(param)
    except ValueError as e:
        handle_cli_error(e, console)

    rendered = Template(selected, template).render(params)
    console.print(rendered, markup=False, highlight=False, soft_wrap=True)


def register_generate_commands(
    app: typer.Typer,
    shared_console: Console,
):
    """Register project generation commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(new)
    app.command()(render)
