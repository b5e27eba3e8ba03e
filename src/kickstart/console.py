"""Terminal output shared by the CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .catalog import TemplateCatalog
from .scaffold import ScaffoldResult

__all__ = [
    "configure_logging",
    "print_catalog",
    "print_error",
    "print_summary",
    "print_unknown_template",
]

# soft wrap keeps long names and shell commands on one line
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """Route ``kickstart`` log records to stderr through rich.

    ``verbosity`` 0 shows warnings, 1 adds info and 2 or more adds debug
    records. Repeated calls only adjust the level.
    """

    logger = logging.getLogger("kickstart")
    logger.setLevel(_LEVELS.get(verbosity, logging.DEBUG))
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def print_catalog(catalog: TemplateCatalog, out: Console | None = None) -> None:
    """Print every template with its description and repository."""

    out = out or console
    out.print("[green]Available templates:[/green]\n")
    for template in catalog:
        out.print(f"[cyan]📦 {escape(template.name)}[/cyan]")
        out.print(f"   {escape(template.description)}")
        out.print(f"[bright_black]   Repository: {escape(template.repository)}[/bright_black]\n")


def print_unknown_template(name: str, catalog: TemplateCatalog, out: Console | None = None) -> None:
    """Report ``name`` on stderr and list the valid choices on ``out``."""

    out = out or console
    err_console.print(f'[red]Template "{escape(name)}" not found.[/red]')
    out.print("[yellow]Available templates:[/yellow]")
    for template in catalog:
        out.print(f"[cyan]  {escape(template.name)}: {escape(template.description)}[/cyan]")


def print_error(message: str, detail: object | None = None) -> None:
    if detail is None:
        err_console.print(f"[red]{escape(message)}[/red]")
        return
    err_console.print(f"[red]{escape(message)}[/red] {escape(str(detail))}")


def print_summary(result: ScaffoldResult, out: Console | None = None) -> None:
    """Print the success banner and the commands to run next."""

    out = out or console
    template_name = escape(result.template.name)
    project_name = escape(result.project_name)

    out.print(f"[green]✔ {template_name} project created successfully![/green]")
    out.print(f'\n[green]✨ Created project "{project_name}" using {template_name} template[/green]')
    out.print("\nNext steps:")
    out.print(f"[cyan]  cd {project_name}[/cyan]")
    for instruction in result.template.post_clone_instructions:
        out.print(f"[cyan]  {escape(instruction)}[/cyan]")
