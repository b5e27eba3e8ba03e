"""Command line interface for kickstart."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence, TextIO

from . import __version__
from .catalog import DEFAULT_CATALOG, Template, TemplateCatalog
from .config import ProjectRequest, Settings
from .console import (
    configure_logging,
    console,
    print_catalog,
    print_error,
    print_summary,
    print_unknown_template,
)
from .errors import KickstartError, ProjectNameError, TemplateNotFoundError
from .prompts import ask_project_name, select_template
from .scaffold import ProjectScaffolder

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kickstart",
        description="CLI tool for scaffolding projects from templates",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show progress logs (repeat for debug output)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="create a new project from a template")
    create_parser.add_argument("project_name", nargs="?", metavar="project-name", help="Name of the project")
    create_parser.add_argument(
        "-t",
        "--template",
        help="Template to use ({})".format(", ".join(DEFAULT_CATALOG.names())),
    )

    subparsers.add_parser("list", help="list all available templates")

    return parser


def _resolve_template(
    name: str | None,
    catalog: TemplateCatalog,
    stdin: TextIO | None,
) -> Template:
    if name:
        return catalog.get(name)
    print_catalog(catalog)
    return select_template(catalog, console=console, stream=stdin)


def _handle_create(
    args: argparse.Namespace,
    *,
    catalog: TemplateCatalog,
    scaffolder: ProjectScaffolder | None,
    stdin: TextIO | None,
) -> int:
    try:
        template = _resolve_template(args.template, catalog, stdin)
    except TemplateNotFoundError as exc:
        print_unknown_template(exc.name, exc.catalog)
        return 1

    project_name = args.project_name
    if not project_name:
        project_name = ask_project_name(console=console, cwd=Path.cwd(), stream=stdin)

    try:
        request = ProjectRequest.from_name(project_name, template)
        scaffolder = scaffolder or ProjectScaffolder(Settings.from_env())
        with console.status(f"Creating {template.name} project..."):
            result = scaffolder.create(request)
    except ProjectNameError as exc:
        print_error(str(exc))
        return 1
    except (KickstartError, OSError, ValueError) as exc:
        LOGGER.debug("project creation failed", exc_info=True)
        print_error("Error creating project:", exc)
        return 1

    print_summary(result)
    return 0


def _handle_list(catalog: TemplateCatalog) -> int:
    print_catalog(catalog)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    catalog: TemplateCatalog = DEFAULT_CATALOG,
    scaffolder: ProjectScaffolder | None = None,
    stdin: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "create":
            return _handle_create(args, catalog=catalog, scaffolder=scaffolder, stdin=stdin)
        if args.command == "list":
            return _handle_list(catalog)
    except (KeyboardInterrupt, EOFError):
        print_error("Aborted.")
        return 1

    parser.error("no command provided")
    return 2


def run() -> None:  # pragma: no cover
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
