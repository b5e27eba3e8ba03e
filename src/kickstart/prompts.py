"""Interactive prompts used when the command line leaves a value out."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.text import TextType

from .catalog import Template, TemplateCatalog
from .config import validate_project_name

__all__ = ["ask_project_name", "select_template"]


class _Prompt(Prompt):
    """Prompt that reports end of an injected input stream as ``EOFError``."""

    @classmethod
    def get_input(cls, console: Console, prompt: TextType, password: bool, stream: TextIO | None = None) -> str:
        value = console.input(prompt, password=password, stream=stream)
        if stream is not None:
            # readline() returns "" only at end of input
            if not value:
                raise EOFError("no answer given")
            value = value.rstrip("\r\n")
        return value


def select_template(
    catalog: TemplateCatalog,
    *,
    console: Console,
    stream: TextIO | None = None,
) -> Template:
    """Ask the user to pick one template; blocks until a valid answer."""

    console.print("Which template would you like to use?")
    for index, template in enumerate(catalog, start=1):
        console.print(f"  {index}. {escape(template.name)} - {escape(template.description)}")

    by_index = {str(index): template for index, template in enumerate(catalog, start=1)}
    choices = list(by_index) + catalog.names()
    answer = _Prompt.ask(
        "Template",
        console=console,
        choices=choices,
        show_choices=False,
        default="1",
        stream=stream,
    )
    return by_index.get(answer) or catalog.get(answer)


def ask_project_name(
    *,
    console: Console,
    cwd: str | Path | None = None,
    stream: TextIO | None = None,
) -> str:
    """Prompt for a project name until one is non-empty and unused.

    Interrupting the prompt propagates ``KeyboardInterrupt`` or ``EOFError``
    to the caller.
    """

    while True:
        answer = _Prompt.ask("What is your project name?", console=console, stream=stream).strip()
        problem = validate_project_name(answer, cwd)
        if problem is None:
            return answer
        console.print(f"[red]>> {problem}[/red]")
