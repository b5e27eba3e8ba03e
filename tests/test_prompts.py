from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from kickstart.catalog import TemplateCatalog
from kickstart.prompts import ask_project_name, select_template


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console(output: io.StringIO) -> Console:
    return Console(file=output, width=120, color_system=None)


def test_select_template_by_name(catalog: TemplateCatalog, console: Console, output: io.StringIO):
    template = select_template(catalog, console=console, stream=io.StringIO("bare\n"))
    assert template.name == "bare"
    assert "1. vue-ts - Vue starter" in output.getvalue()
    assert "2. bare - Nothing but a readme" in output.getvalue()


def test_select_template_by_number(catalog: TemplateCatalog, console: Console):
    template = select_template(catalog, console=console, stream=io.StringIO("2\n"))
    assert template.name == "bare"


def test_select_template_reprompts_on_unknown_choice(catalog: TemplateCatalog, console: Console):
    template = select_template(catalog, console=console, stream=io.StringIO("react\n7\nvue-ts\n"))
    assert template.name == "vue-ts"


def test_ask_project_name_validates(tmp_path: Path, console: Console, output: io.StringIO):
    (tmp_path / "taken").mkdir()
    stream = io.StringIO("\ntaken\n  fresh  \n")

    assert ask_project_name(console=console, cwd=tmp_path, stream=stream) == "fresh"
    text = output.getvalue()
    assert "Project name is required" in text
    assert "Directory already exists" in text


def test_ask_project_name_end_of_input(tmp_path: Path, console: Console):
    with pytest.raises(EOFError):
        ask_project_name(console=console, cwd=tmp_path, stream=io.StringIO("\n"))


def test_select_template_blank_line_picks_first(catalog: TemplateCatalog, console: Console):
    template = select_template(catalog, console=console, stream=io.StringIO("\n"))
    assert template.name == "vue-ts"


def test_select_template_end_of_input(catalog: TemplateCatalog, console: Console):
    with pytest.raises(EOFError):
        select_template(catalog, console=console, stream=io.StringIO(""))
