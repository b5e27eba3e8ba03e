from __future__ import annotations

import json
import shutil
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from kickstart.catalog import Template, TemplateCatalog  # noqa: E402
from kickstart.scaffold import ProjectScaffolder  # noqa: E402

TEMPLATE_MANIFEST = {
    "name": "vue-ts",
    "version": "0.0.0",
    "private": True,
    "scripts": {"dev": "vite", "build": "vue-tsc && vite build"},
    "dependencies": {"vue": "^3.4.0"},
}


class FakeCloner:
    """Stand-in for git that copies local directories by repository key."""

    def __init__(self, sources: dict[str, Path]) -> None:
        self.sources = sources
        self.calls: list[tuple[str, Path]] = []

    def clone(self, repository: str, destination: Path) -> None:
        self.calls.append((repository, destination))
        shutil.copytree(self.sources[repository], destination)


@pytest.fixture()
def template_manifest() -> dict:
    return dict(TEMPLATE_MANIFEST)


@pytest.fixture()
def template_tree(tmp_path: Path) -> Path:
    source = tmp_path / "sources" / "vue-ts"
    (source / ".git" / "objects").mkdir(parents=True)
    (source / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    (source / "src").mkdir()
    (source / "src" / "main.ts").write_text("console.log('hi')\n", encoding="utf-8")
    (source / "package.json").write_text(json.dumps(TEMPLATE_MANIFEST, indent=2), encoding="utf-8")
    return source


@pytest.fixture()
def bare_tree(tmp_path: Path) -> Path:
    source = tmp_path / "sources" / "bare"
    source.mkdir(parents=True)
    (source / "README.md").write_text("# bare\n", encoding="utf-8")
    return source


@pytest.fixture()
def catalog() -> TemplateCatalog:
    return TemplateCatalog(
        [
            Template(
                name="vue-ts",
                description="Vue starter",
                repository="local://vue-ts",
                post_clone_instructions=("npm install", "npm run dev"),
            ),
            Template(name="bare", description="Nothing but a readme", repository="local://bare"),
        ]
    )


@pytest.fixture()
def cloner(template_tree: Path, bare_tree: Path) -> FakeCloner:
    return FakeCloner({"local://vue-ts": template_tree, "local://bare": bare_tree})


@pytest.fixture()
def scaffolder(cloner: FakeCloner) -> ProjectScaffolder:
    return ProjectScaffolder(cloner=cloner)


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory
