"""Configuration helpers shared by the scaffold workflow and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .catalog import Template
from .errors import ProjectExistsError, ProjectNameError

__all__ = ["ProjectRequest", "Settings", "validate_project_name"]


def validate_project_name(name: str, cwd: str | Path | None = None) -> str | None:
    """Return why ``name`` cannot be used as a new project, or ``None``.

    A name is rejected when it is empty or when any filesystem entry with that
    name already exists relative to ``cwd`` (the current directory by default).
    """

    if not name:
        return "Project name is required"
    base = Path(cwd) if cwd is not None else Path.cwd()
    if (base / name).exists():
        return "Directory already exists"
    return None


@dataclass(slots=True, frozen=True)
class ProjectRequest:
    """A single scaffold request.

    Attributes
    ----------
    project_name:
        Name of the directory to create. It is also written into the
        ``name`` field of the cloned manifest.
    template:
        The catalog entry the project is created from.
    """

    project_name: str
    template: Template

    @classmethod
    def from_name(cls, name: str | None, template: Template) -> "ProjectRequest":
        """Build a request, rejecting a missing or blank ``name``.

        Surrounding whitespace is removed. Collisions are not checked here: the
        scaffolder re-checks the target right before cloning.
        """

        project_name = (name or "").strip()
        if not project_name:
            raise ProjectNameError("Project name is required")
        return cls(project_name=project_name, template=template)

    def target(self, cwd: str | Path | None = None) -> Path:
        """Return the directory this request will create."""

        base = Path(cwd) if cwd is not None else Path.cwd()
        return base / self.project_name

    def ensure_available(self, cwd: str | Path | None = None) -> Path:
        """Return :meth:`target`, raising if something already lives there."""

        target = self.target(cwd)
        if target.exists():
            raise ProjectExistsError(target)
        return target


@dataclass(slots=True)
class Settings:
    """Runtime knobs for the scaffold workflow.

    ``git_executable`` and ``clone_depth`` may be overridden through the
    ``KICKSTART_GIT`` and ``KICKSTART_CLONE_DEPTH`` environment variables.
    """

    git_executable: str = "git"
    clone_depth: int | None = None
    manifest_filename: str = "package.json"
    vcs_dirname: str = ".git"
    manifest_indent: int = 2

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        settings = cls()

        git_executable = env.get("KICKSTART_GIT", "").strip()
        if git_executable:
            settings.git_executable = git_executable

        raw_depth = env.get("KICKSTART_CLONE_DEPTH", "").strip()
        if raw_depth:
            try:
                depth = int(raw_depth)
            except ValueError as exc:
                raise ValueError(f"KICKSTART_CLONE_DEPTH must be an integer, got '{raw_depth}'") from exc
            if depth < 1:
                raise ValueError("KICKSTART_CLONE_DEPTH must be a positive integer")
            settings.clone_depth = depth

        return settings
