"""Project scaffolding from catalog templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .catalog import Template
from .config import ProjectRequest, Settings
from .git import Cloner, GitCloner, remove_vcs_metadata
from .manifest import rewrite_manifest_name

__all__ = ["ProjectScaffolder", "ScaffoldResult"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ScaffoldResult:
    """Outcome of a successful :meth:`ProjectScaffolder.create` call."""

    template: Template
    project_name: str
    path: Path
    vcs_removed: bool
    manifest_updated: bool


@dataclass(slots=True)
class ProjectScaffolder:
    """Materialise a new project directory from a template repository."""

    settings: Settings
    cloner: Cloner

    def __init__(self, settings: Settings | None = None, cloner: Cloner | None = None) -> None:
        self.settings = settings or Settings()
        self.cloner = cloner or GitCloner(
            executable=self.settings.git_executable,
            depth=self.settings.clone_depth,
        )

    def create(self, request: ProjectRequest, cwd: str | Path | None = None) -> ScaffoldResult:
        """Clone ``request.template`` into a new directory and prepare it.

        The steps run in order and the first failure propagates. Completed
        steps are not rolled back, so a failed manifest rewrite leaves the
        cloned directory behind.
        """

        target = request.ensure_available(cwd).resolve()
        template = request.template

        LOGGER.info("creating %s from template %s", target, template.name)
        self.cloner.clone(template.repository, target)

        vcs_removed = remove_vcs_metadata(target, self.settings.vcs_dirname)
        manifest_updated = rewrite_manifest_name(
            target / self.settings.manifest_filename,
            request.project_name,
            indent=self.settings.manifest_indent,
        )

        return ScaffoldResult(
            template=template,
            project_name=request.project_name,
            path=target,
            vcs_removed=vcs_removed,
            manifest_updated=manifest_updated,
        )
