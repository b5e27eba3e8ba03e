"""Scaffold new projects from a small catalog of starter templates.

The package clones a template repository into a fresh directory, strips its
git history and renames the project inside its ``package.json``. The same
workflow is available programmatically through :class:`ProjectScaffolder` and
from the ``kickstart`` command line interface.
"""

from __future__ import annotations

from .catalog import DEFAULT_CATALOG, Template, TemplateCatalog
from .config import ProjectRequest, Settings, validate_project_name
from .errors import (
    CloneError,
    KickstartError,
    ManifestError,
    ProjectExistsError,
    ProjectNameError,
    TemplateNotFoundError,
)
from .scaffold import ProjectScaffolder, ScaffoldResult

__all__ = [
    "CloneError",
    "DEFAULT_CATALOG",
    "KickstartError",
    "ManifestError",
    "ProjectExistsError",
    "ProjectNameError",
    "ProjectRequest",
    "ProjectScaffolder",
    "ScaffoldResult",
    "Settings",
    "Template",
    "TemplateCatalog",
    "TemplateNotFoundError",
    "validate_project_name",
]

__version__ = "1.0.0"
