"""Exception types raised by the kickstart workflow."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .catalog import TemplateCatalog

__all__ = [
    "CloneError",
    "KickstartError",
    "ManifestError",
    "ProjectExistsError",
    "ProjectNameError",
    "TemplateNotFoundError",
]


class KickstartError(RuntimeError):
    """Base class for errors raised while scaffolding a project."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateNotFoundError(KickstartError, LookupError):
    """Raised when a template name is not part of the catalog."""

    def __init__(self, name: str, catalog: "TemplateCatalog") -> None:
        super().__init__(f'Template "{name}" not found.')
        self.name = name
        self.catalog = catalog


class ProjectNameError(KickstartError, ValueError):
    """Raised when a project name cannot be used."""


class ProjectExistsError(ProjectNameError):
    """Raised when the target directory is already taken."""

    def __init__(self, path: Path) -> None:
        super().__init__(f'Directory "{path.name}" already exists')
        self.path = path


class CloneError(KickstartError):
    """Raised when the template repository cannot be cloned."""

    def __init__(self, repository: str, detail: str, *, returncode: int | None = None) -> None:
        message = f"failed to clone {repository}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.repository = repository
        self.detail = detail
        self.returncode = returncode


class ManifestError(KickstartError):
    """Raised when the project manifest cannot be read or rewritten."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"invalid manifest {path}: {reason}")
        self.path = path
        self.reason = reason
