"""Thin wrappers around the git command line."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import CloneError

__all__ = ["Cloner", "GitCloner", "remove_vcs_metadata"]

LOGGER = logging.getLogger(__name__)


class Cloner(Protocol):
    """Anything able to materialise ``repository`` at ``destination``."""

    def clone(self, repository: str, destination: Path) -> None:
        ...


@dataclass(slots=True)
class GitCloner:
    """Clone repositories by running ``git clone`` in a subprocess."""

    executable: str = "git"
    depth: int | None = None

    def command(self, repository: str, destination: Path) -> list[str]:
        cmd = [self.executable, "clone"]
        if self.depth is not None:
            cmd += ["--depth", str(self.depth)]
        cmd += [repository, str(destination)]
        return cmd

    def clone(self, repository: str, destination: Path) -> None:
        """Clone ``repository`` into ``destination``.

        Any failure is reported as :class:`CloneError`. A partially created
        ``destination`` is left in place.
        """

        cmd = self.command(repository, destination)
        LOGGER.debug("running %s", " ".join(cmd))
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as exc:
            raise CloneError(repository, f"git executable '{self.executable}' not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or (exc.stdout or "").strip()
            raise CloneError(repository, detail, returncode=exc.returncode) from exc
        LOGGER.info("cloned %s into %s", repository, destination)


def remove_vcs_metadata(project_dir: Path, dirname: str = ".git") -> bool:
    """Delete ``project_dir / dirname`` recursively.

    Returns ``True`` when something was removed. A missing directory is not an
    error.
    """

    metadata = project_dir / dirname
    if not metadata.exists():
        LOGGER.debug("no %s directory in %s", dirname, project_dir)
        return False
    if metadata.is_dir() and not metadata.is_symlink():
        shutil.rmtree(metadata)
    else:
        # worktrees and submodules use a .git file pointing elsewhere
        metadata.unlink()
    LOGGER.info("removed %s", metadata)
    return True
