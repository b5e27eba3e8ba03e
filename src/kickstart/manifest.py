"""Rewrite the ``name`` field of a cloned package manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ManifestError

__all__ = ["load_manifest", "rewrite_manifest_name"]

LOGGER = logging.getLogger(__name__)


def load_manifest(path: Path) -> dict[str, Any]:
    """Parse ``path`` as a JSON object, preserving key order."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(path, f"not valid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    if not isinstance(data, dict):
        raise ManifestError(path, "root must be a JSON object")
    return data


def rewrite_manifest_name(path: Path, name: str, *, indent: int = 2) -> bool:
    """Set the ``name`` key of the manifest at ``path`` to ``name``.

    Every other key keeps its value and position; a manifest without a
    ``name`` key gets one appended. Returns ``False`` without touching the
    filesystem when ``path`` does not exist.
    """

    if not path.is_file():
        LOGGER.debug("no manifest at %s", path)
        return False

    manifest = load_manifest(path)
    previous = manifest.get("name")
    manifest["name"] = name
    path.write_text(json.dumps(manifest, indent=indent, ensure_ascii=False), encoding="utf-8")
    LOGGER.info("renamed manifest %s from %r to %r", path, previous, name)
    return True
