"""Project root detection helpers.

`Path.cwd()` is only consulted by callers; this module works from an explicit start.
"""

from __future__ import annotations

from pathlib import Path

ROOT_MARKERS = (".git", ".commentaryctl.yml", "Cask", "Eldev", ".projectile")


def find_project_root(start: Path) -> Path:
    cur = start.resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        if any((cur / marker).exists() for marker in ROOT_MARKERS):
            return cur
        if cur.parent == cur:
            raise RuntimeError(f"unable to resolve project root from {start}")
        cur = cur.parent


def project_root_for(document_path: Path | None, fallback: Path) -> Path:
    start = document_path if document_path is not None else fallback
    try:
        return find_project_root(start)
    except RuntimeError:
        resolved = start.resolve()
        return resolved.parent if resolved.is_file() else resolved
