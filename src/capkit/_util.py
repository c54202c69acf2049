"""Terminal styling and Node-style module resolution helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

import click

PathLike = Union[str, Path]


def emoji(symbol: str, fallback: str) -> str:
    """Return *symbol*, or *fallback* on Windows consoles that mangle emoji."""
    return fallback if sys.platform == "win32" else symbol


def strong(text: str) -> str:
    return click.style(text, bold=True)


def weak(text: str) -> str:
    return click.style(text, dim=True)


def success(text: str) -> str:
    return click.style(text, fg="green")


def failure(text: str) -> str:
    return click.style(text, fg="red")


def resolve_node(root: PathLike, *path_segments: str) -> Optional[Path]:
    """Resolve a file inside an installed npm package the way Node does.

    Walks from *root* up to the filesystem root, checking
    ``<dir>/node_modules/<path_segments...>`` at each level.

    Args:
        root: Directory to start the search from (usually the project root).
        path_segments: Package name followed by a path inside the package,
            e.g. ``("@capacitor/core", "package.json")``.

    Returns:
        The first matching file path, or ``None`` if no ancestor has it.
    """
    relative = Path(*(seg for part in path_segments for seg in part.split("/")))
    current = Path(root).resolve()
    while True:
        candidate = current / "node_modules" / relative
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
