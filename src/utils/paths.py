"""Path utility helpers."""
from __future__ import annotations

from pathlib import Path


def normalise_path(path: Path) -> Path:
    """Return an absolute path with user expansion and forward slashes."""

    return Path(str(path).replace("\\", "/")).expanduser().resolve()


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and its parents if missing; existing directories are fine."""

    path.mkdir(parents=True, exist_ok=True)
    return path
