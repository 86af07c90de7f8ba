"""Language detection by project marker files."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from prepush.core.log import logger

# Marker file → language identifier
MARKERS = {
    "go.mod": "go",
    "pyproject.toml": "python",
    "setup.py": "python",
    "package.json": "typescript",
    "Cargo.toml": "rust",
}

# Directories never searched for nested projects
IGNORED_DIRS = {"node_modules", "vendor", "testdata", "target", "dist", "build"}


class Detection(BaseModel):
    """A language project root found in the repository."""

    language: str
    path: Path

    model_config = ConfigDict(frozen=True)


def detect(root: str | os.PathLike) -> list[Detection]:
    """Find language project roots below root.

    Walks the tree top-down in sorted order, skipping hidden and
    dependency directories. A directory holding several markers of
    the same language is reported once.

    Returns:
        Detections ordered by path, root first
    """
    root = Path(root)
    detections: list[Detection] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames
            if not d.startswith(".") and d not in IGNORED_DIRS
        )
        seen: set[str] = set()
        for filename in sorted(filenames):
            language = MARKERS.get(filename)
            if language is None or language in seen:
                continue
            seen.add(language)
            detections.append(
                Detection(language=language, path=Path(dirpath))
            )

    logger.debug("Detected languages", count=len(detections), root=str(root))
    return detections
