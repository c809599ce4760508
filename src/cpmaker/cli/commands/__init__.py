# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from __future__ import annotations

from pathlib import Path

from ...config import PROJECT_FILENAME, load_project
from ...model import ContentPack
from ...schema import MANIFEST_FILENAME
from ...serializer import load_pack


def load_source(path: Path) -> ContentPack:
    """Load a pack from a project (contentpack.toml) or a built pack directory.

    Raises:
        FileNotFoundError: If the path holds neither
        ContentPackError: If the files cannot be parsed
    """
    if path.is_file():
        if path.name == MANIFEST_FILENAME:
            return load_pack(path.parent)
        return load_project(path)

    if (path / PROJECT_FILENAME).exists():
        return load_project(path)
    if (path / MANIFEST_FILENAME).exists():
        return load_pack(path)

    raise FileNotFoundError(f"No {PROJECT_FILENAME} or {MANIFEST_FILENAME} found in {path}")


from . import build, preview, validate

__all__ = ["build", "preview", "validate", "load_source"]
