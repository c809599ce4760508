# SPDX-License-Identifier: MIT
"""Filesystem access for reading and writing pack documents.

The serializer only reaches the filesystem through a ``PackStorage``, so the
conversion logic can be exercised against an in-memory store.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class PackStorage(Protocol):
    """Minimal file operations needed to save and load a pack."""

    def ensure_directory(self, path: Path) -> None: ...

    def write_text(self, path: Path, text: str) -> None: ...

    def read_text(self, path: Path) -> str: ...


class LocalStorage:
    """PackStorage backed by the local filesystem.

    Writes go to a temporary file in the destination directory which then
    replaces the target, so a reader never sees a partially written file.
    """

    encoding = "utf-8"

    def ensure_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="\n") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %s (%d chars)", path, len(text))

    def read_text(self, path: Path) -> str:
        # utf-8-sig tolerates the BOM some editors add to JSON files
        return path.read_text(encoding="utf-8-sig")
