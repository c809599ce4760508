# SPDX-License-Identifier: MIT
"""Load a content pack project from contentpack.toml.

Example project file::

    [pack]
    name = "Better Crops"
    author = "Jane"
    version = "1.0.0"
    description = "Nicer crop sprites"
    unique_id = "Jane.BetterCrops"
    update_keys = ["Nexus:1234"]
    format = "2.0.0"

    [pack.content_pack_for]
    minimum_version = "2.0.0"

    [[changes]]
    Action = "Load"
    Target = "TileSheets/crops"
    FromFile = "assets/crops.png"

    [[changes]]
    Action = "EditData"
    Target = "Data/Objects"
    When = { Season = "spring" }
    Entries = { "MyItem" = "..." }

Manifest settings use snake_case keys under ``[pack]``. Each ``[[changes]]``
entry is written exactly like a content.json change.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .model import (
    CONTENT_PATCHER_ID,
    DEFAULT_CONTENT_FORMAT,
    DEFAULT_MINIMUM_API_VERSION,
    DEFAULT_PACK_VERSION,
    ContentPack,
    ContentPackFor,
    Manifest,
)
from .result import ContentPackError
from .serializer import patch_from_dict

logger = logging.getLogger(__name__)

PROJECT_FILENAME = "contentpack.toml"


class PackConfigError(ContentPackError):
    """Raised when a project file is invalid."""

    pass


def _string(table: dict[str, Any], key: str, default: str = "") -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise PackConfigError(f"[pack].{key} must be a string, got {type(value).__name__}")
    return value


def pack_from_dict(project: dict[str, Any]) -> ContentPack:
    """Create a ContentPack from a parsed contentpack.toml dictionary.

    Raises:
        PackConfigError: If a section or value has the wrong type
    """
    table = project.get("pack", {})
    if not isinstance(table, dict):
        raise PackConfigError("[pack] must be a table")

    update_keys = table.get("update_keys", [])
    if not isinstance(update_keys, list) or not all(isinstance(k, str) for k in update_keys):
        raise PackConfigError("[pack].update_keys must be a list of strings")

    target_table = table.get("content_pack_for", {})
    if not isinstance(target_table, dict):
        raise PackConfigError("[pack.content_pack_for] must be a table")
    minimum_version = target_table.get("minimum_version")
    if minimum_version is not None and not isinstance(minimum_version, str):
        raise PackConfigError("[pack.content_pack_for].minimum_version must be a string")

    manifest = Manifest(
        name=_string(table, "name"),
        author=_string(table, "author"),
        version=_string(table, "version", DEFAULT_PACK_VERSION),
        description=_string(table, "description"),
        unique_id=_string(table, "unique_id"),
        minimum_api_version=_string(table, "minimum_api_version", DEFAULT_MINIMUM_API_VERSION),
        update_keys=list(update_keys),
        content_pack_for=ContentPackFor(
            unique_id=target_table.get("unique_id", CONTENT_PATCHER_ID),
            minimum_version=minimum_version,
        ),
    )

    entries = project.get("changes", [])
    if not isinstance(entries, list):
        raise PackConfigError("changes must be an array of tables ([[changes]])")

    changes = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise PackConfigError(f"changes[{index}] must be a table")
        for key in ("Action", "Target"):
            if key in entry and not isinstance(entry[key], str):
                raise PackConfigError(
                    f"changes[{index}].{key} must be a string, got {type(entry[key]).__name__}"
                )
        when = entry.get("When")
        if when is not None:
            if not isinstance(when, dict):
                raise PackConfigError(f"changes[{index}].When must be a table")
            for name, value in when.items():
                if not isinstance(value, str):
                    raise PackConfigError(
                        f"changes[{index}].When.{name} must be a string, got {type(value).__name__}"
                    )
        changes.append(patch_from_dict(entry))

    return ContentPack(
        manifest=manifest,
        changes=changes,
        format=_string(table, "format", DEFAULT_CONTENT_FORMAT),
    )


def load_project(project_path: str | Path) -> ContentPack:
    """Load a ContentPack from a contentpack.toml file or the directory holding one.

    Raises:
        FileNotFoundError: If the project file does not exist
        PackConfigError: If the file is not valid TOML or has invalid values
    """
    path = Path(project_path)
    if path.is_dir():
        path = path / PROJECT_FILENAME

    if not path.exists():
        raise FileNotFoundError(f"{PROJECT_FILENAME} not found: {path}")

    try:
        with open(path, "rb") as f:
            project = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise PackConfigError(f"Invalid TOML syntax in {path}: {e}") from e

    pack = pack_from_dict(project)
    logger.debug("Loaded project %s with %d change(s)", path, len(pack.changes))
    return pack


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the nearest directory containing contentpack.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Raises:
        PackConfigError: If no project file is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for candidate in (current, *current.parents):
        if (candidate / PROJECT_FILENAME).exists():
            return candidate

    raise PackConfigError(f"No {PROJECT_FILENAME} found in {current} or any parent directory")
