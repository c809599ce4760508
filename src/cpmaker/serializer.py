# SPDX-License-Identifier: MIT
"""Serialize content packs to and from manifest.json and content.json.

The writers follow Content Patcher's key names and ordering. Serialization
does not require a valid pack, so drafts can be previewed or saved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from jsonschema import Draft202012Validator, ValidationError

from .model import ContentPack, ContentPackFor, Manifest, Patch
from .result import ContentPackError, ValidationIssue
from .schema import (
    CONTENT_DOCUMENT_SCHEMA,
    CONTENT_FILENAME,
    MANIFEST_DOCUMENT_SCHEMA,
    MANIFEST_FILENAME,
    RESERVED_PATCH_KEYS,
)
from .storage import LocalStorage, PackStorage

logger = logging.getLogger(__name__)

JSON_INDENT = 2


class PackWriteError(ContentPackError):
    """Raised when a pack document cannot be written."""

    pass


class PackLoadError(ContentPackError):
    """Raised when a pack document cannot be parsed.

    Attributes:
        document: Name of the offending document (e.g. "content.json")
        issues: Shape problems found in the document (empty for syntax errors)
    """

    def __init__(self, document: str, message: str, issues: Optional[list[ValidationIssue]] = None):
        self.document = document
        self.issues = issues or []
        super().__init__(f"{document}: {message}")


@dataclass
class SavedPack:
    """Paths written by save_pack.

    Attributes:
        directory: The pack directory
        manifest_path: Path of the written manifest.json
        content_path: Path of the written content.json
    """

    directory: Path
    manifest_path: Path
    content_path: Path


def _dumps(document: dict[str, Any]) -> str:
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)


# =============================================================================
# Model -> JSON
# =============================================================================


def content_pack_for_to_dict(content_pack_for: ContentPackFor) -> dict[str, Any]:
    document: dict[str, Any] = {"UniqueID": content_pack_for.unique_id}
    if content_pack_for.minimum_version is not None:
        document["MinimumVersion"] = content_pack_for.minimum_version
    return document


def manifest_to_dict(manifest: Manifest) -> dict[str, Any]:
    """Render a manifest with every declared field, in SMAPI's key order."""
    content_pack_for = manifest.content_pack_for
    return {
        "Name": manifest.name,
        "Author": manifest.author,
        "Version": manifest.version,
        "Description": manifest.description,
        "UniqueID": manifest.unique_id,
        "MinimumApiVersion": manifest.minimum_api_version,
        "UpdateKeys": list(manifest.update_keys) if manifest.update_keys is not None else None,
        "ContentPackFor": (
            content_pack_for_to_dict(content_pack_for) if content_pack_for is not None else None
        ),
    }


def patch_to_dict(patch: Patch) -> dict[str, Any]:
    """Render one change entry.

    ``Action`` and ``Target`` come first, then the action-specific fields in
    insertion order, then ``When``. Top-level values that are None are left
    out; values nested inside a field are written as-is, since Content Patcher
    gives ``null`` meaning there (an ``Entries`` value of ``null`` deletes the
    entry).
    """
    document: dict[str, Any] = {}
    if patch.action is not None:
        document["Action"] = patch.action
    if patch.target is not None:
        document["Target"] = patch.target

    for key, value in patch.fields.items():
        if value is None or key in RESERVED_PATCH_KEYS:
            continue
        document[key] = value

    if patch.when is not None:
        document["When"] = dict(patch.when)
    return document


def content_to_dict(changes: Iterable[Patch], format: Optional[str] = None) -> dict[str, Any]:
    """Render the content.json document for a list of changes."""
    document: dict[str, Any] = {}
    if format is not None:
        document["Format"] = format
    document["Changes"] = [patch_to_dict(patch) for patch in changes]
    return document


def manifest_to_json(manifest: Manifest) -> str:
    """Return the manifest.json text for a manifest."""
    return _dumps(manifest_to_dict(manifest))


def content_to_json(changes: Iterable[Patch], format: Optional[str] = None) -> str:
    """Return the content.json text for a list of changes.

    Example:
        >>> print(content_to_json([Patch(action="Load", target="Portraits/Abigail")]))
        {
          "Changes": [
            {
              "Action": "Load",
              "Target": "Portraits/Abigail"
            }
          ]
        }
    """
    return _dumps(content_to_dict(changes, format))


def pack_to_json(pack: ContentPack) -> tuple[str, str]:
    """Return the (manifest.json, content.json) texts for a pack."""
    return manifest_to_json(pack.manifest), content_to_json(pack.changes, pack.format)


def save_pack(
    pack: ContentPack,
    directory: str | Path,
    storage: Optional[PackStorage] = None,
) -> SavedPack:
    """Write manifest.json and content.json into a directory.

    The directory and any missing parents are created. Each file replaces any
    existing file of the same name; the two writes are independent, so a
    failure on content.json leaves the new manifest.json in place.

    Args:
        pack: The content pack to write (validity is not checked)
        directory: Target directory
        storage: Filesystem adapter (defaults to LocalStorage)

    Returns:
        SavedPack with the written paths

    Raises:
        PackWriteError: If the directory or either file cannot be written
    """
    storage = storage or LocalStorage()
    directory = Path(directory)
    manifest_text, content_text = pack_to_json(pack)

    try:
        storage.ensure_directory(directory)
    except OSError as e:
        raise PackWriteError(f"Cannot create directory {directory}: {e}") from e

    manifest_path = directory / MANIFEST_FILENAME
    content_path = directory / CONTENT_FILENAME

    for path, text in ((manifest_path, manifest_text), (content_path, content_text)):
        try:
            storage.write_text(path, text)
        except OSError as e:
            raise PackWriteError(f"Failed to write {path}: {e}") from e

    logger.info("Saved content pack %r to %s", pack.manifest.unique_id, directory)
    return SavedPack(directory=directory, manifest_path=manifest_path, content_path=content_path)


# =============================================================================
# JSON -> Model
# =============================================================================


def _json_path_from_error(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable field path."""
    if not error.absolute_path:
        return "<root>"
    parts = []
    for part in error.absolute_path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "required":
        missing = [name for name in error.validator_value if name not in error.instance]
        return f"Missing required field: {', '.join(missing)}"

    if error.validator == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = " or ".join(expected)
        actual = type(error.instance).__name__
        return f"Expected {expected}, got {actual}"

    return error.message


def _check_document(document: Any, schema: dict, name: str) -> None:
    validator = Draft202012Validator(schema)
    issues = [
        ValidationIssue(
            field_path=_json_path_from_error(error),
            message=_format_error_message(error),
            code="schema",
        )
        for error in validator.iter_errors(document)
    ]
    if issues:
        raise PackLoadError(
            name,
            f"Document does not match the expected shape ({len(issues)} problem(s)): {issues[0]}",
            issues,
        )


def _loads(text: str, name: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PackLoadError(name, f"Invalid JSON syntax: {e}") from e


def manifest_from_dict(document: dict[str, Any]) -> Manifest:
    """Build a Manifest from a parsed manifest.json document.

    Missing strings become empty so that validation reports them, rather
    than being filled in with defaults.
    """
    content_pack_for = document.get("ContentPackFor")
    return Manifest(
        name=document.get("Name") or "",
        author=document.get("Author") or "",
        version=document.get("Version") or "",
        description=document.get("Description") or "",
        unique_id=document.get("UniqueID") or "",
        minimum_api_version=document.get("MinimumApiVersion") or "",
        update_keys=list(document.get("UpdateKeys") or []),
        content_pack_for=(
            ContentPackFor(
                unique_id=content_pack_for.get("UniqueID") or "",
                minimum_version=content_pack_for.get("MinimumVersion"),
            )
            if content_pack_for is not None
            else None
        ),
    )


def patch_from_dict(entry: dict[str, Any]) -> Patch:
    """Build a Patch from one change entry.

    Keys other than Action, Target and When become fields; null values are
    dropped.
    """
    when = entry.get("When")
    return Patch(
        action=entry.get("Action", ""),
        target=entry.get("Target", ""),
        fields={
            key: value
            for key, value in entry.items()
            if key not in RESERVED_PATCH_KEYS and value is not None
        },
        when=dict(when) if when is not None else None,
    )


def content_from_dict(document: dict[str, Any]) -> tuple[list[Patch], Optional[str]]:
    """Build the change list and format version from a content.json document."""
    changes = [patch_from_dict(entry) for entry in document.get("Changes", [])]
    return changes, document.get("Format")


def parse_manifest_json(text: str) -> Manifest:
    """Parse manifest.json text.

    Raises:
        PackLoadError: If the text is not valid JSON or has the wrong shape
    """
    document = _loads(text, MANIFEST_FILENAME)
    _check_document(document, MANIFEST_DOCUMENT_SCHEMA, MANIFEST_FILENAME)
    return manifest_from_dict(document)


def parse_content_json(text: str) -> tuple[list[Patch], Optional[str]]:
    """Parse content.json text into (changes, format).

    Raises:
        PackLoadError: If the text is not valid JSON or has the wrong shape
    """
    document = _loads(text, CONTENT_FILENAME)
    _check_document(document, CONTENT_DOCUMENT_SCHEMA, CONTENT_FILENAME)
    return content_from_dict(document)


def load_pack(directory: str | Path, storage: Optional[PackStorage] = None) -> ContentPack:
    """Read a content pack from a directory containing manifest.json and content.json.

    Raises:
        FileNotFoundError: If either document is missing
        PackLoadError: If either document cannot be parsed
    """
    storage = storage or LocalStorage()
    directory = Path(directory)

    texts: dict[str, str] = {}
    for name in (MANIFEST_FILENAME, CONTENT_FILENAME):
        try:
            texts[name] = storage.read_text(directory / name)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"{name} not found in {directory}") from e

    manifest = parse_manifest_json(texts[MANIFEST_FILENAME])
    changes, format = parse_content_json(texts[CONTENT_FILENAME])
    logger.debug("Loaded %d change(s) from %s", len(changes), directory)
    return ContentPack(manifest=manifest, changes=changes, format=format)
