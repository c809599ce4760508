# SPDX-License-Identifier: MIT
"""Field schemas for content pack entities and documents.

Two kinds of schema live here:

- ``FieldSpec`` tables describe each model type's fields for the structural
  validator: the attribute name, the Content Patcher field name used in error
  paths, whether a value is required, and the nested table (if any).
- JSON Schemas describe the shape of manifest.json and content.json when they
  are read back from disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Pattern for manifest unique IDs (Namespace.ModName)
UNIQUE_ID_PATTERN = r"^[A-Za-z0-9_.-]+\.[A-Za-z0-9_.-]+$"

MANIFEST_FILENAME = "manifest.json"
CONTENT_FILENAME = "content.json"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Declared constraints for one field of a model type.

    Attributes:
        attr: Python attribute name on the model instance
        json_name: Field name in the Content Patcher documents
        required: Whether a missing, empty or blank value is an error
        nested: Field table of a nested entity to recurse into
    """

    attr: str
    json_name: str
    required: bool = False
    nested: Optional[tuple[FieldSpec, ...]] = None


CONTENT_PACK_FOR_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("unique_id", "UniqueID", required=True),
    FieldSpec("minimum_version", "MinimumVersion"),
)

MANIFEST_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("name", "Name", required=True),
    FieldSpec("author", "Author", required=True),
    FieldSpec("version", "Version", required=True),
    FieldSpec("description", "Description", required=True),
    FieldSpec("unique_id", "UniqueID", required=True),
    FieldSpec("minimum_api_version", "MinimumApiVersion", required=True),
    FieldSpec("update_keys", "UpdateKeys"),
    FieldSpec("content_pack_for", "ContentPackFor", required=True, nested=CONTENT_PACK_FOR_FIELDS),
)

PATCH_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("action", "Action", required=True),
    FieldSpec("target", "Target", required=True),
    FieldSpec("fields", "Fields"),
    FieldSpec("when", "When"),
)

# Keys content.json reserves on every change entry
RESERVED_PATCH_KEYS = ("Action", "Target", "When")

_OPTIONAL_STRING = {"type": ["string", "null"]}

# JSON Schema for manifest.json as read from disk. Only the shape is checked
# here; required values and compatibility are checked on the loaded model.
MANIFEST_DOCUMENT_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Content Pack Manifest",
    "description": "SMAPI manifest.json for a Content Patcher content pack",
    "type": "object",
    "properties": {
        "Name": _OPTIONAL_STRING,
        "Author": _OPTIONAL_STRING,
        "Version": _OPTIONAL_STRING,
        "Description": _OPTIONAL_STRING,
        "UniqueID": _OPTIONAL_STRING,
        "MinimumApiVersion": _OPTIONAL_STRING,
        "UpdateKeys": {
            "type": ["array", "null"],
            "items": {"type": "string"},
        },
        "ContentPackFor": {
            "type": ["object", "null"],
            "properties": {
                "UniqueID": _OPTIONAL_STRING,
                "MinimumVersion": _OPTIONAL_STRING,
            },
        },
    },
    "additionalProperties": True,  # SMAPI defines fields this tool does not model
}

# JSON Schema for content.json as read from disk
CONTENT_DOCUMENT_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Content Patcher Content",
    "description": "content.json change list for a Content Patcher content pack",
    "type": "object",
    "required": ["Changes"],
    "properties": {
        "Format": {"type": "string"},
        "Changes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "Action": {"type": "string"},
                    "Target": {"type": "string"},
                    "When": {
                        "type": "object",
                        "additionalProperties": {"type": "string"},
                    },
                },
            },
        },
    },
    "additionalProperties": True,
}


def get_manifest_document_schema() -> dict:
    """Return a copy of the manifest.json JSON schema."""
    return MANIFEST_DOCUMENT_SCHEMA.copy()


def get_content_document_schema() -> dict:
    """Return a copy of the content.json JSON schema."""
    return CONTENT_DOCUMENT_SCHEMA.copy()
