# SPDX-License-Identifier: MIT
"""Model, validation and serialization for Content Patcher content packs.

This package provides utilities for building Content Patcher packs:
- An in-memory model of manifest.json and content.json
- Structural and compatibility validation with field-path-tagged errors
- Serialization to and from the two JSON documents

Example:
    >>> from cpmaker import ContentPack, Manifest, Patch, validate_pack, save_pack
    >>>
    >>> pack = ContentPack(
    ...     manifest=Manifest(name="Test", author="A", version="1.0.0",
    ...                       description="d", unique_id="Author.Test"),
    ...     changes=[Patch(action="Load", target="Assets/x.png")],
    ... )
    >>> validate_pack(pack).is_valid
    True
    >>> save_pack(pack, "dist/[CP] Test")  # doctest: +SKIP
"""

__version__ = "0.1.0"

from .model import (
    CONTENT_PATCHER_ID,
    DEFAULT_CONTENT_FORMAT,
    DEFAULT_MINIMUM_API_VERSION,
    ContentPack,
    ContentPackFor,
    Manifest,
    Patch,
)
from .result import (
    ContentPackError,
    PackValidationError,
    ValidationIssue,
    ValidationResult,
)
from .rules import ADVISORY_RULES, COMPATIBILITY_RULES, Rule
from .schema import (
    CONTENT_FILENAME,
    MANIFEST_FIELDS,
    MANIFEST_FILENAME,
    PATCH_FIELDS,
    UNIQUE_ID_PATTERN,
    FieldSpec,
)
from .serializer import (
    PackLoadError,
    PackWriteError,
    SavedPack,
    content_to_json,
    load_pack,
    manifest_to_json,
    pack_to_json,
    parse_content_json,
    parse_manifest_json,
    save_pack,
)
from .validator import check_fields, validate_pack, validate_pack_strict

__all__ = [
    # Model
    "ContentPack",
    "ContentPackFor",
    "Manifest",
    "Patch",
    "CONTENT_PATCHER_ID",
    "DEFAULT_CONTENT_FORMAT",
    "DEFAULT_MINIMUM_API_VERSION",
    # Schema
    "FieldSpec",
    "MANIFEST_FIELDS",
    "PATCH_FIELDS",
    "UNIQUE_ID_PATTERN",
    "MANIFEST_FILENAME",
    "CONTENT_FILENAME",
    # Validation
    "check_fields",
    "validate_pack",
    "validate_pack_strict",
    "ValidationIssue",
    "ValidationResult",
    "Rule",
    "COMPATIBILITY_RULES",
    "ADVISORY_RULES",
    # Serialization
    "manifest_to_json",
    "content_to_json",
    "pack_to_json",
    "parse_manifest_json",
    "parse_content_json",
    "save_pack",
    "load_pack",
    "SavedPack",
    # Errors
    "ContentPackError",
    "PackValidationError",
    "PackLoadError",
    "PackWriteError",
]
