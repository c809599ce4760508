# SPDX-License-Identifier: MIT
"""In-memory model of a Content Patcher content pack.

A content pack is one manifest plus an ordered list of patches. The classes
here only hold data and defaults; validation lives in
:mod:`cpmaker.validator` and serialization in :mod:`cpmaker.serializer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

# Unique ID of the Content Patcher framework mod
CONTENT_PATCHER_ID = "Pathoschild.ContentPatcher"

# Baseline SMAPI version written to new manifests
DEFAULT_MINIMUM_API_VERSION = "4.0.0"

DEFAULT_PACK_VERSION = "1.0.0"

# Content Patcher format version used when a project does not specify one
DEFAULT_CONTENT_FORMAT = "1.30.0"


@dataclass
class ContentPackFor:
    """The framework mod that loads this content pack.

    Attributes:
        unique_id: Unique ID of the framework mod
        minimum_version: Minimum framework version required (None if unset)
    """

    unique_id: str = CONTENT_PATCHER_ID
    minimum_version: Optional[str] = None


@dataclass
class Manifest:
    """Identity and compatibility metadata for a content pack.

    Attributes:
        name: Display name of the pack
        author: Pack author
        version: Pack version
        description: Short description
        unique_id: Unique ID in ``Namespace.ModName`` form
        minimum_api_version: Minimum SMAPI version
        update_keys: Update keys (e.g. ``Nexus:1234``)
        content_pack_for: The framework mod this pack targets
    """

    name: str = ""
    author: str = ""
    version: str = DEFAULT_PACK_VERSION
    description: str = ""
    unique_id: str = ""
    minimum_api_version: str = DEFAULT_MINIMUM_API_VERSION
    update_keys: list[str] = field(default_factory=list)
    content_pack_for: Optional[ContentPackFor] = field(default_factory=ContentPackFor)


@dataclass
class Patch:
    """A single change instruction in content.json.

    Attributes:
        action: Kind of change (EditData, EditImage, Load, ...)
        target: Asset or data path the change applies to
        fields: Action-specific payload; None values are treated as absent
        when: Conditions that must all hold for the change to apply
    """

    action: str = ""
    target: str = ""
    fields: dict[str, Any] = field(default_factory=dict)
    when: Optional[dict[str, str]] = None


@dataclass
class ContentPack:
    """A manifest and its ordered changes.

    Attributes:
        manifest: The pack manifest
        changes: Patches in application order
        format: Content Patcher format version for content.json (None to omit)
    """

    manifest: Manifest = field(default_factory=Manifest)
    changes: list[Patch] = field(default_factory=list)
    format: Optional[str] = None
