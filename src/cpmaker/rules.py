# SPDX-License-Identifier: MIT
"""Compatibility rules for Content Patcher content packs.

Each rule is a plain function that takes the whole pack and yields zero or
more issues. Rules never depend on each other; the validator runs every rule
in order and appends whatever they yield to one shared result.

``COMPATIBILITY_RULES`` produce errors. ``ADVISORY_RULES`` produce warnings
that do not affect validity.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Iterator

from .model import CONTENT_PATCHER_ID, ContentPack
from .result import ValidationIssue
from .schema import RESERVED_PATCH_KEYS, UNIQUE_ID_PATTERN
from .version import compare_versions, is_valid_version

Rule = Callable[[ContentPack], Iterable[ValidationIssue]]

_UNIQUE_ID_RE = re.compile(UNIQUE_ID_PATTERN)


def _is_blank(value: object) -> bool:
    return value is None or not str(value).strip()


def unique_id_format(pack: ContentPack) -> Iterator[ValidationIssue]:
    """UniqueID must look like Namespace.ModName."""
    unique_id = pack.manifest.unique_id
    # Blank IDs are already reported as missing
    if _is_blank(unique_id):
        return
    if _UNIQUE_ID_RE.fullmatch(unique_id) is None:
        yield ValidationIssue(
            field_path="Manifest.UniqueID",
            message=(
                f"UniqueID '{unique_id}' should be in Namespace.ModName form "
                "(letters, digits, '_', '.', '-' only)"
            ),
            code="unique-id-format",
        )


def content_pack_for_target(pack: ContentPack) -> Iterator[ValidationIssue]:
    """ContentPackFor must name the Content Patcher mod exactly."""
    content_pack_for = pack.manifest.content_pack_for
    if content_pack_for is None:
        return
    if content_pack_for.unique_id != CONTENT_PATCHER_ID:
        yield ValidationIssue(
            field_path="Manifest.ContentPackFor",
            message=f"ContentPackFor.UniqueID must be {CONTENT_PATCHER_ID}",
            code="content-pack-for",
        )


def edit_data_target(pack: ContentPack) -> Iterator[ValidationIssue]:
    """EditData changes must name a target."""
    for index, patch in enumerate(pack.changes):
        if not isinstance(patch.action, str):
            continue
        if patch.action.lower() == "editdata" and _is_blank(patch.target):
            yield ValidationIssue(
                field_path=f"Changes[{index}].Target",
                message="EditData requires a Target",
                code="edit-data-target",
            )


def _version_warning(path: str, name: str, value: str) -> ValidationIssue:
    return ValidationIssue(
        field_path=path,
        message=f"{name} '{value}' is not a valid version (MAJOR.MINOR[.PATCH])",
        code="version-format",
    )


def minimum_api_version_format(pack: ContentPack) -> Iterator[ValidationIssue]:
    value = pack.manifest.minimum_api_version
    if not _is_blank(value) and not is_valid_version(value):
        yield _version_warning("Manifest.MinimumApiVersion", "MinimumApiVersion", value)


def manifest_version_format(pack: ContentPack) -> Iterator[ValidationIssue]:
    value = pack.manifest.version
    if not _is_blank(value) and not is_valid_version(value):
        yield _version_warning("Manifest.Version", "Version", value)


def content_format(pack: ContentPack) -> Iterator[ValidationIssue]:
    if pack.format is not None and not is_valid_version(pack.format):
        yield _version_warning("Format", "Format", pack.format)


def content_pack_for_minimum_version(pack: ContentPack) -> Iterator[ValidationIssue]:
    """MinimumVersion must parse and must not predate the content format."""
    content_pack_for = pack.manifest.content_pack_for
    if content_pack_for is None or _is_blank(content_pack_for.minimum_version):
        return

    minimum = content_pack_for.minimum_version
    path = "Manifest.ContentPackFor.MinimumVersion"
    if not is_valid_version(minimum):
        yield _version_warning(path, "MinimumVersion", minimum)
        return

    if pack.format is not None and is_valid_version(pack.format):
        if compare_versions(pack.format, minimum) > 0:
            yield ValidationIssue(
                field_path=path,
                message=(
                    f"Format {pack.format} is newer than MinimumVersion {minimum}; "
                    f"Content Patcher {minimum} cannot load this pack"
                ),
                code="format-newer-than-minimum",
            )


def reserved_field_names(pack: ContentPack) -> Iterator[ValidationIssue]:
    """Fields named like structural keys are shadowed on output."""
    for index, patch in enumerate(pack.changes):
        for key, value in patch.fields.items():
            if key in RESERVED_PATCH_KEYS and value is not None:
                yield ValidationIssue(
                    field_path=f"Changes[{index}].Fields.{key}",
                    message=f"Field '{key}' is reserved and will not be written",
                    code="reserved-field",
                )


def empty_conditions(pack: ContentPack) -> Iterator[ValidationIssue]:
    for index, patch in enumerate(pack.changes):
        if not patch.when:
            continue
        for key, value in patch.when.items():
            if _is_blank(value):
                yield ValidationIssue(
                    field_path=f"Changes[{index}].When.{key}",
                    message=f"Condition '{key}' has no value",
                    code="empty-condition",
                )


COMPATIBILITY_RULES: tuple[Rule, ...] = (
    unique_id_format,
    content_pack_for_target,
    edit_data_target,
)

ADVISORY_RULES: tuple[Rule, ...] = (
    minimum_api_version_format,
    manifest_version_format,
    content_format,
    content_pack_for_minimum_version,
    reserved_field_names,
    empty_conditions,
)
