# SPDX-License-Identifier: MIT
"""Content pack validation.

Validation runs in two layers and never stops at the first problem:

1. Structural checks driven by the ``FieldSpec`` tables in
   :mod:`cpmaker.schema`. One generic routine handles every model type.
2. Compatibility rules from :mod:`cpmaker.rules`, which see the whole pack.

All findings are returned as data in a :class:`ValidationResult`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .model import ContentPack
from .result import PackValidationError, ValidationIssue, ValidationResult
from .rules import ADVISORY_RULES, COMPATIBILITY_RULES, Rule
from .schema import MANIFEST_FIELDS, PATCH_FIELDS, FieldSpec

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    """Return True for None, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def check_fields(
    entity: Any,
    fields: Sequence[FieldSpec],
    prefix: str,
) -> list[ValidationIssue]:
    """Check an entity against its declared field table.

    Fields are visited in declaration order. Each required field that is
    missing, empty or whitespace-only yields one issue. Present nested
    entities are checked with the prefix extended by the field name.

    Args:
        entity: The model instance to check
        fields: The entity type's field table
        prefix: Path prefix for issue field paths (e.g. "Changes[2]")

    Returns:
        Issues in field order; empty if the entity is structurally sound

    Example:
        >>> from cpmaker.model import Patch
        >>> [i.field_path for i in check_fields(Patch(action="Load"), PATCH_FIELDS, "Changes[0]")]
        ['Changes[0].Target']
    """
    issues: list[ValidationIssue] = []

    for spec in fields:
        path = f"{prefix}.{spec.json_name}" if prefix else spec.json_name
        value = getattr(entity, spec.attr, None)

        if spec.required and _is_missing(value):
            issues.append(
                ValidationIssue(
                    field_path=path,
                    message=f"The {spec.json_name} field is required.",
                    code="required",
                )
            )
            continue

        if spec.nested is not None and value is not None:
            issues.extend(check_fields(value, spec.nested, path))

    return issues


def validate_pack(
    pack: ContentPack,
    rules: Optional[Sequence[Rule]] = None,
    advisories: Optional[Sequence[Rule]] = None,
) -> ValidationResult:
    """Validate a content pack.

    Runs the structural checks on the manifest and on every change, the
    non-empty change list check, every compatibility rule and every advisory
    rule. All checks run even after earlier ones fail.

    Args:
        pack: The content pack to validate
        rules: Compatibility rules producing errors (defaults to COMPATIBILITY_RULES)
        advisories: Rules producing warnings (defaults to ADVISORY_RULES)

    Returns:
        A new ValidationResult

    Example:
        >>> from cpmaker.model import ContentPack
        >>> result = validate_pack(ContentPack())
        >>> result.is_valid
        False
    """
    if rules is None:
        rules = COMPATIBILITY_RULES
    if advisories is None:
        advisories = ADVISORY_RULES

    result = ValidationResult()

    result.errors.extend(check_fields(pack.manifest, MANIFEST_FIELDS, "Manifest"))

    if not pack.changes:
        result.errors.append(
            ValidationIssue(
                field_path="Changes",
                message="At least one change is required",
                code="empty-changes",
            )
        )

    for index, patch in enumerate(pack.changes):
        result.errors.extend(check_fields(patch, PATCH_FIELDS, f"Changes[{index}]"))

    for rule in rules:
        result.errors.extend(rule(pack))

    for rule in advisories:
        result.warnings.extend(rule(pack))

    logger.debug(
        "Validated pack %r: %d error(s), %d warning(s)",
        pack.manifest.unique_id,
        len(result.errors),
        len(result.warnings),
    )
    return result


def validate_pack_strict(pack: ContentPack) -> ValidationResult:
    """Validate a pack and raise an exception if it is invalid.

    Returns:
        The ValidationResult (which may still carry warnings)

    Raises:
        PackValidationError: If the pack has any errors
    """
    result = validate_pack(pack)
    if not result.is_valid:
        raise PackValidationError(result.errors)
    return result
