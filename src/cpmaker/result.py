# SPDX-License-Identifier: MIT
"""Validation result and error types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class ContentPackError(Exception):
    """Base exception for content pack errors."""

    pass


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single validation error or warning.

    Attributes:
        field_path: Path to the offending field (e.g. "Changes[2].Target")
        message: Human-readable message
        code: Short machine-readable identifier of the check (if any)
    """

    field_path: str
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[{self.field_path}] {self.message}"


@dataclass
class ValidationResult:
    """Result of validating a content pack.

    Attributes:
        errors: Problems that block publishing
        warnings: Advisory problems that do not affect validity
    """

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if no errors were found."""
        return not self.errors


class PackValidationError(ContentPackError):
    """Raised when strict validation of a content pack fails.

    Attributes:
        errors: List of validation errors with field paths and messages
    """

    def __init__(self, errors: list[ValidationIssue]):
        self.errors = errors
        message = f"Content pack validation failed with {len(errors)} error(s)"
        if errors:
            message += f": {errors[0]}"
        super().__init__(message)
