# SPDX-License-Identifier: MIT
"""SMAPI-style semantic version parsing and comparison.

SMAPI accepts MAJOR.MINOR with an optional PATCH, followed by optional
pre-release and build metadata:
- 1.0, 1.0.0, 4.0.0
- 1.0.0-beta, 1.0.0-beta.2
- 1.0.0+build.5
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from .result import ContentPackError

VERSION_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"(?:\.(?P<patch>0|[1-9]\d*))?"
    r"(?:-(?P<prerelease>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class InvalidVersionError(ContentPackError):
    """Raised when a version string is not a valid SMAPI version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number (0 when omitted)
        prerelease: Optional pre-release tag (e.g., "beta.2")
        build: Optional build metadata
    """

    major: int
    minor: int
    patch: int = 0
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None


def parse_version(version_string: str) -> Version:
    """Parse a version string.

    Args:
        version_string: MAJOR.MINOR[.PATCH][-prerelease][+build]

    Returns:
        A Version object

    Raises:
        InvalidVersionError: If the string is not a valid version

    Examples:
        >>> parse_version("4.0")
        Version(major=4, minor=0, patch=0, prerelease=None, build=None)
        >>> parse_version("1.2.3-beta.1")
        Version(major=1, minor=2, patch=3, prerelease='beta.1', build=None)
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = VERSION_PATTERN.match(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch") or 0),
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
    )


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid SMAPI version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1")
        False
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.match(version_string.strip()) is not None


def _compare_prerelease(pre1: str | None, pre2: str | None) -> int:
    # A release sorts after any pre-release of the same version
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1
    if pre2 is None:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = p1.isdigit()
        is_num2 = p2.isdigit()

        if is_num1 and is_num2:
            n1, n2 = int(p1), int(p2)
            if n1 != n2:
                return -1 if n1 < n2 else 1
        elif is_num1:
            return -1
        elif is_num2:
            return 1
        else:
            l1, l2 = p1.lower(), p2.lower()
            if l1 != l2:
                return -1 if l1 < l2 else 1

    if len(parts1) != len(parts2):
        return -1 if len(parts1) < len(parts2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Returns:
        -1 if version1 < version2, 0 if equal, 1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.30", "1.30.0")
        0
        >>> compare_versions("2.0.0-beta", "2.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    # Build metadata is ignored
    return _compare_prerelease(v1.prerelease, v2.prerelease)
