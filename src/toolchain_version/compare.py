# SPDX-License-Identifier: MIT
"""Version comparison and toolchain version gates.

Ordering is lexicographic over (major, minor, revision, tag). A tagged version
is lower than the untagged version with the same numbers, so 2.0.0-beta-1 is
older than 2.0.0. Two tags compare as plain strings.
"""

from __future__ import annotations

from typing import Union

from .version import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("2.5", "2.5.0")
        0
        >>> compare_versions("1.0.0-beta", "1.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-beta")
        -1
    """
    return _coerce(version1).compare_to(_coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["2.0.0", "1.5", "2.0.0-rc-1"], key=version_key)
        ['1.5', '2.0.0-rc-1', '2.0.0']
    """
    return _coerce(version).sort_key()


def at_least(version: VersionLike, minimum: VersionLike) -> bool:
    """Return True if version is the same as or newer than minimum."""
    return compare_versions(version, minimum) >= 0


def older_than(version: VersionLike, other: VersionLike) -> bool:
    """Return True if version sorts strictly before other."""
    return compare_versions(version, other) < 0


def newer_than(version: VersionLike, other: VersionLike) -> bool:
    """Return True if version sorts strictly after other."""
    return compare_versions(version, other) > 0


def same_version(version: VersionLike, other: VersionLike) -> bool:
    """Return True if both versions are equal, tags included."""
    return compare_versions(version, other) == 0
