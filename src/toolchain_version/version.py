# SPDX-License-Identifier: MIT
"""Toolchain version parsing.

Versions have the form ``major.minor.revision-tag``. Parsing is lenient: only
the leading major number is mandatory, and segments that are not numbers are
folded into the tag instead of being rejected.

Instances are mutable through the fluent ``set_*`` methods and are not
synchronized. Share them between threads only once they are no longer
modified.
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Any, Optional

# Splits "1.2.3-beta" on either separator
SEPARATOR_PATTERN = re.compile(r"[.-]")

# Segments after the 4th are not split further
MAX_SEGMENTS = 4

_INTEGER_PATTERN = re.compile(r"\+?\d+")


class InvalidVersionError(ValueError):
    """Raised when a version cannot be built or parsed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


def _check_number(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVersionError(
            str(value), f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidVersionError(str(value), f"{name} must be >= 0, got {value}")
    return value


def _parse_int(segment: str) -> Optional[int]:
    """Return the segment as an int, or None if it is not a plain integer."""
    if not _INTEGER_PATTERN.fullmatch(segment):
        return None
    try:
        return int(segment)
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return None


@total_ordering
class Version:
    """A toolchain version.

    Attributes:
        major: Major version number
        minor: Minor version number
        revision: Revision number
        tag: Optional qualifier such as "beta" or "RC1"; never an empty string
    """

    __slots__ = ("major", "minor", "revision", "tag")

    def __init__(
        self,
        major: int,
        minor: int = 0,
        revision: int = 0,
        tag: Optional[str] = None,
    ) -> None:
        self.major = _check_number("major", major)
        self.minor = _check_number("minor", minor)
        self.revision = _check_number("revision", revision)
        self.tag = tag or None

    @classmethod
    def parse(cls, version_string: Optional[str]) -> "Version":
        """Parse a version string.

        The string is split on ``.`` or ``-`` into at most four segments. The
        first must be an integer. The second and third become minor and
        revision when they are integers and are moved into the tag when they
        are not. A fourth segment is always part of the tag.

        Args:
            version_string: Version text, e.g. "2.4.21" or "3.0.0-rc-1"

        Returns:
            The parsed Version

        Raises:
            InvalidVersionError: If the string is None, empty, or does not
                start with an integer

        Examples:
            >>> Version.parse("2.5")
            Version(major=2, minor=5, revision=0, tag=None)
            >>> Version.parse("1.2.3-beta-2")
            Version(major=1, minor=2, revision=3, tag='beta-2')
            >>> Version.parse("1.x.3")
            Version(major=1, minor=0, revision=3, tag='x')
        """
        if version_string is None:
            raise InvalidVersionError("None", "Version must not be None or empty.")
        if not isinstance(version_string, str):
            raise InvalidVersionError(
                str(version_string),
                f"Version must be a string, got {type(version_string).__name__}",
            )
        if not version_string:
            raise InvalidVersionError(version_string, "Version must not be None or empty.")

        segments = SEPARATOR_PATTERN.split(version_string, maxsplit=MAX_SEGMENTS - 1)

        major = _parse_int(segments[0])
        if major is None:
            raise InvalidVersionError(
                version_string, "Major, minor, and revision must be integers."
            )

        minor = 0
        revision = 0
        tag_start = 3
        tag_parts: list[str] = []

        if len(segments) > 1:
            parsed = _parse_int(segments[1])
            if parsed is None:
                tag_start = 1
                tag_parts.append(segments[1])
            else:
                minor = parsed

        if len(segments) > 2:
            parsed = _parse_int(segments[2])
            if parsed is None:
                if tag_start == 3:
                    tag_start = 2
                tag_parts.append(segments[2])
            else:
                revision = parsed

        if len(segments) == MAX_SEGMENTS:
            # everything from the first non-numeric segment on, numbers included
            tag_parts = segments[tag_start:]

        return cls(major, minor, revision, "-".join(tag_parts))

    def set_major(self, major: int) -> "Version":
        """Set the major number and return this version."""
        self.major = _check_number("major", major)
        return self

    def set_minor(self, minor: int) -> "Version":
        """Set the minor number and return this version."""
        self.minor = _check_number("minor", minor)
        return self

    def set_revision(self, revision: int) -> "Version":
        """Set the revision number and return this version."""
        self.revision = _check_number("revision", revision)
        return self

    def set_tag(self, tag: Optional[str]) -> "Version":
        """Set the tag and return this version. An empty tag clears it."""
        self.tag = tag or None
        return self

    def compare_to(self, other: "Version") -> int:
        """Compare with another version.

        Returns:
            -1 if this version is lower, 0 if equal, 1 if higher
        """
        mine = self.sort_key()
        theirs = other.sort_key()
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def sort_key(self) -> tuple[int, int, int, tuple[int, str]]:
        """Return a tuple that orders versions the way compare_to does.

        A tagged version sorts before the untagged one with the same numbers.
        """
        tag_key = (1, "") if self.tag is None else (0, self.tag)
        return (self.major, self.minor, self.revision, tag_key)

    def to_tuple(self) -> tuple[int, int, int, Optional[str]]:
        """Return the version as (major, minor, revision, tag)."""
        return (self.major, self.minor, self.revision, self.tag)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.revision}"
        if self.tag is not None:
            version += f"-{self.tag}"
        return version

    def __repr__(self) -> str:
        return (
            f"Version(major={self.major}, minor={self.minor}, "
            f"revision={self.revision}, tag={self.tag!r})"
        )


def parse_version(version_string: Optional[str]) -> Version:
    """Parse a version string into a Version. See Version.parse."""
    return Version.parse(version_string)


def is_valid_version(version_string: Optional[str]) -> bool:
    """Check whether a string parses as a version.

    Examples:
        >>> is_valid_version("2.4.21")
        True
        >>> is_valid_version("groovy-2.4")
        False
    """
    try:
        Version.parse(version_string)
    except InvalidVersionError:
        return False
    return True
