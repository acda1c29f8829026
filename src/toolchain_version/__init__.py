# SPDX-License-Identifier: MIT
"""Toolchain version parsing and comparison.

Parses the loosely formatted version strings reported by script toolchains
(``major.minor.revision-tag``) and orders them so build code can decide which
compiler features are available.

Example:
    >>> from toolchain_version import parse_version, compare_versions, at_least
    >>>
    >>> version = parse_version("2.4.21-indy")
    >>> version.minor
    4
    >>> version.tag
    'indy'
    >>>
    >>> compare_versions("3.0.0-rc-1", "3.0.0")
    -1
    >>> at_least(version, "2.0")
    True
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse_version,
    is_valid_version,
    InvalidVersionError,
)
from .compare import (
    compare_versions,
    version_key,
    at_least,
    older_than,
    newer_than,
    same_version,
)
from .config import (
    VersionRequirement,
    ConfigError,
    load_requirement,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "InvalidVersionError",
    # Version comparison
    "compare_versions",
    "version_key",
    "at_least",
    "older_than",
    "newer_than",
    "same_version",
    # Configuration
    "VersionRequirement",
    "ConfigError",
    "load_requirement",
]
