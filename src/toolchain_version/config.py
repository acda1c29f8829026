# SPDX-License-Identifier: MIT
"""Required toolchain version range loaded from pyproject.toml.

Projects declare the range under ``[tool.toolchain-version]``::

    [tool.toolchain-version]
    minimum = "2.0.0"
    maximum = "4.0.0"

The minimum is inclusive and the maximum exclusive.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .compare import at_least, older_than
from .version import InvalidVersionError, Version, parse_version

TOOL_SECTION = "toolchain-version"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _parse_bound(name: str, value: Any) -> Optional[Version]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigError(f"[tool.{TOOL_SECTION}].{name} must be a string, got {value!r}")
    try:
        return parse_version(value)
    except InvalidVersionError as e:
        raise ConfigError(f"[tool.{TOOL_SECTION}].{name}: {e.message}") from e


@dataclass
class VersionRequirement:
    """Acceptable range of toolchain versions.

    Attributes:
        minimum: Lowest accepted version (inclusive), or None for no bound
        maximum: First rejected version (exclusive), or None for no bound
        source: pyproject.toml the range was read from, if any
    """

    minimum: Optional[Version] = None
    maximum: Optional[Version] = None
    source: Optional[Path] = None

    def __post_init__(self) -> None:
        if (
            self.minimum is not None
            and self.maximum is not None
            and not older_than(self.minimum, self.maximum)
        ):
            raise ConfigError(
                f"Minimum version {self.minimum} must be lower than maximum version {self.maximum}"
            )

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "VersionRequirement":
        """Load the requirement from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            VersionRequirement instance

        Raises:
            ConfigError: If the file is invalid or a bound does not parse
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        pyproject_path = Path(project_dir) / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_dir}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, pyproject_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        source: Optional[Path] = None,
    ) -> "VersionRequirement":
        """Create a requirement from a parsed pyproject.toml dictionary."""
        section = pyproject.get("tool", {}).get(TOOL_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        return cls(
            minimum=_parse_bound("minimum", section.get("minimum")),
            maximum=_parse_bound("maximum", section.get("maximum")),
            source=source,
        )

    def is_satisfied_by(self, version: str | Version) -> bool:
        """Check whether a version falls inside the range."""
        if self.minimum is not None and not at_least(version, self.minimum):
            return False
        if self.maximum is not None and not older_than(version, self.maximum):
            return False
        return True

    def describe(self) -> str:
        """Return the range in a human readable form, e.g. ">=2.0.0, <4.0.0"."""
        parts = []
        if self.minimum is not None:
            parts.append(f">={self.minimum}")
        if self.maximum is not None:
            parts.append(f"<{self.maximum}")
        return ", ".join(parts) or "any version"


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_requirement(project_dir: Optional[str | Path] = None) -> VersionRequirement:
    """Load the version requirement for a project.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        VersionRequirement instance; unbounded when no pyproject.toml exists

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return VersionRequirement()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return VersionRequirement.from_pyproject(project_path)

    return VersionRequirement()
