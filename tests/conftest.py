# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for toolchain-version tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project whose pyproject.toml requires >=2.0.0, <4.0.0."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "groovy-scripts"
version = "1.0.0"

[tool.toolchain-version]
minimum = "2.0.0"
maximum = "4.0.0"
"""
    )

    yield project_dir
