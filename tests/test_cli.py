# SPDX-License-Identifier: MIT
"""Tests for the toolchain-version command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from toolchain_version import cli as cli_module
from toolchain_version.cli import cli
from toolchain_version.config import ConfigError


class TestParseCommand:
    """Tests for toolchain-version parse."""

    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "2.5"])

        assert result.exit_code == 0
        assert result.output.strip() == "2.5.0"

    def test_parse_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "parse", "1.x.3"])

        assert result.exit_code == 0
        assert "1.0.3-x" in result.output
        assert "revision: 3" in result.output
        assert "tag:      x" in result.output

    def test_parse_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "latest"])

        assert result.exit_code == 1
        assert "must be integers" in result.output


class TestCompareCommand:
    """Tests for toolchain-version compare."""

    def test_lower(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-beta", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_equal_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "compare", "2.5", "2.5.0"])

        assert result.exit_code == 0
        assert "2.5.0 == 2.5.0" in result.output

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0", "x"])

        assert result.exit_code == 1


class TestSortCommand:
    """Tests for toolchain-version sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "3.0.0", "2.4.21", "3.0.0-rc-1"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.4.21", "3.0.0-rc-1", "3.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "-r", "1", "2"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.0.0", "1.0.0"]


class TestCheckCommand:
    """Tests for toolchain-version check."""

    def test_bounds_on_command_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", "2.4.21", "--minimum", "2.0.0", "--maximum", "3.0.0"]
        )

        assert result.exit_code == 0
        assert "satisfies >=2.0.0, <3.0.0" in result.output

    def test_below_minimum(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", "2.0.0-beta-3", "--minimum", "2.0.0", "--maximum", "3.0.0"]
        )

        assert result.exit_code == 1
        assert "does not satisfy" in result.output

    def test_bounds_from_pyproject(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "-v", "check", "3.0.9"])

        assert result.exit_code == 0
        assert "Using bounds from" in result.output
        assert "satisfies >=2.0.0, <4.0.0" in result.output

    def test_command_line_overrides_pyproject(
        self, cli_runner: CliRunner, temp_project: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "check", "4.1.0", "--maximum", "5.0.0"]
        )

        assert result.exit_code == 0
        assert "satisfies >=2.0.0, <5.0.0" in result.output

    def test_unbounded_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "check", "1.0"])

        assert result.exit_code == 0
        assert "No version bounds configured" in result.output

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.toolchain-version]\nminimum = "latest"\n'
        )

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "check", "1.0"])

        assert result.exit_code == 1
        assert "minimum" in result.output

    def test_empty_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.0", "-m", "3.0", "-M", "2.0"])

        assert result.exit_code == 1
        assert "must be lower than" in result.output


class TestMain:
    """Tests for the main() entry point."""

    def test_config_error_exits_1(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def broken_cli() -> None:
            raise ConfigError("Invalid TOML syntax: bad table")

        monkeypatch.setattr(cli_module, "cli", broken_cli)

        with pytest.raises(SystemExit) as exc_info:
            cli_module.main()

        assert exc_info.value.code == 1
        assert "Error: Invalid TOML syntax: bad table" in capsys.readouterr().err

    def test_unexpected_error_exits_1(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def broken_cli() -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(cli_module, "cli", broken_cli)

        with pytest.raises(SystemExit) as exc_info:
            cli_module.main()

        assert exc_info.value.code == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    def test_successful_command_exits_0(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["toolchain-version", "parse", "2.5"])

        with pytest.raises(SystemExit) as exc_info:
            cli_module.main()

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == "2.5.0"
