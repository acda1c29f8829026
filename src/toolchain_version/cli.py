# SPDX-License-Identifier: MIT
"""CLI entry point for the toolchain-version command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .compare import compare_versions, version_key
from .config import ConfigError, VersionRequirement, load_requirement
from .version import InvalidVersionError, Version, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.requirement: Optional[VersionRequirement] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_requirement(self) -> VersionRequirement:
        """Load the configured requirement, caching the result."""
        if self.requirement is None:
            self.requirement = load_requirement(self.project_dir)
        return self.requirement


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _parse_or_exit(text: str) -> Version:
    try:
        return parse_version(text)
    except InvalidVersionError as e:
        echo_error(f"{e.message} ({text!r})")
        raise SystemExit(1) from e


@click.group()
@click.version_option(package_name="toolchain-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.toolchain-version] from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse and compare toolchain version strings.

    \b
    Examples:
        toolchain-version parse 2.4.21-indy
        toolchain-version compare 2.5 2.5.0-beta-1
        toolchain-version sort 3.0.0 2.4.21 3.0.0-rc-1
        toolchain-version check 2.4.21 --minimum 2.0.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


@cli.command()
@click.argument("version")
@pass_context
def parse(ctx: Context, version: str) -> None:
    """Print the canonical form of VERSION."""
    parsed = _parse_or_exit(version)
    echo_info(str(parsed))
    if ctx.verbose:
        echo_info(f"  major:    {parsed.major}")
        echo_info(f"  minor:    {parsed.minor}")
        echo_info(f"  revision: {parsed.revision}")
        echo_info(f"  tag:      {parsed.tag if parsed.tag is not None else '(none)'}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    v1 = _parse_or_exit(version1)
    v2 = _parse_or_exit(version2)
    result = compare_versions(v1, v2)
    echo_info(str(result))
    if ctx.verbose:
        symbol = {-1: "<", 0: "==", 1: ">"}[result]
        echo_info(f"  {v1} {symbol} {v2}")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort newest first.")
def sort_versions(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending order, one per line."""
    parsed = [_parse_or_exit(v) for v in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        echo_info(str(version))


@cli.command()
@click.argument("version")
@click.option("--minimum", "-m", help="Lowest accepted version (inclusive).")
@click.option("--maximum", "-M", help="First rejected version (exclusive).")
@pass_context
def check(
    ctx: Context,
    version: str,
    minimum: Optional[str],
    maximum: Optional[str],
) -> None:
    """Check that VERSION lies in the required range.

    Bounds not given on the command line are read from the
    [tool.toolchain-version] table of pyproject.toml.

    \b
    Examples:
        toolchain-version check 2.4.21 --minimum 2.0.0
        toolchain-version -C path/to/project check 3.0.0-rc-1
    """
    detected = _parse_or_exit(version)
    lower = _parse_or_exit(minimum) if minimum is not None else None
    upper = _parse_or_exit(maximum) if maximum is not None else None

    try:
        if minimum is None or maximum is None:
            configured = ctx.load_requirement()
            if ctx.verbose and configured.source is not None:
                echo_info(f"Using bounds from {configured.source}")
            if minimum is None:
                lower = configured.minimum
            if maximum is None:
                upper = configured.maximum
        requirement = VersionRequirement(minimum=lower, maximum=upper)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1) from e

    if requirement.minimum is None and requirement.maximum is None:
        echo_warning("No version bounds configured; every version is accepted.")

    if requirement.is_satisfied_by(detected):
        echo_success(f"{detected} satisfies {requirement.describe()}")
    else:
        echo_error(f"{detected} does not satisfy {requirement.describe()}")
        raise SystemExit(1)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
