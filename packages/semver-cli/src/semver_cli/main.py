# SPDX-License-Identifier: MIT
"""CLI entry point for semver command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from semver_core import (
    InvalidConstraintError,
    InvalidVersionError,
    Version,
    VersionRange,
    parse_range,
    parse_version,
)

from . import __version__
from .config import ConfigError, SemverConfig, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


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


def echo_debug(ctx: Context, message: str) -> None:
    """Print a diagnostic message to stderr when --verbose is set."""
    if ctx.verbose:
        click.secho(message, dim=True, err=True)


def fail(message: str) -> NoReturn:
    """Report an error and exit with status 1."""
    echo_error(message)
    raise SystemExit(1)


def parse_or_exit(text: str) -> Version:
    """Parse a version argument, exiting with an error message if invalid."""
    try:
        return parse_version(text)
    except InvalidVersionError as e:
        fail(e.message)


def parse_range_or_exit(text: str) -> VersionRange:
    """Parse a constraint argument, exiting with an error message if invalid."""
    try:
        return parse_range(text)
    except InvalidConstraintError as e:
        fail(e.message)


@click.group()
@click.version_option(version=__version__, prog_name="semver")
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
    help="Read pyproject.toml from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Parse, compare, sort and match versions following SemVer 2.0.0.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 1.0.0-rc.1 0.9.0
        semver satisfies 1.4.0 ">=1.0.0 <2.0.0"
        semver bump minor 1.4.2
        semver check
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import parse, compare, satisfies, bump, check

cli.add_command(parse.parse)
cli.add_command(parse.valid)
cli.add_command(compare.compare)
cli.add_command(compare.sort)
cli.add_command(satisfies.satisfies)
cli.add_command(satisfies.max_satisfying)
cli.add_command(bump.bump)
cli.add_command(check.check)


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
