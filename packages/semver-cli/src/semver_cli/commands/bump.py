# SPDX-License-Identifier: MIT
"""Compute the next version."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import InvalidVersionError, Version

from ..config import DEFAULT_PRERELEASE_TOKEN, ConfigError
from ..main import Context, echo_debug, echo_info, fail, parse_or_exit, pass_context

PARTS = ("major", "minor", "patch", "prerelease", "release")


def next_version(version: Version, part: str, token: Optional[str] = None) -> Version:
    """Return version bumped at the given part.

    Raises:
        ValueError: If part is not one of PARTS
        InvalidVersionError: If token is not a valid pre-release identifier
    """
    if part == "major":
        return version.bump_major()
    if part == "minor":
        return version.bump_minor()
    if part == "patch":
        return version.bump_patch()
    if part == "prerelease":
        return version.bump_prerelease(token)
    if part == "release":
        return version.finalize()
    raise ValueError(f"Unknown version part: {part}")


@click.command()
@click.argument("part", type=click.Choice(PARTS))
@click.argument("version", required=False)
@click.option(
    "--token",
    "-t",
    help="Pre-release token for 'prerelease' bumps (default: [tool.semver] prerelease-token or 'rc').",
)
@pass_context
def bump(ctx: Context, part: str, version: Optional[str], token: Optional[str]) -> None:
    """Print VERSION bumped at PART.

    Without VERSION, the [project].version from pyproject.toml is used.

    \b
    Examples:
        semver bump minor 1.4.2            # 1.5.0
        semver bump prerelease 1.4.2       # 1.4.3-rc.0
        semver bump prerelease 1.4.3-rc.0  # 1.4.3-rc.1
        semver bump release 1.4.3-rc.1     # 1.4.3
    """
    needs_config = version is None or (part == "prerelease" and token is None)
    config = None
    if needs_config:
        try:
            config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            if version is None:
                fail(str(e))
            echo_debug(ctx, f"No project configuration: {e}")

    if version is None:
        if not config.version:
            fail("No version given and pyproject.toml has no [project].version")
        version = config.version

    if part == "prerelease" and token is None:
        token = config.prerelease_token if config is not None else DEFAULT_PRERELEASE_TOKEN

    parsed = parse_or_exit(version)
    try:
        bumped = next_version(parsed, part, token)
    except InvalidVersionError as e:
        fail(f"Invalid pre-release token {token!r}: {e.message}")

    echo_debug(ctx, f"{part}: {parsed} -> {bumped}")
    echo_info(str(bumped))
