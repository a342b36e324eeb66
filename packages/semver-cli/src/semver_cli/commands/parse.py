# SPDX-License-Identifier: MIT
"""Parse and validate version strings."""

from __future__ import annotations

import json

import click

from semver_core import InvalidVersionError, Version, parse_version

from ..main import Context, echo_error, echo_info, echo_success, parse_or_exit, pass_context


def _version_to_dict(version: Version) -> dict:
    return {
        "version": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": [part.number if part.is_numeric else part.text for part in version.prerelease],
        "build": list(version.build),
    }


@click.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the components as a JSON object.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver parse --json 2.0.0-beta.11
    """
    parsed = parse_or_exit(version)

    if as_json:
        click.echo(json.dumps(_version_to_dict(parsed)))
        return

    echo_info(f"major: {parsed.major}")
    echo_info(f"minor: {parsed.minor}")
    echo_info(f"patch: {parsed.patch}")
    echo_info(f"prerelease: {parsed.prerelease_text}")
    echo_info(f"build: {parsed.build_text}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def valid(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSION follows semantic versioning.

    Exits with status 1 if any of them is invalid.
    """
    failures = 0
    for version in versions:
        try:
            parse_version(version)
        except InvalidVersionError as e:
            echo_error(e.message)
            failures += 1

    if failures:
        raise SystemExit(1)

    echo_success(f"{len(versions)} valid version(s)")
