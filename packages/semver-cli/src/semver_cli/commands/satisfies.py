# SPDX-License-Identifier: MIT
"""Match versions against constraint expressions."""

from __future__ import annotations

import click

from semver_core import max_satisfying as find_max_satisfying

from ..main import (
    Context,
    echo_debug,
    echo_info,
    fail,
    parse_or_exit,
    parse_range_or_exit,
    pass_context,
)


@click.command()
@click.argument("version")
@click.argument("constraint")
@pass_context
def satisfies(ctx: Context, version: str, constraint: str) -> None:
    """Print whether VERSION satisfies CONSTRAINT.

    Exits with status 0 when it does and 1 when it does not.

    \b
    Examples:
        semver satisfies 1.4.0 ">=1.0.0 <2.0.0"
        semver satisfies 3.0.0 "<2.0.0 || =3.0.0"
    """
    parsed = parse_or_exit(version)
    version_range = parse_range_or_exit(constraint)
    echo_debug(ctx, f"Constraint: {version_range}")

    if version_range.matches(parsed):
        echo_info("true")
        return

    echo_info("false")
    raise SystemExit(1)


@click.command("max-satisfying")
@click.argument("constraint")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def max_satisfying(ctx: Context, constraint: str, versions: tuple[str, ...]) -> None:
    """Print the highest of VERSIONS that satisfies CONSTRAINT."""
    version_range = parse_range_or_exit(constraint)
    parsed = [parse_or_exit(version) for version in versions]

    best = find_max_satisfying(parsed, version_range)
    if best is None:
        fail(f"No version satisfies {constraint!r}")

    echo_info(str(best))
