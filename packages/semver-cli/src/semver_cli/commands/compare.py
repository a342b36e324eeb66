# SPDX-License-Identifier: MIT
"""Compare and sort versions by precedence."""

from __future__ import annotations

import click

from semver_core import compare as compare_precedence, version_key

from ..main import Context, echo_debug, echo_info, parse_or_exit, pass_context


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2.

    Build metadata is ignored.
    """
    v1 = parse_or_exit(version1)
    v2 = parse_or_exit(version2)
    result = compare_precedence(v1, v2)
    echo_debug(ctx, f"{v1} {result.name} {v2}")
    echo_info(str(int(result)))


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Print the highest version first.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS one per line in precedence order.

    Versions of equal precedence keep their input order.
    """
    parsed = [parse_or_exit(version) for version in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        echo_info(str(version))
