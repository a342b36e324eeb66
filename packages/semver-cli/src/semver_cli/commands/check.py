# SPDX-License-Identifier: MIT
"""Check the project version declared in pyproject.toml."""

from __future__ import annotations

import click

from semver_core import InvalidConstraintError, InvalidVersionError, parse_range, parse_version

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_success, echo_warning, fail, pass_context


@click.command()
@click.option("--strict", is_flag=True, help="Treat warnings as errors.")
@pass_context
def check(ctx: Context, strict: bool) -> None:
    """Validate the project version from pyproject.toml.

    Checks that [project].version follows semantic versioning and, when
    [tool.semver].constraint is set, that the version satisfies it.
    Pre-release project versions produce a warning.

    \b
    Examples:
        semver check
        semver -C path/to/project check --strict
    """
    try:
        config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        fail(str(e))

    echo_info(f"Checking: {config.project_dir / 'pyproject.toml'}")

    if not config.version:
        fail("pyproject.toml has no [project].version")

    errors: list[str] = []
    warnings: list[str] = []

    try:
        version = parse_version(config.version)
    except InvalidVersionError as e:
        fail(e.message)

    if version.is_prerelease:
        warnings.append(f"Version {version} is a pre-release")

    if config.constraint:
        try:
            version_range = parse_range(config.constraint)
        except InvalidConstraintError as e:
            fail(f"[tool.semver].constraint: {e.message}")
        if not version_range.matches(version):
            errors.append(f"Version {version} does not satisfy constraint {config.constraint!r}")

    for warning in warnings:
        echo_warning(warning)
    for error in errors:
        echo_error(error)

    if errors or (strict and warnings):
        raise SystemExit(1)

    echo_success(f"Version {version} is valid")
