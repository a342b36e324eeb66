# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, satisfies, bump, check

__all__ = ["parse", "compare", "satisfies", "bump", "check"]
