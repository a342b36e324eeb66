# SPDX-License-Identifier: MIT
"""Command-line interface for semantic version parsing and matching."""

__version__ = "0.1.0"
