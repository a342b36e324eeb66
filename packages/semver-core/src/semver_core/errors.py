# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing or constructing versions."""

from __future__ import annotations


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class MissingComponentError(InvalidVersionError):
    """Raised when the core has fewer than three components."""


class InvalidNumericError(InvalidVersionError):
    """Raised when a numeric identifier has non-digits or a leading zero."""


class EmptyIdentifierError(InvalidVersionError):
    """Raised when a pre-release or build identifier is empty."""


class InvalidCharacterError(InvalidVersionError):
    """Raised when an identifier contains a character outside [0-9A-Za-z-]."""


class TrailingGarbageError(InvalidVersionError):
    """Raised for empty input or text left over where the grammar ends."""
