# SPDX-License-Identifier: MIT
"""Pre-release and build identifiers.

A pre-release identifier is one of two kinds:
- numeric: ASCII digits only, no leading zero unless it is exactly "0"
- alphanumeric: [0-9A-Za-z-]+ with at least one letter or hyphen

Build identifiers share the character set but carry no kind and no
leading-zero restriction.
"""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import (
    EmptyIdentifierError,
    InvalidCharacterError,
    InvalidNumericError,
    InvalidVersionError,
)

DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = DIGITS | frozenset(string.ascii_letters) | frozenset("-")


class IdentifierKind(Enum):
    """Tag for the two pre-release identifier variants."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


def check_identifier_chars(
    text: str,
    version: Optional[str] = None,
    what: str = "identifier",
) -> str:
    """Check that text is a non-empty run of [0-9A-Za-z-].

    Args:
        text: The identifier to check
        version: The full version string, used in error messages
        what: Description of the identifier, used in error messages

    Returns:
        The identifier unchanged

    Raises:
        EmptyIdentifierError: If the identifier is empty
        InvalidCharacterError: If it contains a character outside [0-9A-Za-z-]
    """
    source = text if version is None else version
    if not text:
        raise EmptyIdentifierError(source, f"Empty {what} in version: {source!r}")
    for char in text:
        if char not in IDENTIFIER_CHARS:
            raise InvalidCharacterError(
                source, f"Invalid character {char!r} in {what} {text!r} of version {source!r}"
            )
    return text


def check_numeric(
    text: str,
    version: Optional[str] = None,
    what: str = "numeric identifier",
) -> int:
    """Validate a numeric identifier and return its integer value.

    Raises:
        InvalidNumericError: If the text has non-digits or a leading zero
    """
    source = text if version is None else version
    if not text or any(char not in DIGITS for char in text):
        raise InvalidNumericError(
            source, f"Non-digit characters in {what} {text!r} of version {source!r}"
        )
    if len(text) > 1 and text[0] == "0":
        raise InvalidNumericError(source, f"Leading zero in {what} {text!r} of version {source!r}")
    try:
        return int(text)
    except ValueError as e:
        # Python refuses str -> int conversions past its digit limit
        raise InvalidNumericError(source, f"Numeric {what} too long in version {source!r}") from e


def check_number_size(value: int, what: str = "numeric identifier") -> int:
    """Check that a non-negative int renders within Python's int-to-str digit limit.

    Raises:
        InvalidNumericError: If the decimal form would exceed the limit
    """
    limit = sys.get_int_max_str_digits() if hasattr(sys, "get_int_max_str_digits") else 0
    if limit and value >= 10**limit:
        raise InvalidNumericError(
            f"<{value.bit_length()}-bit integer>",
            f"Numeric {what} exceeds {limit} digits",
        )
    return value


def classify(text: str) -> IdentifierKind:
    """Return the kind of an identifier made of [0-9A-Za-z-] characters."""
    if all(char in DIGITS for char in text):
        return IdentifierKind.NUMERIC
    return IdentifierKind.ALPHANUMERIC


@dataclass(frozen=True, slots=True)
class Identifier:
    """A single dot-separated pre-release identifier.

    Attributes:
        kind: Whether the identifier is numeric or alphanumeric
        text: The identifier exactly as written
    """

    kind: IdentifierKind
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Identifier text must be a string, got {type(self.text).__name__}")
        check_identifier_chars(self.text, what="pre-release identifier")
        actual = classify(self.text)
        if actual is IdentifierKind.NUMERIC:
            check_numeric(self.text, what="pre-release identifier")
        if actual is IdentifierKind.ALPHANUMERIC and self.kind is IdentifierKind.NUMERIC:
            raise InvalidNumericError(
                self.text, f"Non-digit characters in numeric identifier {self.text!r}"
            )
        if actual is not self.kind:
            raise InvalidVersionError(
                self.text, f"Identifier {self.text!r} is {actual.value}, not {self.kind.value}"
            )

    @classmethod
    def parse(cls, text: str, version: Optional[str] = None) -> "Identifier":
        """Parse a pre-release identifier, inferring its kind.

        Examples:
            >>> Identifier.parse("11").kind
            <IdentifierKind.NUMERIC: 'numeric'>
            >>> Identifier.parse("01a").kind
            <IdentifierKind.ALPHANUMERIC: 'alphanumeric'>
        """
        check_identifier_chars(text, version, what="pre-release identifier")
        kind = classify(text)
        if kind is IdentifierKind.NUMERIC:
            check_numeric(text, version, what="pre-release identifier")
        return cls(kind, text)

    @classmethod
    def coerce(cls, value: Union["Identifier", str, int]) -> "Identifier":
        """Build an Identifier from an Identifier, string, or non-negative int."""
        if isinstance(value, Identifier):
            return value
        if isinstance(value, bool):
            raise TypeError("Identifier cannot be built from a bool")
        if isinstance(value, int):
            check_number_size(abs(value), "pre-release identifier")
            if value < 0:
                raise InvalidNumericError(str(value), f"Negative pre-release identifier: {value}")
            return cls(IdentifierKind.NUMERIC, str(value))
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"Cannot build an Identifier from {type(value).__name__}")

    @property
    def is_numeric(self) -> bool:
        return self.kind is IdentifierKind.NUMERIC

    @property
    def number(self) -> int:
        """Integer value of a numeric identifier."""
        if self.kind is not IdentifierKind.NUMERIC:
            raise ValueError(f"Identifier {self.text!r} is not numeric")
        return int(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Identifier({self.text!r})"
