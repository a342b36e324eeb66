# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and rendering.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -01a
- Build metadata: +build, +build.123, +20240101, +001

Parsing is strict: no surrounding whitespace, no omitted components and no
leading zeros in numeric identifiers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .errors import (
    InvalidCharacterError,
    InvalidNumericError,
    InvalidVersionError,
    MissingComponentError,
    TrailingGarbageError,
    EmptyIdentifierError,
)
from .identifier import (
    DIGITS,
    IDENTIFIER_CHARS,
    Identifier,
    check_identifier_chars,
    check_numeric,
    check_number_size,
)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant), ASCII digits only.
# Use with fullmatch(); it accepts the strings parse_version() accepts, except that
# parse_version() also rejects components longer than sys.get_int_max_str_digits().
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

_LETTERS = IDENTIFIER_CHARS - DIGITS - {"-"}

PrereleaseInput = Union[None, str, int, Identifier, Iterable[Union[str, int, Identifier]]]
BuildInput = Union[None, str, Iterable[str]]


def _coerce_prerelease(value: PrereleaseInput) -> tuple[Identifier, ...]:
    if value is None:
        return ()
    if isinstance(value, (bytes, bytearray)):
        raise TypeError(f"Pre-release must be a string or identifiers, got {type(value).__name__}")
    if isinstance(value, str):
        if not value:
            return ()
        return tuple(Identifier.parse(part, value) for part in value.split("."))
    if isinstance(value, (int, Identifier)):
        return (Identifier.coerce(value),)
    return tuple(Identifier.coerce(part) for part in value)


def _coerce_build(value: BuildInput) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        if not value:
            return ()
        return tuple(
            check_identifier_chars(part, value, "build identifier") for part in value.split(".")
        )
    parts = []
    for part in value:
        if not isinstance(part, str):
            raise TypeError(f"Build identifiers must be strings, got {type(part).__name__}")
        parts.append(check_identifier_chars(part, what="build identifier"))
    return tuple(parts)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Version:
    """Represents a parsed semantic version.

    Equality, hashing and ordering follow SemVer precedence: build metadata
    is carried along but never compared.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, e.g. (Identifier('alpha'), Identifier('1'))
        build: Build metadata identifiers, e.g. ('build', '123')
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            check_number_size(abs(value), f"{name} version")
            if value < 0:
                raise InvalidNumericError(str(value), f"Negative {name} version: {value}")
        object.__setattr__(self, "prerelease", _coerce_prerelease(self.prerelease))
        object.__setattr__(self, "build", _coerce_build(self.build))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See parse_version()."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return render_version(self)

    def __repr__(self) -> str:
        return (
            f"Version(major={self.major}, minor={self.minor}, patch={self.patch}, "
            f"prerelease={self.prerelease_text!r}, build={self.build_text!r})"
        )

    @property
    def precedence_key(self) -> tuple:
        """Sort key that orders versions by SemVer precedence."""
        if not self.prerelease:
            prerelease_key: tuple = (1,)
        else:
            prerelease_key = (
                0,
                tuple(
                    (0, part.number) if part.is_numeric else (1, part.text)
                    for part in self.prerelease
                ),
            )
        return (self.major, self.minor, self.patch, prerelease_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (self.major, self.minor, self.patch, self.prerelease) == (
            other.major,
            other.minor,
            other.patch,
            other.prerelease,
        )

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key < other.precedence_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key <= other.precedence_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key > other.precedence_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key >= other.precedence_key

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_text(self) -> str:
        return ".".join(part.text for part in self.prerelease)

    @property
    def build_text(self) -> str:
        return ".".join(self.build)

    def finalize(self) -> "Version":
        """Return the release version, dropping pre-release and build metadata."""
        return Version(self.major, self.minor, self.patch)

    def bump_major(self) -> "Version":
        return Version(self.major + 1, 0, 0)

    def bump_minor(self) -> "Version":
        return Version(self.major, self.minor + 1, 0)

    def bump_patch(self) -> "Version":
        return Version(self.major, self.minor, self.patch + 1)

    def bump_prerelease(self, token: Optional[str] = None) -> "Version":
        """Return the next pre-release version.

        - 1.2.3 -> 1.2.4-0, or 1.2.4-rc.0 with token "rc"
        - 1.2.4-rc.0 -> 1.2.4-rc.1
        - 1.2.4-beta.3 -> 1.2.4-rc.0 with token "rc"
        - 1.2.4-alpha -> 1.2.4-alpha.0

        Build metadata is dropped.
        """
        if token is not None:
            Identifier.parse(token)

        if not self.prerelease:
            prerelease: tuple = (token, 0) if token else (0,)
            return Version(self.major, self.minor, self.patch + 1, prerelease)

        if token is not None and self.prerelease[0].text != token:
            return Version(self.major, self.minor, self.patch, (token, 0))

        parts = list(self.prerelease)
        for index in range(len(parts) - 1, -1, -1):
            if parts[index].is_numeric:
                parts[index] = Identifier.coerce(parts[index].number + 1)
                break
        else:
            parts.append(Identifier.coerce(0))
        return Version(self.major, self.minor, self.patch, parts)

    def with_prerelease(self, prerelease: PrereleaseInput) -> "Version":
        """Return a copy with the pre-release replaced (build is kept)."""
        return Version(self.major, self.minor, self.patch, prerelease, self.build)

    def with_build(self, build: BuildInput) -> "Version":
        """Return a copy with the build metadata replaced."""
        return Version(self.major, self.minor, self.patch, self.prerelease, build)


class _Parser:
    """Single left-to-right pass over a version string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take_while(self, chars: frozenset) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in chars:
            self.pos += 1
        return self.text[start : self.pos]

    def parse(self) -> Version:
        major = self.core_component("major")
        minor = self.core_component("minor")
        patch = self.core_component("patch", last=True)

        prerelease: tuple[Identifier, ...] = ()
        build: tuple[str, ...] = ()
        if self.peek() == "-":
            self.pos += 1
            parts = self.identifiers("pre-release identifier")
            prerelease = tuple(Identifier.parse(part, self.text) for part in parts)
        if self.peek() == "+":
            self.pos += 1
            build = tuple(self.identifiers("build identifier"))

        if self.pos != len(self.text):
            raise TrailingGarbageError(
                self.text, f"Unexpected {self.text[self.pos:]!r} at end of version {self.text!r}"
            )
        return Version(major, minor, patch, prerelease, build)

    def core_component(self, name: str, last: bool = False) -> int:
        digits = self.take_while(DIGITS)
        following = self.peek()

        if following in _LETTERS:
            if last and digits:
                raise TrailingGarbageError(
                    self.text, f"Missing '-' before pre-release in version {self.text!r}"
                )
            raise InvalidNumericError(
                self.text, f"Non-digit characters in {name} version of {self.text!r}"
            )
        if not digits:
            if following in ("", ".", "-", "+"):
                raise MissingComponentError(self.text, f"Missing {name} version in {self.text!r}")
            raise InvalidCharacterError(
                self.text, f"Invalid character {following!r} in {name} version of {self.text!r}"
            )

        value = check_numeric(digits, self.text, f"{name} version")

        if last:
            if following not in ("", "-", "+"):
                raise TrailingGarbageError(
                    self.text, f"Unexpected {self.text[self.pos :]!r} after patch in {self.text!r}"
                )
        elif following == ".":
            self.pos += 1
        elif following in ("", "-", "+"):
            raise MissingComponentError(
                self.text, f"Version {self.text!r} must have MAJOR.MINOR.PATCH components"
            )
        else:
            raise InvalidCharacterError(
                self.text, f"Invalid character {following!r} in {name} version of {self.text!r}"
            )
        return value

    def identifiers(self, what: str) -> list[str]:
        """Read dot-separated identifiers up to '+' or the end of input."""
        parts: list[str] = []
        while True:
            part = self.take_while(IDENTIFIER_CHARS)
            following = self.peek()
            if not part:
                if following in ("", ".", "+"):
                    raise EmptyIdentifierError(self.text, f"Empty {what} in version {self.text!r}")
                raise InvalidCharacterError(
                    self.text, f"Invalid character {following!r} in {what} of version {self.text!r}"
                )
            if what.startswith("pre-release"):
                # validated eagerly so the leftmost problem is reported
                Identifier.parse(part, self.text)
            parts.append(part)

            if following == ".":
                self.pos += 1
                continue
            if following == "":
                return parts
            if following == "+":
                if what.startswith("pre-release"):
                    return parts
                raise TrailingGarbageError(
                    self.text, f"Unexpected {self.text[self.pos :]!r} after build in {self.text!r}"
                )
            raise InvalidCharacterError(
                self.text, f"Invalid character {following!r} in {what} of version {self.text!r}"
            )


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the input is not a string. One of its
            subclasses (MissingComponentError, InvalidNumericError,
            EmptyIdentifierError, InvalidCharacterError, TrailingGarbageError)
            if the string does not follow semantic versioning.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise TrailingGarbageError(version_string, "Version string cannot be empty")

    return _Parser(version_string).parse()


def render_version(version: Version) -> str:
    """Render a Version in canonical MAJOR.MINOR.PATCH[-pre][+build] form.

    Examples:
        >>> render_version(Version(1, 2, 3, "rc.1", "sha.5114f85"))
        '1.2.3-rc.1+sha.5114f85'
    """
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        text += f"-{version.prerelease_text}"
    if version.build:
        text += f"+{version.build_text}"
    return text


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver(" 1.0.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
