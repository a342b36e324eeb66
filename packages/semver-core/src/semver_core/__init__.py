# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and constraint matching.

This package provides utilities for parsing and comparing semantic versions
following the SemVer 2.0.0 specification, plus baseline constraint
expressions (=, !=, <, <=, >, >=, combined with spaces and '||').

Example:
    >>> from semver_core import parse_version, compare_versions, satisfies
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_text
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
    >>>
    >>> satisfies("1.4.0", ">=1.0.0 <2.0.0")
    True
"""

__version__ = "0.1.0"

from .errors import (
    InvalidVersionError,
    MissingComponentError,
    InvalidNumericError,
    EmptyIdentifierError,
    InvalidCharacterError,
    TrailingGarbageError,
)
from .identifier import (
    Identifier,
    IdentifierKind,
)
from .semver import (
    Version,
    parse_version,
    render_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    Ordering,
    compare,
    compare_identifiers,
    compare_prerelease,
    compare_versions,
    version_key,
)
from .ranges import (
    Constraint,
    ConstraintSet,
    InvalidConstraintError,
    Operator,
    VersionRange,
    max_satisfying,
    min_satisfying,
    parse_range,
    satisfies,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "MissingComponentError",
    "InvalidNumericError",
    "EmptyIdentifierError",
    "InvalidCharacterError",
    "TrailingGarbageError",
    # Identifiers
    "Identifier",
    "IdentifierKind",
    # Version parsing
    "Version",
    "parse_version",
    "render_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "Ordering",
    "compare",
    "compare_identifiers",
    "compare_prerelease",
    "compare_versions",
    "version_key",
    # Constraints
    "Constraint",
    "ConstraintSet",
    "InvalidConstraintError",
    "Operator",
    "VersionRange",
    "max_satisfying",
    "min_satisfying",
    "parse_range",
    "satisfies",
]
