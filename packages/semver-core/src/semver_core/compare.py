# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

1. MAJOR, MINOR and PATCH compare numerically.
2. A version without pre-release has higher precedence than one with it.
3. Pre-release identifiers compare left to right: numeric ones numerically,
   alphanumeric ones by ASCII code point, numeric before alphanumeric, and a
   shorter list that is a prefix of a longer one comes first.

Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence, Union

from .identifier import Identifier, IdentifierKind
from .semver import Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_identifiers(id1: Identifier, id2: Identifier) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1, 0 or 1
    """
    if id1.kind is IdentifierKind.NUMERIC:
        if id2.kind is IdentifierKind.NUMERIC:
            return _sign(id1.number, id2.number)
        # Numeric identifiers have lower precedence than alphanumeric ones
        return -1
    if id2.kind is IdentifierKind.NUMERIC:
        return 1
    return _sign(id1.text, id2.text)


def compare_prerelease(pre1: Sequence[Identifier], pre2: Sequence[Identifier]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for id1, id2 in zip(pre1, pre2):
        result = compare_identifiers(id1, id2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(pre1), len(pre2))


def compare(version1: Version, version2: Version) -> Ordering:
    """Compare two Version values by precedence.

    Examples:
        >>> compare(parse_version("1.0.0-beta.2"), parse_version("1.0.0-beta.11"))
        <Ordering.LESS: -1>
        >>> compare(parse_version("1.0.0+build1"), parse_version("1.0.0+build2"))
        <Ordering.EQUAL: 0>
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(version1, attr), getattr(version2, attr))
        if result:
            return Ordering(result)

    return Ordering(compare_prerelease(version1.prerelease, version2.prerelease))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored in comparisons as SemVer 2.0.0 requires.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0")
        0
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return int(compare(v1, v2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version
    return v.precedence_key
