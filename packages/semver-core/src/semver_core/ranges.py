# SPDX-License-Identifier: MIT
"""Version constraint expressions built on version comparison.

Constraints syntax:
  - Each constraint is an operator followed by a full version:
    =, ==, !=, <, <=, >, >=. A bare version means =.
  - Constraints separated by whitespace or commas are ANDed: ">=1.0.0 <2.0.0"
  - '||' separates alternatives that are ORed: ">=1.0.0 <2.0.0 || =3.0.0"
  - An empty expression matches every version.

Matching uses SemVer precedence, so build metadata never affects the result
and pre-release versions compare like any other version.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TypeVar, Union

from .compare import Ordering, compare
from .errors import InvalidVersionError
from .semver import Version, parse_version

T = TypeVar("T", str, Version)


class InvalidConstraintError(Exception):
    """Raised when a constraint expression cannot be parsed."""

    def __init__(self, constraint: str, message: str = ""):
        self.constraint = constraint
        self.message = message or f"Invalid version constraint: {constraint}"
        super().__init__(self.message)


class Operator(Enum):
    """Comparison operator of a single constraint."""

    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


# Longest spellings first so "<=" is not read as "<"
_OPERATOR_SPELLINGS = (
    ("<=", Operator.LE),
    (">=", Operator.GE),
    ("==", Operator.EQ),
    ("!=", Operator.NE),
    ("<", Operator.LT),
    (">", Operator.GT),
    ("=", Operator.EQ),
)

_ACCEPTS = {
    Operator.EQ: (Ordering.EQUAL,),
    Operator.NE: (Ordering.LESS, Ordering.GREATER),
    Operator.LT: (Ordering.LESS,),
    Operator.LE: (Ordering.LESS, Ordering.EQUAL),
    Operator.GT: (Ordering.GREATER,),
    Operator.GE: (Ordering.GREATER, Ordering.EQUAL),
}


@dataclass(frozen=True, slots=True)
class Constraint:
    """A single operator/version pair such as >=1.2.0."""

    operator: Operator
    version: Version

    def matches(self, version: Version) -> bool:
        return compare(version, self.version) in _ACCEPTS[self.operator]

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


@dataclass(frozen=True, slots=True)
class ConstraintSet:
    """Constraints that must all hold. An empty set matches everything."""

    constraints: tuple[Constraint, ...] = ()

    def matches(self, version: Version) -> bool:
        return all(constraint.matches(version) for constraint in self.constraints)

    def __str__(self) -> str:
        return " ".join(str(constraint) for constraint in self.constraints)


@dataclass(frozen=True, slots=True)
class VersionRange:
    """Alternatives of which at least one must hold."""

    sets: tuple[ConstraintSet, ...]

    @classmethod
    def parse(cls, text: str) -> "VersionRange":
        return parse_range(text)

    def matches(self, version: Union[str, Version]) -> bool:
        v = parse_version(version) if isinstance(version, str) else version
        return any(constraint_set.matches(v) for constraint_set in self.sets)

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (str, Version)):
            return False
        return self.matches(version)

    def __str__(self) -> str:
        return " || ".join(str(constraint_set) for constraint_set in self.sets)


def _split_operator(token: str) -> tuple[Optional[Operator], str]:
    for spelling, operator in _OPERATOR_SPELLINGS:
        if token.startswith(spelling):
            return operator, token[len(spelling) :]
    return None, token


def _parse_set(text: str, expression: str) -> ConstraintSet:
    tokens = text.replace(",", " ").split()
    constraints: list[Constraint] = []
    pending: Optional[Operator] = None

    for token in tokens:
        operator, rest = _split_operator(token)
        if operator is not None and pending is not None:
            raise InvalidConstraintError(
                expression, f"Operator {pending.value!r} is not followed by a version in {expression!r}"
            )
        if operator is None:
            operator = pending or Operator.EQ
        pending = None
        if not rest:
            # Operator written apart from its version: ">= 1.0.0"
            pending = operator
            continue
        try:
            version = parse_version(rest)
        except InvalidVersionError as e:
            raise InvalidConstraintError(
                expression, f"Invalid version {rest!r} in constraint {expression!r}: {e.message}"
            ) from e
        constraints.append(Constraint(operator, version))

    if pending is not None:
        raise InvalidConstraintError(
            expression, f"Operator {pending.value!r} is not followed by a version in {expression!r}"
        )
    return ConstraintSet(tuple(constraints))


def parse_range(text: str) -> VersionRange:
    """Parse a constraint expression into a VersionRange.

    Args:
        text: Expression such as ">=1.0.0 <2.0.0 || =3.0.0"

    Returns:
        The parsed VersionRange

    Raises:
        InvalidConstraintError: If the expression is malformed

    Examples:
        >>> str(parse_range(">= 1.0.0, <2.0.0||3.0.0"))
        '>=1.0.0 <2.0.0 || =3.0.0'
    """
    if not isinstance(text, str):
        raise InvalidConstraintError(
            str(text), f"Constraint must be a string, got {type(text).__name__}"
        )

    alternatives = text.split("||")
    if len(alternatives) > 1 and any(not alternative.strip() for alternative in alternatives):
        raise InvalidConstraintError(text, f"Empty alternative in constraint {text!r}")

    return VersionRange(tuple(_parse_set(alternative, text) for alternative in alternatives))


def satisfies(version: Union[str, Version], constraint: Union[str, VersionRange]) -> bool:
    """Check whether a version satisfies a constraint expression.

    Raises:
        InvalidVersionError: If the version string is invalid
        InvalidConstraintError: If the constraint expression is invalid

    Examples:
        >>> satisfies("1.5.0", ">=1.0.0 <2.0.0")
        True
        >>> satisfies("2.0.0-rc.1", "<2.0.0")
        True
    """
    version_range = parse_range(constraint) if isinstance(constraint, str) else constraint
    return version_range.matches(version)


def _matching(
    versions: Iterable[T], constraint: Union[str, VersionRange]
) -> list[tuple[Version, T]]:
    version_range = parse_range(constraint) if isinstance(constraint, str) else constraint
    matched = []
    for item in versions:
        v = parse_version(item) if isinstance(item, str) else item
        if version_range.matches(v):
            matched.append((v, item))
    return matched


def max_satisfying(versions: Iterable[T], constraint: Union[str, VersionRange]) -> Optional[T]:
    """Return the highest version that satisfies the constraint, or None.

    Items are returned as given (string or Version). Among versions of equal
    precedence the first one wins.
    """
    matched = _matching(versions, constraint)
    if not matched:
        return None
    return max(matched, key=lambda pair: pair[0].precedence_key)[1]


def min_satisfying(versions: Iterable[T], constraint: Union[str, VersionRange]) -> Optional[T]:
    """Return the lowest version that satisfies the constraint, or None."""
    matched = _matching(versions, constraint)
    if not matched:
        return None
    return min(matched, key=lambda pair: pair[0].precedence_key)[1]
