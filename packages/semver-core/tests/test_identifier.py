# SPDX-License-Identifier: MIT
"""Unit tests for pre-release identifiers."""

import sys

import pytest

from semver_core import (
    EmptyIdentifierError,
    Identifier,
    IdentifierKind,
    InvalidCharacterError,
    InvalidNumericError,
    InvalidVersionError,
)


class TestIdentifierParse:
    """Tests for Identifier.parse."""

    def test_numeric(self):
        ident = Identifier.parse("42")
        assert ident.kind is IdentifierKind.NUMERIC
        assert ident.number == 42
        assert str(ident) == "42"

    def test_zero(self):
        assert Identifier.parse("0").kind is IdentifierKind.NUMERIC

    def test_alphanumeric(self):
        ident = Identifier.parse("alpha")
        assert ident.kind is IdentifierKind.ALPHANUMERIC
        assert ident.is_numeric is False

    def test_hyphen_only(self):
        assert Identifier.parse("-").kind is IdentifierKind.ALPHANUMERIC

    def test_leading_zero_with_letter(self):
        """Test that any letter or hyphen makes the identifier alphanumeric."""
        assert Identifier.parse("01a").kind is IdentifierKind.ALPHANUMERIC
        assert Identifier.parse("0-").kind is IdentifierKind.ALPHANUMERIC

    def test_leading_zero_numeric(self):
        with pytest.raises(InvalidNumericError):
            Identifier.parse("01")

    def test_empty(self):
        with pytest.raises(EmptyIdentifierError):
            Identifier.parse("")

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError):
            Identifier.parse("alpha.1")
        with pytest.raises(InvalidCharacterError):
            Identifier.parse("é")

    def test_number_of_alphanumeric(self):
        with pytest.raises(ValueError):
            Identifier.parse("alpha").number

    def test_repr(self):
        assert repr(Identifier.parse("rc")) == "Identifier('rc')"


class TestIdentifierConstruction:
    """Tests for direct construction and coercion."""

    def test_direct(self):
        assert Identifier(IdentifierKind.NUMERIC, "7") == Identifier.parse("7")

    def test_direct_leading_zero(self):
        with pytest.raises(InvalidNumericError):
            Identifier(IdentifierKind.NUMERIC, "07")

    def test_direct_kind_mismatch(self):
        with pytest.raises(InvalidVersionError):
            Identifier(IdentifierKind.ALPHANUMERIC, "7")
        with pytest.raises(InvalidNumericError):
            Identifier(IdentifierKind.NUMERIC, "rc")

    def test_direct_non_string(self):
        with pytest.raises(TypeError):
            Identifier(IdentifierKind.NUMERIC, 7)  # type: ignore

    def test_coerce_int(self):
        assert Identifier.coerce(3) == Identifier.parse("3")
        assert Identifier.coerce(2**70).number == 2**70

    def test_coerce_negative(self):
        with pytest.raises(InvalidNumericError):
            Identifier.coerce(-1)

    @pytest.mark.skipif(
        not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
        reason="int-to-str digit limit not enforced on this interpreter",
    )
    def test_coerce_past_digit_limit(self):
        with pytest.raises(InvalidNumericError):
            Identifier.coerce(10 ** sys.get_int_max_str_digits())
        with pytest.raises(InvalidNumericError):
            Identifier.coerce(-(10 ** sys.get_int_max_str_digits()))

    def test_coerce_bool(self):
        with pytest.raises(TypeError):
            Identifier.coerce(True)

    def test_coerce_identifier(self):
        ident = Identifier.parse("beta")
        assert Identifier.coerce(ident) is ident

    def test_frozen(self):
        ident = Identifier.parse("beta")
        with pytest.raises(AttributeError):
            ident.text = "gamma"  # type: ignore
