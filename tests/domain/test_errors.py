"""Tests for the naming error taxonomy."""

import pytest

from zillion.domain.errors import (
    ContractViolation,
    InvalidDigitError,
    InvalidExponentError,
    NamingError,
    ParseError,
    UnsupportedScaleError,
    UnsupportedSchemeError,
    check_three_digit,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            InvalidDigitError("x", 3),
            InvalidExponentError("-1"),
            UnsupportedSchemeError("knuth"),
            UnsupportedScaleError("british", "conway"),
        ],
    )
    def test_user_errors_are_naming_errors(self, exc: NamingError) -> None:
        assert isinstance(exc, NamingError)
        assert isinstance(exc, ValueError)

    def test_parse_errors(self) -> None:
        assert issubclass(InvalidDigitError, ParseError)
        assert issubclass(InvalidExponentError, ParseError)

    def test_contract_violation_is_not_a_naming_error(self) -> None:
        assert not issubclass(ContractViolation, NamingError)


class TestPayload:
    def test_invalid_digit(self) -> None:
        exc = InvalidDigitError("x", 3)
        assert exc.code == "INVALID_DIGIT"
        assert exc.detail() == {"char": "x", "position": 3}
        assert "'x'" in str(exc)
        assert "position 3" in str(exc)

    def test_invalid_exponent(self) -> None:
        exc = InvalidExponentError("1e9")
        assert exc.code == "INVALID_EXPONENT"
        assert exc.detail() == {"exponent": "1e9"}


class TestCheckThreeDigit:
    @pytest.mark.parametrize("n", [0, 1, 500, 999])
    def test_in_range(self, n: int) -> None:
        check_three_digit(n)

    @pytest.mark.parametrize("n", [-1, 1000])
    def test_out_of_range(self, n: int) -> None:
        with pytest.raises(ContractViolation):
            check_three_digit(n)
