"""Decimal digit-string helpers.

Numerals and exponents stay as ``str`` throughout the engine. Converting
them to ``int`` would hit the interpreter's int/str conversion limit for
long inputs, and every operation the engine needs (validation, grouping
by three, division by a small constant, decrement) is linear on the
digit string anyway.
"""

from __future__ import annotations

from zillion.domain.errors import ContractViolation, InvalidDigitError, InvalidExponentError

DECIMAL_DIGITS = frozenset("0123456789")


def validate_digits(text: str) -> None:
    """Raise :class:`InvalidDigitError` at the first non-ASCII-digit character."""
    if text.isascii() and text.isdigit():
        return
    for position, char in enumerate(text):
        if char not in DECIMAL_DIGITS:
            raise InvalidDigitError(char, position)


def parse_exponent(text: str) -> str:
    """Validate an exponent literal and return its significant digits.

    Accepts an optional leading ``+``. Zero is returned as ``""``.
    """
    body = text[1:] if text.startswith("+") else text
    if not body or not (body.isascii() and body.isdigit()):
        raise InvalidExponentError(text)
    return strip_leading_zeros(body)


def strip_leading_zeros(digits: str) -> str:
    """Drop leading zeros; an all-zero string becomes ``""``."""
    return digits.lstrip("0")


def split_groups(digits: str) -> list[int]:
    """Split significant *digits* into base-1000 groups, most significant first.

    The leading group holds ``len(digits) % 3`` digits (or a full three).

    Examples:
        >>> split_groups("1234567")
        [1, 234, 567]
        >>> split_groups("100000")
        [100, 0]
    """
    if not digits:
        return []
    lead = len(digits) % 3 or 3
    groups = [int(digits[:lead])]
    groups.extend(int(digits[i : i + 3]) for i in range(lead, len(digits), 3))
    return groups


def divmod_small(digits: str, divisor: int) -> tuple[str, int]:
    """Long division of a digit string by *divisor* in [1, 10].

    Returns ``(quotient, remainder)`` with the quotient's leading zeros
    stripped (zero is ``""``).
    """
    if not 1 <= divisor <= 10:
        msg = f"divmod_small divisor must be in [1, 10], got {divisor}"
        raise ContractViolation(msg)
    quotient: list[str] = []
    remainder = 0
    for char in digits:
        digit, remainder = divmod(remainder * 10 + ord(char) - 48, divisor)
        quotient.append(chr(48 + digit))
    return strip_leading_zeros("".join(quotient)), remainder


def decrement(digits: str) -> str:
    """Subtract one from a positive digit string."""
    body = digits.rstrip("0")
    if not body:
        msg = f"Cannot decrement {digits!r}: value must be positive"
        raise ContractViolation(msg)
    borrowed = len(digits) - len(body)
    last = chr(ord(body[-1]) - 1)
    return strip_leading_zeros(body[:-1] + last + "9" * borrowed)
