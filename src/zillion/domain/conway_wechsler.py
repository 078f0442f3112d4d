"""Conway-Wechsler naming for numerals and powers of ten (short scale).

Two entry points:

* :func:`full_name` names a numeral given as a digit string of any
  length, e.g. ``"1000000"`` -> ``"one million"``.
* :func:`power_of_ten` names ``10**n`` given only *n*, e.g. ``"6"`` ->
  ``"One million"``, without building the ``n + 1`` digit numeral.

Only :attr:`Scale.SHORT` is implemented; the long scales raise
:class:`UnsupportedScaleError`.
"""

from __future__ import annotations

from zillion.domain.digits import (
    decrement,
    divmod_small,
    parse_exponent,
    split_groups,
    strip_leading_zeros,
    validate_digits,
)
from zillion.domain.errors import UnsupportedScaleError
from zillion.domain.hundreds import name_hundreds
from zillion.domain.types import Scale, Scheme
from zillion.domain.zillions import THOUSAND, zillion_suffix, zillion_word

ZERO = "zero"

# Indexed by exponent % 3.
LEADING_WORDS: tuple[str, ...] = ("One", "Ten", "One hundred")


def _require_short(scale: Scale | str) -> None:
    if scale != Scale.SHORT:
        raise UnsupportedScaleError(str(scale), Scheme.CONWAY.value)


def full_name(digits: str, scale: Scale = Scale.SHORT) -> str:
    """Name the numeral *digits*.

    Leading zeros are ignored; an all-zero (or empty) numeral is "zero".
    Groups equal to ``000`` contribute nothing.

    Raises:
        InvalidDigitError: If *digits* contains anything but ``0``-``9``.
        UnsupportedScaleError: If *scale* is not the short scale.
    """
    _require_short(scale)
    validate_digits(digits)

    significant = strip_leading_zeros(digits)
    if not significant:
        return ZERO

    groups = split_groups(significant)
    words: list[str] = []
    for index, value in zip(range(len(groups) - 1, -1, -1), groups, strict=True):
        hundreds = name_hundreds(value)
        if not hundreds:
            continue
        words.append(hundreds)
        suffix = zillion_suffix(index)
        if suffix:
            words.append(suffix)
    return " ".join(words)


def power_of_ten(exponent: str, scale: Scale = Scale.SHORT) -> str:
    """Name ``10**exponent`` for a non-negative integer literal *exponent*.

    Raises:
        InvalidExponentError: If *exponent* is not a non-negative integer.
        UnsupportedScaleError: If *scale* is not the short scale.
    """
    _require_short(scale)
    digits = parse_exponent(exponent)

    zillions, offset = divmod_small(digits, 3)
    leading = LEADING_WORDS[offset]
    if not zillions:
        return leading
    if zillions == "1":
        return f"{leading} {THOUSAND}"
    return f"{leading} {zillion_word(split_groups(decrement(zillions)))}"
