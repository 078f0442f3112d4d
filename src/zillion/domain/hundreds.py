"""Names for a single group of up to three digits (0-999)."""

from __future__ import annotations

from zillion.domain.errors import check_three_digit

NAMES: tuple[str, ...] = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

TENS: tuple[str, ...] = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)


def name_hundreds(n: int) -> str:
    """Name *n* in [0, 999]; returns ``""`` for 0.

    Examples:
        >>> name_hundreds(0)
        ''
        >>> name_hundreds(115)
        'one hundred fifteen'
        >>> name_hundreds(42)
        'forty two'
    """
    check_three_digit(n)
    hundreds, rest = divmod(n, 100)
    tens, units = divmod(rest, 10)

    words: list[str] = []
    if hundreds:
        words.extend((NAMES[hundreds], "hundred"))
    if tens > 1:
        words.append(TENS[tens])
        if units:
            words.append(NAMES[units])
    elif rest:
        words.append(NAMES[rest])
    return " ".join(words)
