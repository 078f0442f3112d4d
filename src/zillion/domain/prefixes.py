"""Latin "-illi" prefixes for zillion indices 0-999.

Conway-Wechsler builds the name of the n-th zillion from a units root,
a tens root, and a hundreds root, read in that order (so 23 is
"tres" + "viginti", not "viginti" + "tres"). Between the units root and
the next root a linking letter may be inserted for euphony:

* ``tre``   takes ``s``
* ``se``    takes ``s`` or ``x``
* ``septe`` takes ``n`` or ``m``
* ``nove``  takes ``n`` or ``m``

depending on which root follows. The final vowel of the assembled stem
is then elided and ``illi`` appended.

The link tables below differ between the tens path and the hundreds
path: digit 2 ("viginti" vs "ducenti") triggers ``s`` only when it is
the tens digit. That irregularity is part of the prefix grammar as used
here and must not be normalised away.
"""

from __future__ import annotations

from zillion.domain.errors import check_three_digit

SMALL_PREFIXES: tuple[str, ...] = (
    "nilli",
    "milli",
    "billi",
    "trilli",
    "quadrilli",
    "quintilli",
    "sextilli",
    "septilli",
    "octilli",
    "nonilli",
)

UNIT_PREFIXES: tuple[str, ...] = (
    "",
    "un",
    "duo",
    "tre",
    "quattuor",
    "quinqua",
    "se",
    "septe",
    "octo",
    "nove",
)

TENS_PREFIXES: tuple[str, ...] = (
    "",
    "deci",
    "viginti",
    "triginta",
    "quadraginta",
    "quinquaginta",
    "sexaginta",
    "septuaginta",
    "octoginta",
    "nonaginta",
)

HUNDREDS_PREFIXES: tuple[str, ...] = (
    "",
    "centi",
    "ducenti",
    "trecenti",
    "quadringenti",
    "quingenti",
    "sescenti",
    "septingenti",
    "octingenti",
    "nongenti",
)

STEM = "illi"

# unit digit -> ((linking letter, adjacent digits that trigger it), ...)
LinkRules = dict[int, tuple[tuple[str, frozenset[int]], ...]]

_N_DIGITS = frozenset({1, 3, 4, 5, 6, 7})
_M_DIGITS = frozenset({2, 8})

TENS_LINKS: LinkRules = {
    3: (("s", frozenset({2, 3, 4, 5, 8})),),
    6: (("s", frozenset({2, 3, 4, 5})), ("x", frozenset({1, 8}))),
    7: (("n", _N_DIGITS), ("m", _M_DIGITS)),
    9: (("n", _N_DIGITS), ("m", _M_DIGITS)),
}

HUNDREDS_LINKS: LinkRules = {
    3: (("s", frozenset({3, 4, 5, 8})),),
    6: (("s", frozenset({3, 4, 5})), ("x", frozenset({1, 8}))),
    7: (("n", _N_DIGITS), ("m", _M_DIGITS)),
    9: (("n", _N_DIGITS), ("m", _M_DIGITS)),
}


def link_letter(units: int, adjacent: int, rules: LinkRules) -> str:
    """Return the euphonic letter joining a units root to the next root, or ``""``."""
    for letter, digits in rules.get(units, ()):
        if adjacent in digits:
            return letter
    return ""


def zillion_prefix(n: int) -> str:
    """Build the prefix for the *n*-th zillion, *n* in [0, 999].

    Examples:
        >>> zillion_prefix(2)
        'billi'
        >>> zillion_prefix(16)
        'sexdecilli'
        >>> zillion_prefix(23)
        'tresvigintilli'
    """
    check_three_digit(n)
    if n < 10:
        return SMALL_PREFIXES[n]

    hundreds, rest = divmod(n, 100)
    tens, units = divmod(rest, 10)

    if tens:
        link = link_letter(units, tens, TENS_LINKS)
        stem = UNIT_PREFIXES[units] + link + TENS_PREFIXES[tens] + HUNDREDS_PREFIXES[hundreds]
    else:
        link = link_letter(units, hundreds, HUNDREDS_LINKS)
        stem = UNIT_PREFIXES[units] + link + HUNDREDS_PREFIXES[hundreds]

    # Every root ends in a vowel that "illi" replaces.
    return stem[:-1] + STEM
