"""Scale words for group indices: "", "thousand", "million", ... "millimillion", ...

Group index *g* counts three-digit groups from the units group. Index 0
has no scale word and index 1 is "thousand". From index 2 on the word
is the chain of prefixes for the base-1000 digits of ``g - 1`` followed
by "on", so g=2 maps to prefix 1 ("milli") and g=1002 to 1,001
("millimilli").
"""

from __future__ import annotations

from collections.abc import Iterable

from zillion.domain.errors import ContractViolation
from zillion.domain.prefixes import zillion_prefix

THOUSAND = "thousand"
SUFFIX = "on"


def zillion_word(groups: Iterable[int]) -> str:
    """Chain prefixes for base-1000 *groups* (most significant first) and close with "on"."""
    return "".join(zillion_prefix(group) for group in groups) + SUFFIX


def zillion_suffix(index: int) -> str:
    """Return the scale word for group *index*.

    Examples:
        >>> zillion_suffix(1)
        'thousand'
        >>> zillion_suffix(3)
        'billion'
        >>> zillion_suffix(1001)
        'millinillion'
    """
    if index < 0:
        msg = f"Group index must be non-negative, got {index}"
        raise ContractViolation(msg)
    if index == 0:
        return ""
    if index == 1:
        return THOUSAND

    remaining = index - 1
    groups: list[int] = []
    while remaining:
        remaining, group = divmod(remaining, 1000)
        groups.append(group)
    groups.reverse()
    return zillion_word(groups)
