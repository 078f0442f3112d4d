"""Naming scheme and scale selectors."""

from __future__ import annotations

from enum import StrEnum


class Scheme(StrEnum):
    """Schemes for turning numbers into names."""

    CONWAY = "conway"
    KNUTH = "knuth"


class Scale(StrEnum):
    """Scale used by the Conway-Wechsler scheme.

    Only SHORT (each -illion is 1000x the previous) is implemented.
    """

    SHORT = "short"
    BRITISH = "british"
    PELETIER = "peletier"
