"""Naming scheme registry and the single dispatch point.

A scheme is a pair of functions sharing one contract::

    full_name(digits: str, scale: Scale) -> str
    power_of_ten(exponent: str, scale: Scale) -> str

The caller picks a scheme once via :func:`get_scheme` (or lets
:func:`name_number` do it); the engine never re-dispatches internally.
Knuth's -yllion scheme is a recognised selector without a registered
implementation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from zillion.domain import conway_wechsler
from zillion.domain.errors import UnsupportedScaleError, UnsupportedSchemeError
from zillion.domain.types import Scale, Scheme

NameFn = Callable[[str, Scale], str]


@dataclass(frozen=True)
class NamingScheme:
    """A registered naming scheme."""

    scheme: Scheme
    full_name: NameFn
    power_of_ten: NameFn

    def name(self, text: str, *, power: bool = False, scale: Scale = Scale.SHORT) -> str:
        """Name *text* as a numeral, or as an exponent of ten when *power* is set."""
        if power:
            return self.power_of_ten(text, scale)
        return self.full_name(text, scale)


SCHEME_REGISTRY: dict[Scheme, NamingScheme] = {
    Scheme.CONWAY: NamingScheme(
        scheme=Scheme.CONWAY,
        full_name=conway_wechsler.full_name,
        power_of_ten=conway_wechsler.power_of_ten,
    ),
}


def get_scheme(scheme: Scheme | str) -> NamingScheme:
    """Look up the implementation for *scheme*.

    Raises:
        UnsupportedSchemeError: If *scheme* is unknown or not implemented.
    """
    try:
        key = Scheme(scheme)
    except ValueError:
        raise UnsupportedSchemeError(str(scheme)) from None
    impl = SCHEME_REGISTRY.get(key)
    if impl is None:
        raise UnsupportedSchemeError(key.value)
    return impl


def resolve_scale(scale: Scale | str, scheme: Scheme | str = Scheme.CONWAY) -> Scale:
    """Coerce *scale* to :class:`Scale`, raising :class:`UnsupportedScaleError` if unknown."""
    try:
        return Scale(scale)
    except ValueError:
        raise UnsupportedScaleError(str(scale), str(scheme)) from None


def name_number(
    text: str,
    *,
    power: bool = False,
    scheme: Scheme | str = Scheme.CONWAY,
    scale: Scale | str = Scale.SHORT,
) -> str:
    """Name *text* with the selected scheme and scale."""
    impl = get_scheme(scheme)
    return impl.name(text, power=power, scale=resolve_scale(scale, impl.scheme))
