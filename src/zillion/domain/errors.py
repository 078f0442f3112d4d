"""Error taxonomy for the naming engine.

User-facing failures derive from :class:`NamingError` and carry a stable
``code`` that the service layer copies into ``ServiceError.code``.

:class:`ContractViolation` is different: it signals a bug in group
segmentation (a three-digit helper received an out-of-range value) and
is never caught.
"""

from __future__ import annotations

from typing import Any, ClassVar


class NamingError(ValueError):
    """Base class for recoverable naming failures."""

    code: ClassVar[str] = "NAMING_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for ``ServiceError.detail``."""
        return {}


class ParseError(NamingError):
    """The input text could not be read as a number."""

    code: ClassVar[str] = "PARSE_ERROR"


class InvalidDigitError(ParseError):
    """A numeral contains a character outside ``0``-``9``."""

    code: ClassVar[str] = "INVALID_DIGIT"

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid digit {char!r} at position {position}")

    def detail(self) -> dict[str, Any]:
        return {"char": self.char, "position": self.position}


class InvalidExponentError(ParseError):
    """An exponent is not a non-negative integer literal."""

    code: ClassVar[str] = "INVALID_EXPONENT"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid exponent {text!r}: expected a non-negative integer")

    def detail(self) -> dict[str, Any]:
        return {"exponent": self.text}


class UnsupportedSchemeError(NamingError):
    """The requested naming scheme has no implementation."""

    code: ClassVar[str] = "UNSUPPORTED_SCHEME"

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"Naming scheme {scheme!r} is not available")

    def detail(self) -> dict[str, Any]:
        return {"scheme": self.scheme}


class UnsupportedScaleError(NamingError):
    """The requested scale is not implemented by the scheme."""

    code: ClassVar[str] = "UNSUPPORTED_SCALE"

    def __init__(self, scale: str, scheme: str) -> None:
        self.scale = scale
        self.scheme = scheme
        super().__init__(f"Scale {scale!r} is not supported by the {scheme!r} scheme")

    def detail(self) -> dict[str, Any]:
        return {"scale": self.scale, "scheme": self.scheme}


class ContractViolation(AssertionError):
    """Internal invariant broken. Indicates a bug, not bad input."""


def check_three_digit(n: int) -> None:
    """Raise :class:`ContractViolation` unless ``0 <= n <= 999``."""
    if not 0 <= n <= 999:
        msg = f"Three-digit helper received {n}; expected a value in [0, 999]"
        raise ContractViolation(msg)
