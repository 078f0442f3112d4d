"""NamingService — the full_name and power_of_ten operations.

Wraps the domain engine with scheme/scale selection, input cleanup,
telemetry, and conversion of :class:`NamingError` into a failed
ServiceResult. :class:`ContractViolation` is not caught; it means the
engine itself is broken.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zillion.domain.digits import (
    parse_exponent,
    split_groups,
    strip_leading_zeros,
    validate_digits,
)
from zillion.domain.errors import NamingError
from zillion.domain.schemes import get_scheme, resolve_scale
from zillion.domain.types import Scale, Scheme
from zillion.services.result import ServiceError, ServiceResult
from zillion.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from zillion.config.settings import ZillionSettings

logger = logging.getLogger(__name__)

SEPARATORS = (",", "_", " ")


class NamingService:
    """Names numerals and powers of ten with a fixed scheme and scale.

    Usage::

        service = NamingService(scheme="conway", scale="short")
        service.full_name("1000000").data["name"]  # "one million"
    """

    def __init__(
        self,
        *,
        scheme: Scheme | str = Scheme.CONWAY,
        scale: Scale | str = Scale.SHORT,
        strip_separators: bool = False,
    ) -> None:
        self.scheme = scheme
        self.scale = scale
        self.strip_separators = strip_separators

    @classmethod
    def from_settings(cls, settings: ZillionSettings) -> NamingService:
        """Build a service from resolved settings (CLI overrides already applied)."""
        return cls(
            scheme=settings.effective_scheme,
            scale=settings.effective_scale,
            strip_separators=settings.input.strip_separators,
        )

    def _clean(self, text: str) -> str:
        if not self.strip_separators:
            return text
        for sep in SEPARATORS:
            text = text.replace(sep, "")
        return text

    def _failure(self, op: str, exc: NamingError) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail()),
        )

    @traced
    def full_name(self, text: str) -> ServiceResult:
        """Name the numeral *text*."""
        op = "full_name"
        digits = self._clean(text)
        try:
            with trace_span("select_scheme"):
                impl = get_scheme(self.scheme)
                scale = resolve_scale(self.scale, impl.scheme)
            with trace_span("validate"):
                validate_digits(digits)
            with trace_span("segment") as span:
                groups = len(split_groups(strip_leading_zeros(digits)))
                if span:
                    span.annotate("digits", len(digits))
                    span.annotate("groups", groups)
            with trace_span("compose"):
                name = impl.full_name(digits, scale)
        except NamingError as exc:
            return self._failure(op, exc)

        logger.debug("Named %d-digit numeral (%d groups)", len(digits), groups)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": text,
                "name": name,
                "scheme": impl.scheme.value,
                "scale": scale.value,
                "groups": groups,
            },
        )

    @traced
    def power_of_ten(self, text: str) -> ServiceResult:
        """Name ``10**text``."""
        op = "power_of_ten"
        try:
            with trace_span("select_scheme"):
                impl = get_scheme(self.scheme)
                scale = resolve_scale(self.scale, impl.scheme)
            with trace_span("validate") as span:
                significant = parse_exponent(text)
                if span:
                    span.annotate("exponent_digits", len(significant))
            with trace_span("compose"):
                name = impl.power_of_ten(text, scale)
        except NamingError as exc:
            return self._failure(op, exc)

        logger.debug("Named power of ten with %d-digit exponent", len(text))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "exponent": text,
                "name": name,
                "scheme": impl.scheme.value,
                "scale": scale.value,
            },
        )
