"""Tests for naming scheme selection and dispatch."""

import pytest

from zillion.domain.errors import UnsupportedScaleError, UnsupportedSchemeError
from zillion.domain.schemes import SCHEME_REGISTRY, get_scheme, name_number, resolve_scale
from zillion.domain.types import Scale, Scheme


class TestGetScheme:
    def test_conway_registered(self) -> None:
        impl = get_scheme(Scheme.CONWAY)
        assert impl.scheme is Scheme.CONWAY
        assert get_scheme("conway") is impl

    def test_knuth_not_implemented(self) -> None:
        assert Scheme.KNUTH not in SCHEME_REGISTRY
        with pytest.raises(UnsupportedSchemeError) as exc_info:
            get_scheme("knuth")
        assert exc_info.value.code == "UNSUPPORTED_SCHEME"
        assert exc_info.value.detail() == {"scheme": "knuth"}

    def test_unknown_scheme(self) -> None:
        with pytest.raises(UnsupportedSchemeError):
            get_scheme("roman")


class TestResolveScale:
    def test_known(self) -> None:
        assert resolve_scale("short") is Scale.SHORT
        assert resolve_scale(Scale.BRITISH) is Scale.BRITISH

    def test_unknown(self) -> None:
        with pytest.raises(UnsupportedScaleError) as exc_info:
            resolve_scale("imperial")
        assert exc_info.value.detail() == {"scale": "imperial", "scheme": "conway"}


class TestNameNumber:
    def test_full_name(self) -> None:
        assert name_number("1000") == "one thousand"

    def test_power(self) -> None:
        assert name_number("6", power=True) == "One million"

    def test_scheme_method_dispatch(self) -> None:
        impl = get_scheme("conway")
        assert impl.name("9", power=True) == "One billion"
        assert impl.name("9") == "nine"

    @pytest.mark.parametrize("scale", ["british", "peletier"])
    def test_long_scales_unsupported(self, scale: str) -> None:
        with pytest.raises(UnsupportedScaleError) as exc_info:
            name_number("1000000", scale=scale)
        assert exc_info.value.code == "UNSUPPORTED_SCALE"

    def test_knuth_unsupported(self) -> None:
        with pytest.raises(UnsupportedSchemeError):
            name_number("1", scheme=Scheme.KNUTH)
