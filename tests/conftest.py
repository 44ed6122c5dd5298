"""Shared fixtures for rixits tests."""

import pytest

from rixits.core.alphabet import Alphabet
from rixits.core.codec import RadixCodec
from rixits.variants import MYBASE64, QUERYSAFE64, USRIXITS, VARIANTS


@pytest.fixture
def hex_alphabet():
    """Plain hexadecimal, no pad."""
    return Alphabet("0123456789ABCDEF", name="hex")


@pytest.fixture
def querysafe():
    return RadixCodec(QUERYSAFE64)


@pytest.fixture
def usrixits():
    return RadixCodec(USRIXITS)


@pytest.fixture
def mybase64():
    return RadixCodec(MYBASE64)


@pytest.fixture(params=sorted(VARIANTS))
def variant_codec(request):
    """Each preset variant in turn."""
    return RadixCodec(VARIANTS[request.param])


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RIXITS_* variables so config tests start from defaults."""
    for key in ("RIXITS_VARIANT", "RIXITS_SYMBOLS", "RIXITS_PAD", "RIXITS_ZERO"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
