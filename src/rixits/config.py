"""Alphabet selection from arguments and environment.

Environment:
    RIXITS_VARIANT     Preset name (default: usrixits)
    RIXITS_SYMBOLS     Custom digit symbols; overrides the preset
    RIXITS_PAD         Pad character for a custom alphabet
    RIXITS_ZERO        Zero style for a custom alphabet: digit | pad

Explicit arguments win over the environment, the environment wins over
the defaults.
"""
from __future__ import annotations

import logging
import os
from typing import Mapping

from .core.alphabet import Alphabet, ZeroStyle
from .variants import DEFAULT_VARIANT, get_variant

logger = logging.getLogger(__name__)

ENV_VARIANT = "RIXITS_VARIANT"
ENV_SYMBOLS = "RIXITS_SYMBOLS"
ENV_PAD = "RIXITS_PAD"
ENV_ZERO = "RIXITS_ZERO"


def parse_zero_style(value: str) -> ZeroStyle:
    try:
        return ZeroStyle(value.strip().lower())
    except ValueError:
        choices = ", ".join(z.value for z in ZeroStyle)
        raise ValueError(f"Zero style must be one of {choices}, got {value!r}") from None


def load_alphabet(
    variant: str | None = None,
    symbols: str | None = None,
    pad: str | None = None,
    zero: str | ZeroStyle | None = None,
    environ: Mapping[str, str] | None = None,
) -> Alphabet:
    """Resolve the active alphabet.

    A symbol string (argument or RIXITS_SYMBOLS) builds a custom alphabet
    with the given pad and zero style. Otherwise a preset is looked up by
    name. Raises ValueError for unknown presets or invalid custom tables.
    """
    env = os.environ if environ is None else environ

    symbols = symbols or env.get(ENV_SYMBOLS) or None
    if symbols:
        pad = pad or env.get(ENV_PAD) or None
        zero = zero or env.get(ENV_ZERO) or ZeroStyle.DIGIT
        if not isinstance(zero, ZeroStyle):
            zero = parse_zero_style(zero)
        alphabet = Alphabet(symbols, pad=pad, zero=zero, name="custom")
        logger.debug("Custom alphabet: radix=%d pad=%r zero=%s",
                     alphabet.radix, alphabet.pad, alphabet.zero.value)
        return alphabet

    if pad or zero:
        raise ValueError("Pad and zero style can only be set together with custom symbols")

    name = variant or env.get(ENV_VARIANT) or DEFAULT_VARIANT
    alphabet = get_variant(name)
    logger.debug("Using variant %s", alphabet.name)
    return alphabet
