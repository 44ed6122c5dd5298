"""Preset alphabets.

All three are 64-symbol, URL-query-safe extensions of hexadecimal
(0-9, A-Z, a-z, then two punctuation characters). They differ in the
trailing punctuation, the pad symbol and how zero is written:

    mybase64     ...xyz._   pad "-" outside the digits     zero "-"
    usrixits     ...xyz-.   pad "~" outside the digits     zero "~"
    querysafe64  ...xyz-_   pad "." outside the digits     zero "0"

No preset pad is a digit, so the text sentinel is never a valid chunk.
"""
from .core.alphabet import Alphabet, ZeroStyle
from .core.codec import RadixCodec

HEX_EXTENDED = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)

MYBASE64 = Alphabet(HEX_EXTENDED + "._", pad="-", zero=ZeroStyle.PAD, name="mybase64")
USRIXITS = Alphabet(HEX_EXTENDED + "-.", pad="~", zero=ZeroStyle.PAD, name="usrixits")
QUERYSAFE64 = Alphabet(HEX_EXTENDED + "-_", pad=".", zero=ZeroStyle.DIGIT, name="querysafe64")

VARIANTS = {a.name: a for a in (MYBASE64, USRIXITS, QUERYSAFE64)}
DEFAULT_VARIANT = USRIXITS.name


def get_variant(name: str) -> Alphabet:
    """Look up a preset alphabet by name (case-insensitive)."""
    alphabet = VARIANTS.get(name.strip().lower())
    if alphabet is None:
        raise ValueError(f"Unknown variant {name!r}; expected one of {', '.join(VARIANTS)}")
    return alphabet


def get_codec(name: str) -> RadixCodec:
    return RadixCodec(get_variant(name))
