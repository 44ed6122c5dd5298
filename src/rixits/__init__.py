"""
rixits - URL-safe radix codecs.

Reversible mappings between non-negative integers (or text, via its
UTF-16 code units) and compact strings over a configurable alphabet.

Usage:
    from rixits import USRIXITS, RadixCodec

    codec = RadixCodec(USRIXITS)
    codec.encode_number(4096)        # "100"
    codec.decode_number("100")       # 4096
    codec.encode_string("A")         # "011~~~"
    codec.encode_number_base(255, 16)  # "FF"
"""

from .core.alphabet import Alphabet, ZeroStyle
from .core.codec import RadixCodec
from .core.radix import (
    decode_number,
    decode_number_base,
    encode_number,
    encode_number_base,
)
from .core.text import (
    chunk_width,
    decode_code_units,
    decode_string,
    encode_code_units,
    encode_string,
    read_string,
)
from .errors import (
    DigitOutOfRange,
    InvalidBase,
    InvalidCodeUnit,
    InvalidSymbol,
    RadixError,
    TruncatedInput,
)
from .variants import MYBASE64, QUERYSAFE64, USRIXITS, VARIANTS, get_codec, get_variant

__version__ = "1.0.0"

__all__ = [
    "Alphabet",
    "ZeroStyle",
    "RadixCodec",
    "encode_number",
    "decode_number",
    "encode_number_base",
    "decode_number_base",
    "encode_string",
    "decode_string",
    "encode_code_units",
    "decode_code_units",
    "read_string",
    "chunk_width",
    "RadixError",
    "InvalidSymbol",
    "DigitOutOfRange",
    "InvalidBase",
    "TruncatedInput",
    "InvalidCodeUnit",
    "MYBASE64",
    "USRIXITS",
    "QUERYSAFE64",
    "VARIANTS",
    "get_variant",
    "get_codec",
]
