"""Self-delimiting text encoding.

Text is split into UTF-16 code units (0-65535). Each unit is written as a
fixed-width chunk of W digits, W being the fewest digits that cover the
whole code unit range in the alphabet's radix (3 for radix 64). The stream
ends with a sentinel chunk of W pad symbols:

    "A" with radix 64, pad "~"  ->  "011" + "~~~"

Fixed width is what lets the decoder find chunk boundaries without a
separator. The sentinel never collides with a real chunk: a pad outside
the alphabet is not a digit at all, and a pad that is also a digit must
make the sentinel decode above 65535 (checked by text_sentinel).
"""
from __future__ import annotations

import struct
from typing import Iterable, Sequence

from .alphabet import Alphabet
from .radix import digit_count, from_digits, to_digits
from ..errors import InvalidCodeUnit, TruncatedInput

CODE_UNIT_MAX = 0xFFFF


def chunk_width(radix: int) -> int:
    """Digits per code unit chunk for a given radix."""
    if radix < 2:
        raise ValueError(f"Radix must be at least 2, got {radix}")
    return digit_count(CODE_UNIT_MAX, radix)


def text_sentinel(alphabet: Alphabet) -> str:
    """The end-of-string chunk for an alphabet."""
    if alphabet.pad is None:
        raise ValueError(f"Alphabet {alphabet} has no pad symbol; text encoding needs one")
    width = chunk_width(alphabet.radix)
    sentinel = alphabet.pad * width
    if alphabet.pad_is_digit:
        value = from_digits(alphabet, sentinel, alphabet.radix)
        if value <= CODE_UNIT_MAX:
            raise ValueError(
                f"Pad {alphabet.pad!r} cannot end text: {sentinel!r} is code unit {value}"
            )
    return sentinel


def to_code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units (surrogate pairs for astral characters)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(data) // 2}H", data))


def from_code_units(units: Sequence[int]) -> str:
    data = struct.pack(f"<{len(units)}H", *units)
    return data.decode("utf-16-le", "surrogatepass")


def encode_code_units(alphabet: Alphabet, units: Iterable[int]) -> str:
    """Encode code units as fixed-width chunks followed by the sentinel."""
    sentinel = text_sentinel(alphabet)
    width = len(sentinel)
    chunks = []
    for unit in units:
        if not isinstance(unit, int) or isinstance(unit, bool) or not 0 <= unit <= CODE_UNIT_MAX:
            raise ValueError(f"Code unit must be 0-{CODE_UNIT_MAX}, got {unit!r}")
        chunks.append(to_digits(alphabet, unit, alphabet.radix, width))
    chunks.append(sentinel)
    return "".join(chunks)


def read_code_units(alphabet: Alphabet, encoded: str, start: int = 0) -> tuple[list[int], int]:
    """Read one encoded string starting at `start`.

    Returns the code units and the offset just past the sentinel. Input
    that runs out exactly on a chunk boundary is accepted as terminated.
    """
    if not isinstance(encoded, str):
        raise TypeError(f"Encoded text must be a string, got {type(encoded).__name__}")
    sentinel = text_sentinel(alphabet)
    width = len(sentinel)
    radix = alphabet.radix

    units = []
    pos = start
    end = len(encoded)
    while pos < end:
        chunk = encoded[pos:pos + width]
        if chunk == sentinel:
            return units, pos + width
        if len(chunk) < width:
            raise TruncatedInput(pos, len(chunk), width)
        value = from_digits(alphabet, chunk, radix, offset=pos)
        if value > CODE_UNIT_MAX:
            raise InvalidCodeUnit(value, pos)
        units.append(value)
        pos += width
    return units, pos


def decode_code_units(alphabet: Alphabet, encoded: str) -> list[int]:
    """Decode the first encoded string to code units; trailing input is ignored."""
    units, _ = read_code_units(alphabet, encoded)
    return units


def encode_string(alphabet: Alphabet, text: str) -> str:
    """Encode text into a self-delimiting radix string."""
    if not isinstance(text, str):
        raise TypeError(f"Text must be a string, got {type(text).__name__}")
    return encode_code_units(alphabet, to_code_units(text))


def read_string(alphabet: Alphabet, encoded: str, start: int = 0) -> tuple[str, int]:
    """Read one string from a stream of concatenated encodings.

        stream = encode_string(a, "hi") + encode_string(a, "there")
        first, pos = read_string(a, stream)
        second, pos = read_string(a, stream, pos)
    """
    units, end = read_code_units(alphabet, encoded, start)
    return from_code_units(units), end


def decode_string(alphabet: Alphabet, encoded: str) -> str:
    """Decode a self-delimiting radix string back to text."""
    text, _ = read_string(alphabet, encoded)
    return text
