"""Integer <-> radix string conversion over an Alphabet.

Numbers are written most-significant digit first using the alphabet's
symbols as digits. Python ints are unbounded, so values well past 64 bits
round-trip unchanged.

Two entry points:
    encode_number / decode_number            base = alphabet radix
    encode_number_base / decode_number_base  any base in [2, radix], using
                                             the first `base` symbols
"""
from __future__ import annotations

from .alphabet import Alphabet, ZeroStyle
from ..errors import DigitOutOfRange, InvalidBase, InvalidSymbol


def _check_value(value) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Value must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Cannot encode negative values, got {value}")


def _check_base(alphabet: Alphabet, base) -> None:
    if not isinstance(base, int) or isinstance(base, bool):
        raise InvalidBase(base, alphabet.radix)
    if not 2 <= base <= alphabet.radix:
        raise InvalidBase(base, alphabet.radix)


def to_digits(alphabet: Alphabet, value: int, base: int, min_length: int = 1) -> str:
    """Write value in base, left-padding with the zero digit to min_length.

    No zero-style handling: zero becomes symbols[0] repeated. Callers are
    expected to have validated value and base.
    """
    symbols = alphabet.symbols
    chars = []
    while value:
        value, remainder = divmod(value, base)
        chars.append(symbols[remainder])

    result = "".join(reversed(chars))
    if len(result) < min_length:
        result = symbols[0] * (min_length - len(result)) + result
    return result


def from_digits(alphabet: Alphabet, encoded: str, base: int, offset: int = 0) -> int:
    """Accumulate digits left to right. offset shifts reported positions."""
    index = alphabet.index
    result = 0
    for i, char in enumerate(encoded):
        digit = index.get(char)
        if digit is None:
            raise InvalidSymbol(char, offset + i)
        if digit >= base:
            raise DigitOutOfRange(char, digit, base, offset + i)
        result = result * base + digit
    return result


def _encode(alphabet: Alphabet, value: int, base: int, min_length: int) -> str:
    if value == 0 and min_length <= 1 and alphabet.zero is ZeroStyle.PAD:
        return alphabet.pad
    return to_digits(alphabet, value, base, min_length)


def _decode(alphabet: Alphabet, encoded: str, base: int) -> int:
    if not isinstance(encoded, str):
        raise TypeError(f"Encoded value must be a string, got {type(encoded).__name__}")
    if alphabet.zero is ZeroStyle.PAD and encoded == alphabet.pad:
        return 0
    return from_digits(alphabet, encoded, base)


def encode_number(alphabet: Alphabet, value: int, min_length: int = 1) -> str:
    """Encode a non-negative integer in the alphabet's radix.

    Zero follows the alphabet's zero style. With min_length > 1 the result
    is left-padded with symbols[0] and the pad placeholder is never used.
    """
    _check_value(value)
    return _encode(alphabet, value, alphabet.radix, min_length)


def decode_number(alphabet: Alphabet, encoded: str) -> int:
    """Decode a radix string. The empty string decodes to 0."""
    return _decode(alphabet, encoded, alphabet.radix)


def encode_number_base(alphabet: Alphabet, value: int, base: int = 10) -> str:
    """Encode a non-negative integer in base, 2 <= base <= radix."""
    _check_base(alphabet, base)
    _check_value(value)
    return _encode(alphabet, value, base, 1)


def decode_number_base(alphabet: Alphabet, encoded: str, base: int = 10) -> int:
    """Decode a base-`base` string written with the first `base` symbols.

    Raises InvalidSymbol for characters outside the alphabet and
    DigitOutOfRange for alphabet characters whose value is >= base.
    """
    _check_base(alphabet, base)
    return _decode(alphabet, encoded, base)


def digit_count(value: int, base: int) -> int:
    """Number of base-`base` digits needed for value (1 for zero)."""
    count = 1
    while value >= base:
        value //= base
        count += 1
    return count
