"""RadixCodec: every codec operation bound to one Alphabet."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from . import radix as _radix
from . import text as _text
from .alphabet import Alphabet


@dataclass(frozen=True, slots=True)
class RadixCodec:
    """
    Codec for a single alphabet.

    Holds no state besides the (immutable) alphabet, so one instance can
    serve any number of threads.

        codec = RadixCodec(Alphabet("0123456789ABCDEF"))
        codec.encode_number(255)    -> "FF"
        codec.decode_number("FF")   -> 255
    """
    alphabet: Alphabet

    @property
    def radix(self) -> int:
        return self.alphabet.radix

    @property
    def chunk_width(self) -> int:
        """Digits per code unit in encoded text."""
        return _text.chunk_width(self.alphabet.radix)

    def encode_number(self, value: int, min_length: int = 1) -> str:
        return _radix.encode_number(self.alphabet, value, min_length)

    def decode_number(self, encoded: str) -> int:
        return _radix.decode_number(self.alphabet, encoded)

    def encode_number_base(self, value: int, base: int = 10) -> str:
        return _radix.encode_number_base(self.alphabet, value, base)

    def decode_number_base(self, encoded: str, base: int = 10) -> int:
        return _radix.decode_number_base(self.alphabet, encoded, base)

    def encode_string(self, value: str) -> str:
        return _text.encode_string(self.alphabet, value)

    def decode_string(self, encoded: str) -> str:
        return _text.decode_string(self.alphabet, encoded)

    def read_string(self, encoded: str, start: int = 0) -> tuple[str, int]:
        return _text.read_string(self.alphabet, encoded, start)

    def encode_code_units(self, units: Iterable[int]) -> str:
        return _text.encode_code_units(self.alphabet, units)

    def decode_code_units(self, encoded: str) -> list[int]:
        return _text.decode_code_units(self.alphabet, encoded)
