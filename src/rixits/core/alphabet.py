"""Symbol tables for the radix codecs.

An Alphabet is an ordered, duplicate-free string of digit symbols. The
position of a symbol is its digit value, so the radix is simply the
length of the table. An optional pad symbol terminates encoded text and,
depending on the zero style, can stand in for the number zero.

Alphabets are immutable and can be shared freely between threads.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..errors import InvalidSymbol


class ZeroStyle(Enum):
    DIGIT = "digit"  # zero is symbols[0]
    PAD = "pad"      # zero is the pad character, which must not be a digit


@dataclass(frozen=True, slots=True)
class Alphabet:
    """
    Ordered digit symbols plus pad and zero conventions.

    Examples:
        Alphabet("0123456789ABCDEF")                      hexadecimal
        Alphabet(symbols, pad="~", zero=ZeroStyle.PAD)    "~" encodes zero
    """
    symbols: str
    pad: str | None = None
    zero: ZeroStyle = ZeroStyle.DIGIT
    name: str = ""
    index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.symbols, str):
            raise TypeError(f"Symbols must be a string, got {type(self.symbols).__name__}")
        if len(self.symbols) < 2:
            raise ValueError(f"Alphabet needs at least 2 symbols, got {len(self.symbols)}")

        index: dict[str, int] = {}
        for i, char in enumerate(self.symbols):
            if char in index:
                raise ValueError(f"Duplicate symbol {char!r} at positions {index[char]} and {i}")
            index[char] = i

        if self.pad is not None and len(self.pad) != 1:
            raise ValueError(f"Pad must be a single character, got {self.pad!r}")
        if self.zero is ZeroStyle.PAD:
            if self.pad is None:
                raise ValueError("Zero style PAD requires a pad symbol")
            if self.pad in index:
                raise ValueError(
                    f"Pad {self.pad!r} is also digit {index[self.pad]}; "
                    "it cannot double as the zero placeholder"
                )

        object.__setattr__(self, "index", MappingProxyType(index))

    @property
    def radix(self) -> int:
        return len(self.symbols)

    @property
    def pad_is_digit(self) -> bool:
        """True when the pad symbol also carries a digit value."""
        return self.pad is not None and self.pad in self.index

    @property
    def zero_symbol(self) -> str:
        """The representation of the number zero."""
        if self.zero is ZeroStyle.PAD:
            return self.pad
        return self.symbols[0]

    def value_of(self, symbol: str, position: int | None = None) -> int:
        """Return the digit value of a symbol."""
        value = self.index.get(symbol)
        if value is None:
            raise InvalidSymbol(symbol, position)
        return value

    def symbol_of(self, value: int) -> str:
        """Return the symbol for a digit value in [0, radix)."""
        if not 0 <= value < len(self.symbols):
            raise IndexError(f"Digit value must be 0-{len(self.symbols) - 1}, got {value}")
        return self.symbols[value]

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.index

    def __str__(self) -> str:
        return self.name or self.symbols
