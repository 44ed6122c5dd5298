"""Error kinds raised by the radix codecs.

All of them derive from ValueError, so callers that already catch
ValueError around a decode keep working.
"""


class RadixError(ValueError):
    """Base class for every codec failure."""


class InvalidSymbol(RadixError):
    """A character is not part of the alphabet."""

    def __init__(self, symbol: str, position: int | None = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid symbol {symbol!r}{where}")


class DigitOutOfRange(RadixError):
    """A character is in the alphabet but is not a digit of the requested base."""

    def __init__(self, symbol: str, digit: int, base: int, position: int | None = None):
        self.symbol = symbol
        self.digit = digit
        self.base = base
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Invalid base-{base} character {symbol!r}{where} (digit value {digit})"
        )


class InvalidBase(RadixError):
    """The requested base is outside [2, radix]."""

    def __init__(self, base, radix: int):
        self.base = base
        self.radix = radix
        super().__init__(f"Base must be 2-{radix}, got {base!r}")


class TruncatedInput(RadixError):
    """An encoded text stream ends in the middle of a chunk."""

    def __init__(self, position: int, remaining: int, width: int):
        self.position = position
        self.remaining = remaining
        self.width = width
        super().__init__(
            f"Truncated chunk at position {position}: "
            f"{remaining} character(s) left, chunks are {width} wide"
        )


class InvalidCodeUnit(RadixError):
    """A text chunk decodes to a value outside the 16-bit code unit range."""

    def __init__(self, value: int, position: int | None = None):
        self.value = value
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Chunk{where} decodes to {value}, not a code unit (0-65535)")
