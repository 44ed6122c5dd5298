"""
Command-line interface for rixits.

Usage:
    rixits [options] <command> [args...]
    python -m rixits [options] <command> [args...]

Commands:
    encode-number <value>       Decimal integer to radix string
    decode-number <text>        Radix string to decimal integer
    encode-string <text>        Text to self-delimiting radix string
    decode-string <text>        Self-delimiting radix string to text
    encode-base <value> -b N    Decimal integer to base-N string
    decode-base <text> -b N     Base-N string to decimal integer
    alphabet                    Digit table of the active alphabet
    variants                    List preset alphabets

Environment:
    RIXITS_VARIANT, RIXITS_SYMBOLS, RIXITS_PAD, RIXITS_ZERO
    (see rixits.config)
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import load_alphabet
from .core.codec import RadixCodec
from .variants import VARIANTS


def parse_int(text: str) -> int:
    """Parse a decimal integer argument (underscores allowed)."""
    try:
        return int(text.strip(), 10)
    except ValueError:
        raise ValueError(f"Not a decimal integer: {text!r}") from None


# ---- Output formatting ----

def print_variants(alphabets):
    """One line per preset; numeric columns right-aligned."""
    headers = ["name", "radix", "pad", "zero", "tail"]
    rows = [(a.name, a.radix, a.pad or "", a.zero_symbol, a.symbols[-2:]) for a in alphabets]
    widths = [max(len(str(v)) for v in col) for col in zip(headers, *rows)]
    aligns = ["<", ">", "<", "<", "<"]
    fmt = "  ".join(f"{{:{a}{w}}}" for a, w in zip(aligns, widths))
    print(fmt.format(*headers))
    print(fmt.format(*["-" * w for w in widths]))
    for row in rows:
        print(fmt.format(*[str(v) for v in row]))


def digit_grid(alphabet, columns: int = 8) -> list[str]:
    """Digit value / symbol pairs, `columns` per line, values right-aligned.

        0 0    1 1    2 2 ...
    """
    width = len(str(alphabet.radix - 1))
    cells = [f"{i:>{width}} {char}" for i, char in enumerate(alphabet.symbols)]
    return ["   ".join(cells[i:i + columns]) for i in range(0, len(cells), columns)]


def emit(args: argparse.Namespace, value, output) -> None:
    if args.json:
        print(json.dumps({"input": value, "output": output}, ensure_ascii=False))
    else:
        print(output)


def codec_from_args(args: argparse.Namespace) -> RadixCodec:
    return RadixCodec(load_alphabet(
        variant=args.variant, symbols=args.symbols, pad=args.pad, zero=args.zero,
    ))


# ---- Commands ----

def cmd_encode_number(args: argparse.Namespace) -> int:
    codec = codec_from_args(args)
    value = parse_int(args.value)
    emit(args, value, codec.encode_number(value))
    return 0


def cmd_decode_number(args: argparse.Namespace) -> int:
    codec = codec_from_args(args)
    # JSON numbers lose precision past 2**53, so big values go out as strings
    result = codec.decode_number(args.text)
    emit(args, args.text, str(result) if args.json else result)
    return 0


def cmd_encode_string(args: argparse.Namespace) -> int:
    codec = codec_from_args(args)
    emit(args, args.text, codec.encode_string(args.text))
    return 0


def cmd_decode_string(args: argparse.Namespace) -> int:
    codec = codec_from_args(args)
    emit(args, args.text, codec.decode_string(args.text))
    return 0


def cmd_encode_base(args: argparse.Namespace) -> int:
    codec = codec_from_args(args)
    value = parse_int(args.value)
    emit(args, value, codec.encode_number_base(value, args.base))
    return 0


def cmd_decode_base(args: argparse.Namespace) -> int:
    codec = codec_from_args(args)
    result = codec.decode_number_base(args.text, args.base)
    emit(args, args.text, str(result) if args.json else result)
    return 0


def cmd_alphabet(args: argparse.Namespace) -> int:
    alphabet = codec_from_args(args).alphabet
    if args.json:
        print(json.dumps({
            "name": alphabet.name,
            "symbols": alphabet.symbols,
            "radix": alphabet.radix,
            "pad": alphabet.pad,
            "zero": alphabet.zero.value,
            "zero_symbol": alphabet.zero_symbol,
        }))
        return 0

    print(f"Alphabet: {alphabet}")
    print(f"Radix:    {alphabet.radix}")
    print(f"Pad:      {alphabet.pad!r}" + (" (also a digit)" if alphabet.pad_is_digit else ""))
    print(f"Zero:     {alphabet.zero_symbol!r} ({alphabet.zero.value})")
    print()
    for line in digit_grid(alphabet):
        print(line)
    return 0


def cmd_variants(args: argparse.Namespace) -> int:
    if args.json:
        print(json.dumps({
            name: {"symbols": a.symbols, "pad": a.pad, "zero": a.zero.value}
            for name, a in VARIANTS.items()
        }))
        return 0

    print_variants(VARIANTS.values())
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rixits",
        description="URL-safe radix codecs for integers and text",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--variant", help="Preset alphabet (default: $RIXITS_VARIANT or usrixits)")
    parser.add_argument("--symbols", help="Custom digit symbols (overrides --variant)")
    parser.add_argument("--pad", help="Pad character for --symbols")
    parser.add_argument("--zero", choices=["digit", "pad"], help="Zero style for --symbols")
    parser.add_argument("--json", action="store_true", help="Output JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    p = subparsers.add_parser("encode-number", help="Encode a decimal integer")
    p.add_argument("value", help="Non-negative decimal integer")
    p.set_defaults(func=cmd_encode_number)

    p = subparsers.add_parser("decode-number", help="Decode a radix string")
    p.add_argument("text", help="Encoded number")
    p.set_defaults(func=cmd_decode_number)

    p = subparsers.add_parser("encode-string", help="Encode text")
    p.add_argument("text", help="Text to encode")
    p.set_defaults(func=cmd_encode_string)

    p = subparsers.add_parser("decode-string", help="Decode text")
    p.add_argument("text", help="Encoded text")
    p.set_defaults(func=cmd_decode_string)

    p = subparsers.add_parser("encode-base", help="Encode an integer in a given base")
    p.add_argument("value", help="Non-negative decimal integer")
    p.add_argument("-b", "--base", type=int, default=10, help="Base (default: 10)")
    p.set_defaults(func=cmd_encode_base)

    p = subparsers.add_parser("decode-base", help="Decode an integer from a given base")
    p.add_argument("text", help="Encoded number")
    p.add_argument("-b", "--base", type=int, default=10, help="Base (default: 10)")
    p.set_defaults(func=cmd_decode_base)

    p = subparsers.add_parser("alphabet", help="Show the active alphabet")
    p.set_defaults(func=cmd_alphabet)

    p = subparsers.add_parser("variants", help="List preset alphabets")
    p.set_defaults(func=cmd_variants)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 2

    try:
        return args.func(args)
    except (ValueError, TypeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
