"""Formatted listings of integers and floats read from a text stream."""

from __future__ import annotations

import math
import re
import struct
import sys
from typing import Callable, Iterator, Optional, TextIO, TypeVar

_T = TypeVar("_T")

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")
_INT = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
FLOAT32_MAX = struct.unpack("<f", bytes.fromhex("ffff7f7f"))[0]

HEADER = "{:>12}{:>11}{:>9}".format("oct", "dec", "hex")
RULE = "------------ ---------- --------"


def _to_int32(text: str) -> Optional[int]:
    value = int(text)
    return value if _INT32_MIN <= value <= _INT32_MAX else None


def _to_float32(text: str) -> Optional[float]:
    try:
        value = struct.unpack("<f", struct.pack("<f", float(text)))[0]
    except OverflowError:
        return None
    return None if math.isinf(value) else value


def _skip_space(text: str, pos: int) -> int:
    return _SPACE.match(text, pos).end()


def _scan(
    text: str, pattern: re.Pattern[str], convert: Callable[[str], Optional[_T]]
) -> Iterator[_T]:
    """Yield numbers read from text; a failed read discards the next word."""
    pos = 0
    while True:
        pos = _skip_space(text, pos)
        if pos >= len(text):
            return
        match = pattern.match(text, pos)
        if match:
            pos = match.end()
            value = convert(match.group())
            if value is not None:
                yield value
                continue
            pos = _skip_space(text, pos)
        word = _WORD.match(text, pos)
        if word:
            pos = word.end()


def print_integers(in_stream: TextIO, out_stream: TextIO) -> None:
    """Write each 32-bit integer of the input in octal, decimal and hex columns."""
    out_stream.write(HEADER + "\n")
    out_stream.write(RULE + "\n")
    for value in _scan(in_stream.read(), _INT, _to_int32):
        unsigned = value & 0xFFFFFFFF
        out_stream.write(f"{unsigned:>12o}{value:>11d}{unsigned:>9X}\n")


def _format_float(value: float) -> str:
    return f"{value: =+15.3f}"


def print_max_float(in_stream: TextIO, out_stream: TextIO) -> None:
    """Write each single-precision float of the input, then the largest one."""
    largest = -FLOAT32_MAX
    for value in _scan(in_stream.read(), _FLOAT, _to_float32):
        if largest < value:
            largest = value
        out_stream.write("     " + _format_float(value) + "\n")
    out_stream.write("max: " + _format_float(largest) + "\n")


def main(argv: list[str] | None = None) -> int:
    """List the floats read from standard input and their maximum."""
    del argv
    print_max_float(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())