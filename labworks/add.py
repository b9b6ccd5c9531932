"""Integer addition and a small command that prints a sum."""

from __future__ import annotations

import argparse
import sys


def add(a: int, b: int) -> int:
    """Return the sum of a and b."""
    return a + b


def main(argv: list[str] | None = None) -> int:
    """Print the sum of two integers, 1 and 3 unless others are given."""
    parser = argparse.ArgumentParser(prog="add", description="Print the sum of two integers.")
    parser.add_argument("a", nargs="?", type=int, default=1)
    parser.add_argument("b", nargs="?", type=int, default=3)
    args = parser.parse_args([] if argv is None else argv)
    print(add(args.a, args.b), file=sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))