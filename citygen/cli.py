"""Command-line entry point for the city generator."""

from __future__ import annotations

import re
import sys

from citygen.generation import SEGMENT_LIMIT, full_generate_city

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Integer value of the leading digits of ``text``; 0 if there are none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the generator; the optional first argument is the segment limit."""
    args = sys.argv[1:] if argv is None else list(argv)
    limit = SEGMENT_LIMIT
    if args:
        limit = _leading_int(args[0])
        if limit <= 0:
            print("Invalid segment limit. Must be > 0")
            return 1
    full_generate_city(limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())