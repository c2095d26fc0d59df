"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character c to stream (standard output by default)."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write s to stream."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write s followed by a newline to stream."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of n to stream."""
    _target(stream).write(str(int(n)))


def main(argv: list[str] | None = None) -> int:
    """Print a sample number to standard output."""
    put_nbr(13232)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())