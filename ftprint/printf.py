"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_INT32 = 1 << 32
_UINT64_MASK = (1 << 64) - 1


def format_char(value: int | str) -> str:
    """One character: an integer is taken modulo 256, a string must be one character."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(value & 0xFF)


def format_str(value: str | None) -> str:
    """The string itself, or "(null)" for None."""
    return "(null)" if value is None else value


def format_decimal(value: int) -> str:
    """Signed decimal of value taken as a 32-bit int."""
    wrapped = (value + _INT32 // 2) % _INT32 - _INT32 // 2
    return str(wrapped)


def format_unsigned(value: int) -> str:
    """Unsigned decimal of value taken as a 32-bit unsigned int."""
    return str(value % _INT32)


def format_hex(value: int, spec: str) -> str:
    """Hexadecimal of a 32-bit unsigned value; spec "x" gives lower case, "X" upper."""
    if spec not in ("x", "X"):
        raise ValueError(f"unknown hexadecimal specifier {spec!r}")
    return format(value % _INT32, spec)


def format_pointer(value: int) -> str:
    """Address as "0x" and lowercase hex, or "(nil)" for zero."""
    address = value & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERTERS = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with each conversion replaced by the next argument.

    Unknown conversions produce nothing; extra arguments are ignored.
    """
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            parts.append("%")
        elif spec in ("x", "X"):
            parts.append(format_hex(_next_arg(values, spec), spec))
        elif spec in _CONVERTERS:
            parts.append(_CONVERTERS[spec](_next_arg(values, spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to stream (standard output by default); return its length."""
    text = sprintf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)