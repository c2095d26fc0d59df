"""Character classification, ASCII case mapping and integer parsing."""

from __future__ import annotations

from itertools import takewhile

_LEADING_SPACE = " \a\b\t\n\v\f\r"


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; other values are unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; other values are unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Text that does not start with a number gives 0.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+") and rest:
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    return sign * int(digits) if digits else 0