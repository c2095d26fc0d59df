"""String helpers: conversion, searching, splitting, trimming and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any


def itoa(n: int) -> str:
    """Decimal text of n."""
    return str(int(n))


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty fields."""
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s; the NUL character matches at len(s)."""
    index = s.find(c)
    if index != -1:
        return index
    return len(s) if c == "\0" else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s; the NUL character matches at len(s)."""
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strnstr(big: str, little: str, n: int) -> int | None:
    """Index of little in the first n characters of big, or None.

    An empty needle matches at 0.
    """
    if not little:
        return 0
    index = big.find(little, 0, max(n, 0))
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Difference of the first unequal characters within the first n, or 0."""
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str | None) -> str:
    """Strip characters in charset from both ends of s; None leaves s as it is."""
    if charset is None:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from func(index, char) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call func(index, item) for each item of s; a non-None result replaces the item."""
    for index, item in enumerate(s):
        result = func(index, item)
        if result is not None:
            s[index] = result