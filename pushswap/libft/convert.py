"""Number parsing and formatting, and string splitting, joining and trimming."""

from __future__ import annotations

from typing import List, Optional

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_leading_integer(text: str) -> int:
    """Read optional whitespace, one optional sign and then decimal digits."""
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    digits = text[start:i]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Leading integer of ``text`` as a 32-bit signed value; 0 if there is none."""
    return _wrap(_parse_leading_integer(text), 32)


def atol(text: str) -> int:
    """Leading integer of ``text`` as a 64-bit signed value; 0 if there is none."""
    return _wrap(_parse_leading_integer(text), 64)


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Non-empty pieces of ``s`` between occurrences of the character ``sep``."""
    if s is None:
        return None
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenation of two strings; a missing one counts as empty."""
    return (s1 or "") + (s2 or "")


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without the characters of ``charset`` at either end."""
    if s is None or charset is None:
        return None
    return s.strip(charset) if charset else s