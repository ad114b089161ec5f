"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

_CONVERSIONS = "cspdiuxX%"
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def number_in_base(n: int, base: str) -> str:
    """Digits of the non-negative ``n`` written with the symbols of ``base``."""
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two symbols")
    if n < 0:
        raise ValueError("only non-negative numbers can be written in a base")
    digits = []
    while True:
        n, rest = divmod(n, radix)
        digits.append(base[rest])
        if n == 0:
            break
    return "".join(reversed(digits))


def format_pointer(address: Optional[int]) -> str:
    """``(nil)`` for a null address, else ``0x`` and lower-case hex digits."""
    if not address:
        return "(nil)"
    return "0x" + number_in_base(address & _MASK64, _LOWER_HEX)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = _next_arg(args)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects one character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_signed32(value))
    if spec == "u":
        return str(value & _MASK32)
    if spec == "x":
        return number_in_base(value & _MASK32, _LOWER_HEX)
    if spec == "X":
        return number_in_base(value & _MASK32, _UPPER_HEX)
    return format_pointer(value)


def format_string(fmt: str, *args: Any) -> str:
    """Text that :func:`printf` would write for ``fmt`` and ``args``.

    A ``%`` before an unknown character is kept literally; a ``%`` that
    ends the format produces nothing.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pending = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONVERSIONS:
            out.append(_convert(spec, pending))
        else:
            out.append("%" + spec)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)