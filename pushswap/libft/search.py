"""String length, comparison, search and bounded copy helpers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

_NUL = "\0"


def _char(c: Union[str, int]) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def str_len(s: Optional[str]) -> int:
    """Length of ``s``; a missing string counts as empty."""
    return 0 if s is None else len(s)


def str_chr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator is found at ``len(s)``."""
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def str_rchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator is found at ``len(s)``."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def str_cmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters, or 0 if equal."""
    for i in range(max(len(s1), len(s2)) + 1):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    for i in range(n):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def str_nstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``, or None."""
    if not little:
        return 0
    size = len(little)
    for i in range(len(big)):
        if length - i < size:
            break
        if big[i:i + size] == little:
            return i
    return None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy of ``src`` bounded to ``size - 1`` characters, with ``len(src)``."""
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a total buffer of ``size``.

    Returns the resulting string and the length it tried to create.
    """
    if size == 0 or len(dst) > size:
        return dst, size + len(src)
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(dst) + len(src)


def str_mapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """New string built from ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def str_iteri(
    chars: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each character, in place.

    A returned character replaces the one at that index; None leaves it.
    """
    if chars is None or f is None:
        return
    for i, ch in enumerate(chars):
        replacement = f(i, ch)
        if replacement is not None:
            chars[i] = replacement