"""C-style string helpers with the semantics of the user library."""

from __future__ import annotations

from typing import IO, AnyStr

_DIGITS = "0123456789"


def _cstr(s: str | bytes) -> bytes:
    raw = s.encode("utf-8", "surrogateescape") if isinstance(s, str) else bytes(s)
    return raw.split(b"\0", 1)[0]


def atoi(s: str) -> int:
    """Parse leading decimal digits; no sign or whitespace is accepted."""
    digits = []
    for ch in s:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    return int("".join(digits)) if digits else 0


def strcmp(p: str | bytes, q: str | bytes) -> int:
    """Compare as unsigned bytes; returns the difference at the first mismatch."""
    a = _cstr(p) + b"\0"
    b = _cstr(q) + b"\0"
    for x, y in zip(a, b):
        if x != y or x == 0:
            return x - y
    return 0


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s before any NUL, or None."""
    if len(c) != 1:
        raise ValueError("strchr needs exactly one character")
    if c == "\0":
        return None
    index = s.split("\0", 1)[0].find(c)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes as unsigned values."""
    if n < 0 or n > len(a) or n > len(b):
        raise ValueError("memcmp length exceeds the buffers")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def gets(stream: IO[AnyStr], limit: int) -> AnyStr:
    """Read up to limit-1 characters, stopping after a newline or carriage return."""
    parts: list = []
    empty = None
    while len(parts) + 1 < limit:
        ch = stream.read(1)
        if empty is None:
            empty = ch[:0]
        if not ch:
            break
        parts.append(ch)
        if ch in ("\n", "\r", b"\n", b"\r"):
            break
    if empty is None:
        empty = stream.read(0)
    return empty.join(parts)