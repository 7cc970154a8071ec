"""A small printf supporting %d, %l, %x, %p, %s, %c and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: Any) -> int:
    v = operator.index(value) & _UINT32
    return v - (1 << 32) if v >= (1 << 31) else v


def _format_int(value: Any, base: int, signed: bool) -> str:
    v = _as_int32(value)
    if signed and v < 0:
        return "-" + _digits(-v, base)
    return _digits(v & _UINT32, base)


def _digits(x: int, base: int) -> str:
    return format(x, "X") if base == 16 else str(x)


def format_string(fmt: str, *args: Any) -> str:
    """Render fmt with args the way the user-level printf does."""
    values = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    pending_percent = False
    for c in fmt:
        if not pending_percent:
            if c == "%":
                pending_percent = True
            else:
                out.append(c)
            continue
        pending_percent = False
        if c == "d":
            out.append(_format_int(take(), 10, True))
        elif c == "l":
            out.append(_format_int(take(), 10, False))
        elif c == "x":
            out.append(_format_int(take(), 16, False))
        elif c == "p":
            out.append("0x" + format(operator.index(take()) & _UINT64, "016X"))
        elif c == "s":
            s = take()
            text = "(null)" if s is None else str(s)
            out.append(text.split("\0", 1)[0])
        elif c == "c":
            ch = take()
            out.append(ch[:1] if isinstance(ch, str) else chr(operator.index(ch) & 0xFF))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Write the formatted text to stream."""
    stream.write(format_string(fmt, *args))


def printf(fmt: str, *args: Any) -> None:
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)