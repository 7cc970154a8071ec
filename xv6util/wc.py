"""Count lines, words and characters."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO

from .fmt import printf

_SPACE = frozenset(" \r\t\n\v")


@dataclass(frozen=True)
class Counts:
    """Line, word and character totals."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def wc(stream: IO) -> Counts:
    """Count a text or binary stream; binary streams count bytes."""
    lines = words = chars = 0
    in_word = False
    while chunk := stream.read(512):
        if isinstance(chunk, (bytes, bytearray)):
            chunk = chunk.decode("latin-1")
        for ch in chunk:
            chars += 1
            if ch == "\n":
                lines += 1
            if ch in _SPACE:
                in_word = False
            elif not in_word:
                words += 1
                in_word = True
    return Counts(lines, words, chars)


def _report(counts: Counts, name: str) -> None:
    printf("%d %d %d %s\n", counts.lines, counts.words, counts.chars, name)


def main(argv: list[str] | None = None) -> int:
    names = sys.argv[1:] if argv is None else list(argv)
    if not names:
        try:
            counts = wc(sys.stdin.buffer)
        except OSError:
            printf("wc: read error\n")
            return 1
        _report(counts, "")
        return 0
    for name in names:
        try:
            stream = open(name, "rb")
        except OSError:
            printf("wc: cannot open %s\n", name)
            return 1
        with stream:
            try:
                counts = wc(stream)
            except OSError:
                printf("wc: read error\n")
                return 1
        _report(counts, name)
    return 0