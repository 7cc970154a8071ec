"""A simple grep supporting the ^ . * $ operators."""

from __future__ import annotations

import sys
from typing import TextIO

from .fmt import fprintf, printf

# A line (without its newline) longer than this cannot fit the read buffer.
_LINE_MAX = 1022


def _match_here(pattern: str, text: str) -> bool:
    if not pattern:
        return True
    if len(pattern) >= 2 and pattern[1] == "*":
        return _match_star(pattern[0], pattern[2:], text)
    if pattern == "$":
        return not text
    if text and pattern[0] in (".", text[0]):
        return _match_here(pattern[1:], text[1:])
    return False


def _match_star(c: str, pattern: str, text: str) -> bool:
    i = 0
    while True:
        if _match_here(pattern, text[i:]):
            return True
        if i < len(text) and (text[i] == c or c == "."):
            i += 1
            continue
        return False


def match(pattern: str, text: str) -> bool:
    """Return True if pattern matches anywhere in text."""
    if pattern.startswith("^"):
        return _match_here(pattern[1:], text)
    return any(_match_here(pattern, text[i:]) for i in range(len(text) + 1))


def grep(pattern: str, stream: TextIO, out: TextIO) -> None:
    """Write each newline-terminated line of stream that matches pattern."""
    for line in stream:
        if not line.endswith("\n"):
            break
        body = line[:-1]
        if len(body) > _LINE_MAX:
            break
        if match(pattern, body):
            out.write(line)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        fprintf(sys.stderr, "usage: grep pattern [file ...]\n")
        return 1
    pattern, names = args[0], args[1:]
    if not names:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for name in names:
        try:
            stream = open(name, encoding="utf-8", errors="replace", newline="\n")
        except OSError:
            printf("grep: cannot open %s\n", name)
            return 1
        with stream:
            grep(pattern, stream, sys.stdout)
    return 0