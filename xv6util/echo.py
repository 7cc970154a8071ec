"""Print arguments separated by spaces."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def echo(words: Iterable[str]) -> str:
    """Join words with spaces and end with a newline; nothing for no words."""
    words = list(words)
    return " ".join(words) + "\n" if words else ""


def main(argv: list[str] | None = None) -> int:
    words = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.write(echo(words))
    return 0