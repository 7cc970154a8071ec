"""Print primes with a pipeline sieve."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from .fmt import printf


def sieve(numbers: Iterable[int]) -> Iterator[int]:
    """Yield the numbers that survive the pipeline of divisibility filters.

    Each stage keeps the first number it receives and drops every later
    number that this one divides; the kept numbers are yielded in order.
    """
    kept: list[int] = []
    for n in numbers:
        if all(n % p for p in kept):
            if n == 0:
                raise ValueError("zero cannot head a sieve stage")
            kept.append(n)
            yield n


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        printf("Error: Incorrect number of arguments\n")
        return -1
    for prime in sieve(range(2, 36)):
        printf("prime %d\n", prime)
    return 0