"""The Park-Miller minimal standard random number generator."""

from __future__ import annotations

_ULONG = 0xFFFFFFFFFFFFFFFF
_MODULUS = 0x7FFFFFFF


def do_rand(ctx: int) -> int:
    """Advance the state ctx and return the new state, in [0, 0x7ffffffd]."""
    x = (ctx & _ULONG) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += _MODULUS
    return x - 1


class ParkMiller:
    """A stateful generator built on do_rand."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _ULONG

    def next(self) -> int:
        """Return the next value and advance."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self) -> ParkMiller:
        return self

    def __next__(self) -> int:
        return self.next()