"""A first-fit free-list allocator over a simulated, growable heap."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

HEADER_SIZE = 16
_MIN_GROWTH_UNITS = 4096
_BASE = -1  # the sentinel list head, ordered below every heap block


class OutOfMemoryError(MemoryError):
    """Raised when the heap cannot grow enough to satisfy a request."""


class Allocator:
    """Allocates byte ranges from a heap that grows up to ``limit`` bytes.

    Addresses are byte offsets into the simulated heap. Each block carries a
    one-unit header in front of the address handed out, and the heap grows
    by at least 4096 units at a time.
    """

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self._brk = 0
        self._free: list[list[int]] = []
        self._rover = _BASE
        self._used: dict[int, int] = {}

    @property
    def heap_size(self) -> int:
        """Bytes obtained from the heap so far."""
        return self._brk * HEADER_SIZE

    @property
    def free_bytes(self) -> int:
        """Bytes currently on the free list, headers included."""
        return sum(size for _, size in self._free) * HEADER_SIZE

    def malloc(self, nbytes: int) -> int:
        """Return the address of a block of at least nbytes bytes."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative size")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        while True:
            start = self._first_fit(nunits)
            if start is not None:
                self._used[start] = nunits
                return (start + 1) * HEADER_SIZE
            self._morecore(nunits)

    def free(self, addr: int) -> None:
        """Return a block obtained from malloc() to the free list."""
        if addr % HEADER_SIZE:
            raise ValueError(f"address {addr} was not returned by malloc")
        start = addr // HEADER_SIZE - 1
        size = self._used.pop(start, None)
        if size is None:
            raise ValueError(f"address {addr} is not allocated")
        self._insert(start, size)

    def _first_fit(self, nunits: int) -> int | None:
        starts = [block[0] for block in self._free]
        pivot = bisect_right(starts, self._rover)
        order = [*range(pivot, len(self._free)), *range(pivot)]
        for index in order:
            block = self._free[index]
            if block[1] < nunits:
                continue
            prev = self._free[index - 1][0] if index > 0 else _BASE
            if block[1] == nunits:
                del self._free[index]
                start = block[0]
            else:
                block[1] -= nunits
                start = block[0] + block[1]
            self._rover = prev
            return start
        return None

    def _morecore(self, nunits: int) -> None:
        units = max(nunits, _MIN_GROWTH_UNITS)
        if (self._brk + units) * HEADER_SIZE > self.limit:
            raise OutOfMemoryError(
                f"cannot grow heap by {units * HEADER_SIZE} bytes past {self.limit}"
            )
        start = self._brk
        self._brk += units
        self._insert(start, units)

    def _insert(self, start: int, size: int) -> None:
        starts = [block[0] for block in self._free]
        index = bisect_left(starts, start)
        if index < len(self._free) and start + size == self._free[index][0]:
            size += self._free[index][1]
            del self._free[index]
        lower = self._free[index - 1] if index > 0 else None
        if lower is not None and lower[0] + lower[1] == start:
            lower[1] += size
            self._rover = lower[0]
        else:
            self._free.insert(index, [start, size])
            self._rover = lower[0] if lower is not None else _BASE