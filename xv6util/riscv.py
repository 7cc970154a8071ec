"""Sv39 paging arithmetic and RISC-V control-register bit definitions."""

from __future__ import annotations

from enum import IntFlag

_UINT64 = 0xFFFFFFFFFFFFFFFF

PGSIZE = 4096
PGSHIFT = 12

PXMASK = 0x1FF
LEVELS = 3

# One beyond the highest virtual address; one bit below the Sv39 maximum
# so that addresses never need sign extension.
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)

SATP_SV39 = 8 << 60

MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3


class PteFlag(IntFlag):
    """Permission and status bits of a page-table entry."""

    V = 1 << 0
    R = 1 << 1
    W = 1 << 2
    X = 1 << 3
    U = 1 << 4


def _u64(value: int) -> int:
    return value & _UINT64


def pgroundup(sz: int) -> int:
    """Round sz up to a multiple of the page size."""
    return _u64(sz + PGSIZE - 1) & ~(PGSIZE - 1) & _UINT64


def pgrounddown(a: int) -> int:
    """Round a down to a multiple of the page size."""
    return _u64(a) & ~(PGSIZE - 1) & _UINT64


def pa2pte(pa: int) -> int:
    """Shift a physical address into the page-number field of an entry."""
    return _u64((_u64(pa) >> 12) << 10)


def pte2pa(pte: int) -> int:
    """Extract the physical address an entry points to."""
    return _u64((_u64(pte) >> 10) << 12)


def pte_flags(pte: int) -> PteFlag | int:
    """The low ten flag bits of an entry."""
    return _u64(pte) & 0x3FF


def _pxshift(level: int) -> int:
    return PGSHIFT + 9 * level


def px(level: int, va: int) -> int:
    """The 9-bit page-table index of va at the given level."""
    if level < 0:
        raise ValueError(f"page-table level must not be negative: {level}")
    return (_u64(va) >> _pxshift(level)) & PXMASK


def make_satp(pagetable: int) -> int:
    """The satp value selecting Sv39 with the given root page table."""
    return SATP_SV39 | (_u64(pagetable) >> 12)