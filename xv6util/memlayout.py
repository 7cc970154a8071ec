"""Physical and virtual memory layout of the qemu virt machine."""

from __future__ import annotations

from .riscv import MAXVA, PGSIZE

UART0 = 0x10000000
UART0_IRQ = 10

VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1

CLINT = 0x2000000
CLINT_MTIME = CLINT + 0xBFF8

PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000

KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024

TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE


def _check(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


def kstack(p: int) -> int:
    """Address of process slot p's kernel stack, each behind a guard page."""
    return TRAMPOLINE - (_check("process slot", p) + 1) * 2 * PGSIZE


def clint_mtimecmp(hartid: int) -> int:
    """Address of a hart's timer-compare register."""
    return CLINT + 0x4000 + 8 * _check("hart", hartid)


def plic_menable(hart: int) -> int:
    """Machine-mode interrupt-enable bits of a hart."""
    return PLIC + 0x2000 + _check("hart", hart) * 0x100


def plic_senable(hart: int) -> int:
    """Supervisor-mode interrupt-enable bits of a hart."""
    return PLIC + 0x2080 + _check("hart", hart) * 0x100


def plic_mpriority(hart: int) -> int:
    """Machine-mode priority threshold of a hart."""
    return PLIC + 0x200000 + _check("hart", hart) * 0x2000


def plic_spriority(hart: int) -> int:
    """Supervisor-mode priority threshold of a hart."""
    return PLIC + 0x201000 + _check("hart", hart) * 0x2000


def plic_mclaim(hart: int) -> int:
    """Machine-mode claim/complete register of a hart."""
    return PLIC + 0x200004 + _check("hart", hart) * 0x2000


def plic_sclaim(hart: int) -> int:
    """Supervisor-mode claim/complete register of a hart."""
    return PLIC + 0x201004 + _check("hart", hart) * 0x2000