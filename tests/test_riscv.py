import pytest

from xv6util.memlayout import KERNBASE
from xv6util.riscv import (
    MAXVA,
    PGSIZE,
    PXMASK,
    PteFlag,
    make_satp,
    pa2pte,
    pgrounddown,
    pgroundup,
    pte2pa,
    pte_flags,
    px,
)


@pytest.mark.parametrize("sz", [1, PGSIZE - 1, PGSIZE, PGSIZE + 1, 3 * PGSIZE + 7])
def test_pgroundup_is_smallest_covering_multiple(sz):
    up = pgroundup(sz)
    assert up % PGSIZE == 0
    assert sz <= up < sz + PGSIZE


def test_pgroundup_edges():
    assert pgroundup(0) == 0
    assert pgroundup(1) == PGSIZE
    assert pgroundup(PGSIZE) == PGSIZE


@pytest.mark.parametrize("a", [0, 1, PGSIZE - 1, PGSIZE, PGSIZE + 1, KERNBASE + 123])
def test_pgrounddown_is_largest_multiple_below(a):
    down = pgrounddown(a)
    assert down % PGSIZE == 0
    assert down <= a < down + PGSIZE


@pytest.mark.parametrize("pa", [0, PGSIZE, KERNBASE, KERNBASE + 17 * PGSIZE])
def test_pte_round_trip(pa):
    assert pte2pa(pa2pte(pa)) == pa


def test_flags_do_not_disturb_address():
    pte = pa2pte(KERNBASE) | PteFlag.V | PteFlag.R | PteFlag.W
    assert pte2pa(pte) == KERNBASE
    assert pte_flags(pte) == PteFlag.V | PteFlag.R | PteFlag.W


def test_pa2pte_leaves_flag_bits_clear():
    assert pte_flags(pa2pte(KERNBASE + 5 * PGSIZE)) == 0


def test_px_extracts_each_level():
    va = (3 << 30) | (200 << 21) | (511 << 12) | 0xABC
    assert px(2, va) == 3
    assert px(1, va) == 200
    assert px(0, va) == PXMASK


def test_px_top_of_address_space():
    assert px(2, MAXVA - 1) == 255
    assert px(0, MAXVA - 1) == PXMASK


def test_px_rejects_negative_level():
    with pytest.raises(ValueError):
        px(-1, 0)


def test_make_satp_kernel_base():
    assert make_satp(KERNBASE) == 0x8000000000080000