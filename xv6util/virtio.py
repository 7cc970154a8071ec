"""Legacy virtio MMIO registers and the descriptor ring structures."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar

NUM = 8  # descriptors in the ring; a power of two

MAGIC_VALUE = 0x74726976
VENDOR_ID = 0x554D4551

VIRTIO_BLK_T_IN = 0
VIRTIO_BLK_T_OUT = 1

_DESC = struct.Struct("<QIHH")
_USED_ELEM = struct.Struct("<II")
_USED_HEAD = struct.Struct("<HH")


class MmioRegister(IntEnum):
    """Offsets of the control registers from the device's base address."""

    MAGIC_VALUE = 0x000
    VERSION = 0x004
    DEVICE_ID = 0x008
    VENDOR_ID = 0x00C
    DEVICE_FEATURES = 0x010
    DRIVER_FEATURES = 0x020
    GUEST_PAGE_SIZE = 0x028
    QUEUE_SEL = 0x030
    QUEUE_NUM_MAX = 0x034
    QUEUE_NUM = 0x038
    QUEUE_ALIGN = 0x03C
    QUEUE_PFN = 0x040
    QUEUE_READY = 0x044
    QUEUE_NOTIFY = 0x050
    INTERRUPT_STATUS = 0x060
    INTERRUPT_ACK = 0x064
    STATUS = 0x070


class ConfigStatus(IntFlag):
    """Bits of the device status register."""

    ACKNOWLEDGE = 1
    DRIVER = 2
    DRIVER_OK = 4
    FEATURES_OK = 8


class BlkFeature(IntEnum):
    """Bit numbers of block-device feature flags."""

    RO = 5
    SCSI = 7
    CONFIG_WCE = 11
    MQ = 12
    ANY_LAYOUT = 27
    INDIRECT_DESC = 28
    EVENT_IDX = 29

    @property
    def mask(self) -> int:
        """The feature as a bit in the features register."""
        return 1 << self.value


class DescFlag(IntFlag):
    """Flags of a ring descriptor."""

    NEXT = 1
    WRITE = 2


def _pack(layout: struct.Struct, *values: object) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as err:
        raise ValueError(f"field out of range: {err}") from err


def _check_len(name: str, data: bytes, size: int) -> None:
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")


@dataclass(frozen=True)
class VRingDesc:
    """One descriptor: a buffer address, its length and chaining."""

    addr: int = 0
    len: int = 0
    flags: DescFlag | int = 0
    next: int = 0

    SIZE: ClassVar[int] = _DESC.size

    def to_bytes(self) -> bytes:
        """Pack in the device's little-endian layout."""
        return _pack(_DESC, self.addr, self.len, int(self.flags), self.next)

    @classmethod
    def from_bytes(cls, data: bytes) -> VRingDesc:
        """Unpack a descriptor."""
        _check_len("descriptor", data, _DESC.size)
        addr, length, flags, nxt = _DESC.unpack(data)
        return cls(addr, length, DescFlag(flags & 0x3) | (flags & ~0x3), nxt)


@dataclass(frozen=True)
class VRingUsedElem:
    """A completed descriptor chain: its head index and bytes written."""

    id: int = 0
    len: int = 0

    SIZE: ClassVar[int] = _USED_ELEM.size

    def to_bytes(self) -> bytes:
        """Pack in the device's little-endian layout."""
        return _pack(_USED_ELEM, self.id, self.len)

    @classmethod
    def from_bytes(cls, data: bytes) -> VRingUsedElem:
        """Unpack a used-ring element."""
        _check_len("used element", data, _USED_ELEM.size)
        return cls(*_USED_ELEM.unpack(data))


@dataclass(frozen=True)
class UsedArea:
    """The used ring the device fills in, with exactly NUM elements."""

    flags: int = 0
    id: int = 0
    elems: tuple[VRingUsedElem, ...] = field(
        default_factory=lambda: tuple(VRingUsedElem() for _ in range(NUM))
    )

    SIZE: ClassVar[int] = _USED_HEAD.size + NUM * _USED_ELEM.size

    def __post_init__(self) -> None:
        object.__setattr__(self, "elems", tuple(self.elems))
        if len(self.elems) != NUM:
            raise ValueError(f"used area holds {NUM} elements, got {len(self.elems)}")

    def to_bytes(self) -> bytes:
        """Pack in the device's little-endian layout."""
        head = _pack(_USED_HEAD, self.flags, self.id)
        return head + b"".join(elem.to_bytes() for elem in self.elems)

    @classmethod
    def from_bytes(cls, data: bytes) -> UsedArea:
        """Unpack a used area."""
        _check_len("used area", data, cls.SIZE)
        flags, ident = _USED_HEAD.unpack_from(data)
        body = data[_USED_HEAD.size:]
        step = _USED_ELEM.size
        elems = tuple(
            VRingUsedElem.from_bytes(body[start:start + step])
            for start in range(0, len(body), step)
        )
        return cls(flags, ident, elems)