"""Kernel parameters, file types, open flags, the stat record and RTC dates."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from enum import IntEnum, IntFlag
from typing import ClassVar

NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 1000
MAXPATH = 128

_UINT_MAX = 0xFFFFFFFF


class FileType(IntEnum):
    """Kind of object an inode describes."""

    DIR = 1
    FILE = 2
    DEVICE = 3


class OpenMode(IntFlag):
    """Flags accepted by open()."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200
    TRUNC = 0x400


# int dev; uint ino; short type; short nlink; (padding) uint64 size
_STAT = struct.Struct("<iIhh4xQ")


@dataclass(frozen=True)
class Stat:
    """File status as reported by fstat()."""

    dev: int
    ino: int
    type: FileType
    nlink: int
    size: int

    SIZE: ClassVar[int] = _STAT.size

    def to_bytes(self) -> bytes:
        """Pack the record in the kernel's little-endian layout."""
        try:
            return _STAT.pack(self.dev, self.ino, int(self.type), self.nlink, self.size)
        except struct.error as err:
            raise ValueError(f"stat field out of range: {err}") from err

    @classmethod
    def from_bytes(cls, data: bytes) -> Stat:
        """Unpack a record produced by to_bytes() or by the kernel."""
        if len(data) != _STAT.size:
            raise ValueError(f"stat record must be {_STAT.size} bytes, got {len(data)}")
        dev, ino, kind, nlink, size = _STAT.unpack(data)
        return cls(dev, ino, FileType(kind), nlink, size)


@dataclass(frozen=True)
class RtcDate:
    """A wall-clock date as read from the real-time clock."""

    second: int
    minute: int
    hour: int
    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value <= _UINT_MAX:
                raise ValueError(f"{field.name} out of range: {value}")