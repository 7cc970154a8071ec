"""ELF64 file and program headers, as read when loading an executable."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntFlag
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word
ELF_PROG_LOAD = 1

_ELFHDR = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGHDR = struct.Struct("<IIQQQQQQ")
_IDENT_LEN = 12


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a well-formed ELF header."""


class ProgFlag(IntFlag):
    """Permission bits of a program segment."""

    EXEC = 1
    WRITE = 2
    READ = 4


def _pack(layout: struct.Struct, *values: object) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as err:
        raise ValueError(f"header field out of range: {err}") from err


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    magic: int = ELF_MAGIC
    ident: bytes = bytes(_IDENT_LEN)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    SIZE: ClassVar[int] = _ELFHDR.size

    def __post_init__(self) -> None:
        if len(self.ident) != _IDENT_LEN:
            raise ValueError(f"ident must be {_IDENT_LEN} bytes, got {len(self.ident)}")

    @classmethod
    def from_bytes(cls, data: bytes) -> ElfHeader:
        """Parse the header at the start of data, checking the magic number."""
        if len(data) < _ELFHDR.size:
            raise ElfFormatError(f"ELF header needs {_ELFHDR.size} bytes, got {len(data)}")
        header = cls(*_ELFHDR.unpack_from(data))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
        return header

    def to_bytes(self) -> bytes:
        """Pack the header in its little-endian on-disk layout."""
        return _pack(
            _ELFHDR,
            self.magic, self.ident, self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum, self.shstrndx,
        )


@dataclass(frozen=True)
class ProgramHeader:
    """One program segment header."""

    type: int = 0
    flags: ProgFlag | int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    SIZE: ClassVar[int] = _PROGHDR.size

    @property
    def loadable(self) -> bool:
        """Whether the segment is to be loaded into memory."""
        return self.type == ELF_PROG_LOAD

    @classmethod
    def from_bytes(cls, data: bytes) -> ProgramHeader:
        """Parse a program header from the start of data."""
        if len(data) < _PROGHDR.size:
            raise ElfFormatError(f"program header needs {_PROGHDR.size} bytes, got {len(data)}")
        kind, flags, *rest = _PROGHDR.unpack_from(data)
        return cls(kind, ProgFlag(flags & 0x7) | (flags & ~0x7), *rest)

    def to_bytes(self) -> bytes:
        """Pack the header in its little-endian on-disk layout."""
        return _pack(
            _PROGHDR,
            self.type, int(self.flags), self.off, self.vaddr,
            self.paddr, self.filesz, self.memsz, self.align,
        )


def read_program_headers(data: bytes) -> list[ProgramHeader]:
    """Parse the file header of an ELF image and return its program headers."""
    header = ElfHeader.from_bytes(data)
    headers = []
    for index in range(header.phnum):
        start = header.phoff + index * ProgramHeader.SIZE
        chunk = data[start:start + ProgramHeader.SIZE]
        if len(chunk) != ProgramHeader.SIZE:
            raise ElfFormatError(f"program header {index} lies beyond the image")
        headers.append(ProgramHeader.from_bytes(chunk))
    return headers