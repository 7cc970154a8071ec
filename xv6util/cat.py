"""Concatenate files to standard output."""

from __future__ import annotations

import sys
from typing import BinaryIO

from .fmt import fprintf

_CHUNK = 512


def cat(stream: BinaryIO, out: BinaryIO) -> None:
    """Copy stream to out; raises OSError naming a read or write error."""
    while True:
        try:
            chunk = stream.read(_CHUNK)
        except OSError as err:
            raise OSError("cat: read error") from err
        if not chunk:
            return
        try:
            written = out.write(chunk)
        except OSError as err:
            raise OSError("cat: write error") from err
        if written is not None and written != len(chunk):
            raise OSError("cat: write error")


def main(argv: list[str] | None = None) -> int:
    names = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        if not names:
            cat(sys.stdin.buffer, out)
            return 0
        for name in names:
            try:
                stream = open(name, "rb")
            except OSError:
                fprintf(sys.stderr, "cat: cannot open %s\n", name)
                return 1
            with stream:
                cat(stream, out)
        return 0
    except OSError as err:
        fprintf(sys.stderr, "%s\n", str(err))
        return 1
    finally:
        out.flush()