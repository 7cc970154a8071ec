"""Bounce one byte between two workers over a pair of pipes."""

from __future__ import annotations

import os
import sys
import threading
from typing import TextIO

from .fmt import fprintf, printf


def pingpong(out: TextIO) -> None:
    """Send a byte to a worker and back, reporting each receipt to out."""
    c2p_read, c2p_write = os.pipe()
    p2c_read, p2c_write = os.pipe()
    pid = os.getpid()

    def child() -> None:
        try:
            os.read(p2c_read, 1)
            fprintf(out, "%d: received ping\n", pid)
            os.write(c2p_write, b"p")
        finally:
            os.close(c2p_write)
            os.close(p2c_read)

    worker = threading.Thread(target=child)
    worker.start()
    try:
        os.write(p2c_write, b"p")
        os.read(c2p_read, 1)
        fprintf(out, "%d: received pong\n", pid)
    finally:
        os.close(p2c_write)
        os.close(c2p_read)
        worker.join()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        printf("Error: Incorrect number of arguments\n")
        return -1
    pingpong(sys.stdout)
    return 0