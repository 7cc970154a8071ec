"""List files and directories."""

from __future__ import annotations

import os
import stat
import sys
from typing import TextIO

from .fmt import fprintf
from .kparams import FileType

DIRSIZ = 14
_PATH_BUF = 512


def _kind(st: os.stat_result) -> FileType:
    if stat.S_ISDIR(st.st_mode):
        return FileType.DIR
    if stat.S_ISREG(st.st_mode):
        return FileType.FILE
    return FileType.DEVICE


def fmtname(path: str) -> str:
    """The last path component, blank-padded to DIRSIZ characters."""
    name = path[path.rfind("/") + 1:]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def ls(path: str, out: TextIO | None = None) -> bool:
    """List path to out; returns False if path could not be opened."""
    if out is None:
        out = sys.stdout
    try:
        st = os.stat(path)
    except OSError:
        fprintf(sys.stderr, "ls: cannot open %s\n", path)
        return False
    kind = _kind(st)
    if kind is FileType.FILE:
        fprintf(out, "%s %d %d %l\n", fmtname(path), kind, st.st_ino, st.st_size)
    elif kind is FileType.DIR:
        if len(path.encode()) + 1 + DIRSIZ + 1 > _PATH_BUF:
            fprintf(out, "ls: path too long\n")
            return True
        try:
            names = sorted(os.listdir(path))
        except OSError:
            fprintf(sys.stderr, "ls: cannot open %s\n", path)
            return False
        for name in (".", "..", *names):
            entry = f"{path}/{name}"
            try:
                est = os.stat(entry)
            except OSError:
                fprintf(out, "ls: cannot stat %s\n", entry)
                continue
            fprintf(out, "%s %d %d %d\n", fmtname(entry), _kind(est), est.st_ino, est.st_size)
    return True


def main(argv: list[str] | None = None) -> int:
    paths = sys.argv[1:] if argv is None else list(argv)
    for path in paths or ["."]:
        ls(path)
    return 0