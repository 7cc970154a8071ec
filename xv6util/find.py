"""Find files with a given name under a directory tree."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator

from .fmt import fprintf, printf
from .ls import DIRSIZ

_PATH_BUF = 512


def basename(path: str) -> str:
    """The part of path after its last slash."""
    return path[path.rfind("/") + 1:]


def find(path: str, name: str) -> Iterator[str]:
    """Yield the paths of regular files under path whose name equals name.

    Raises OSError when path or anything beneath it cannot be examined.
    """
    st = os.stat(path)
    if stat.S_ISREG(st.st_mode):
        if basename(path) == name:
            yield path
    elif stat.S_ISDIR(st.st_mode):
        if len(path.encode()) + 1 + DIRSIZ + 1 > _PATH_BUF:
            printf("find: path too long\n")
            return
        for entry in sorted(os.listdir(path)):
            if entry in (".", ".."):
                continue
            child = f"{path}/{entry}"
            if os.path.islink(child) and os.path.isdir(child):
                continue
            yield from find(child, name)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        fprintf(sys.stderr, "usage:find <path> <name>\n")
        return 1
    try:
        for found in find(args[0], args[1]):
            printf("%s\n", found)
    except OSError as err:
        fprintf(sys.stderr, "find open %s error\n", err.filename or args[0])
        return 1
    return 0