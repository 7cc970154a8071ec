"""Link, make directories and remove names in the file system."""

from __future__ import annotations

import os
import sys

from .fmt import fprintf


def _args(argv: list[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def ln_main(argv: list[str] | None = None) -> int:
    """Create a hard link: ln old new."""
    args = _args(argv)
    if len(args) != 2:
        fprintf(sys.stderr, "Usage: ln old new\n")
        return 1
    old, new = args
    try:
        os.link(old, new)
    except OSError:
        fprintf(sys.stderr, "link %s %s: failed\n", old, new)
    return 0


def mkdir_main(argv: list[str] | None = None) -> int:
    """Create each directory named, stopping at the first failure."""
    args = _args(argv)
    if not args:
        fprintf(sys.stderr, "Usage: mkdir files...\n")
        return 1
    for name in args:
        try:
            os.mkdir(name)
        except OSError:
            fprintf(sys.stderr, "mkdir: %s failed to create\n", name)
            break
    return 0


def _unlink(name: str) -> None:
    # Directories may be removed only when empty.
    if os.path.isdir(name) and not os.path.islink(name):
        os.rmdir(name)
    else:
        os.unlink(name)


def rm_main(argv: list[str] | None = None) -> int:
    """Remove each name, stopping at the first failure."""
    args = _args(argv)
    if not args:
        fprintf(sys.stderr, "Usage: rm files...\n")
        return 1
    for name in args:
        try:
            _unlink(name)
        except OSError:
            fprintf(sys.stderr, "rm: %s failed to delete\n", name)
            break
    return 0