"""Signal processes and pause for a number of clock ticks."""

from __future__ import annotations

import os
import signal
import sys
import time

from .cstring import atoi
from .fmt import fprintf, printf

TICK_SECONDS = 0.1


def kill_main(argv: list[str] | None = None) -> int:
    """Kill each process id given; unknown ids are ignored."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        fprintf(sys.stderr, "usage: kill pid...\n")
        return 1
    for arg in args:
        pid = atoi(arg)
        if pid <= 0:
            # No process has this id; never signal a process group.
            continue
        try:
            os.kill(pid, signal.SIGKILL)
        except OSError:
            pass
    return 0


def sleep_main(argv: list[str] | None = None) -> int:
    """Sleep for the given number of clock ticks."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        printf("Error:sleep 2")
        return -1
    time.sleep(atoi(args[0]) * TICK_SECONDS)
    return 0