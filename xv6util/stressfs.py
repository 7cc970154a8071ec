"""Several workers write and read back their own files at the same time."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .fmt import printf

BLOCK_SIZE = 512
BLOCK_COUNT = 20
DEFAULT_WORKERS = 5


def _work(index: int, path: Path) -> None:
    data = b"a" * BLOCK_SIZE
    printf("write %d\n", index)
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o666)
    with os.fdopen(fd, "r+b") as stream:
        for _ in range(BLOCK_COUNT):
            stream.write(data)
    printf("read\n")
    with open(path, "rb") as stream:
        for _ in range(BLOCK_COUNT):
            stream.read(BLOCK_SIZE)


def stress(directory: str | os.PathLike = ".", workers: int = DEFAULT_WORKERS) -> list[Path]:
    """Run the workers in directory and return the files they wrote."""
    if workers < 1:
        raise ValueError("need at least one worker")
    printf("stressfs starting\n")
    paths = [Path(directory) / f"stressfs{chr(ord('0') + i)}" for i in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_work, i, path) for i, path in enumerate(paths)]
        for future in futures:
            future.result()
    return paths


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    stress(".", DEFAULT_WORKERS)
    return 0