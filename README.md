# xv6util

A small Python toolkit modelled on the userland of a teaching operating
system. It provides a set of minimal command-line tools (`grep`, `wc`, `cat`,
`echo`, `ls`, `find`, `ln`, `mkdir`, `rm`, `kill`, `sleep`, plus a few
demonstration programs) and the pieces behind them: a tiny `printf`
formatter, C-style string helpers, a regular-expression matcher that knows
only `^ . * $`, a shell command-line parser, a first-fit free-list allocator
over a simulated heap, and helpers for RISC-V Sv39 page tables, the machine's
memory layout, ELF headers and virtio ring structures.

It uses only the standard library and needs Python 3.10 or later on a POSIX
system.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is installed as a console script. The exit status is the value the
tool's `main` function returns (0 on success).

| Command        | What it does |
|----------------|--------------|
| `xv6-grep`     | `xv6-grep pattern [file ...]`: print the newline-terminated lines matching the pattern; reads standard input when no file is given |
| `xv6-wc`       | print `lines words bytes name` for each file, or for standard input |
| `xv6-cat`      | copy the files, or standard input, to standard output |
| `xv6-echo`     | print the arguments separated by spaces, followed by a newline |
| `xv6-ls`       | list each path (default `.`) as `name type inode size`; for a directory, `.`, `..` and then the sorted entries |
| `xv6-find`     | `xv6-find <path> <name>`: print every regular file below `path` whose name is `name` |
| `xv6-ln`       | `xv6-ln old new`: create a hard link |
| `xv6-mkdir`    | create each directory, stopping at the first failure |
| `xv6-rm`       | remove each name (a directory only if empty), stopping at the first failure |
| `xv6-kill`     | send `SIGKILL` to each process id given; ids that are not positive are skipped |
| `xv6-sleep`    | `xv6-sleep ticks`: sleep for that many ticks of 0.1 seconds |
| `xv6-primes`   | print `prime N` for the primes from 2 to 35, found by a pipeline sieve |
| `xv6-pingpong` | pass one byte to a worker thread and back over two pipes, printing `<pid>: received ping` and `<pid>: received pong` |
| `xv6-stressfs` | five workers each write 20 blocks of 512 bytes to `stressfs0` … `stressfs4` in the current directory and read them back |

`xv6-ls` reports type 1 for directories, 2 for regular files and 3 for
anything else.

Examples:

```
xv6-grep '^ab*c$' notes.txt
xv6-wc README.md
xv6-find . README.md
xv6-echo hello world
xv6-primes
```

## Library use

### Formatting — `xv6util.fmt`

`format_string(fmt, *args)` understands `%d` (signed 32-bit), `%l` (unsigned
decimal), `%x` (unsigned, upper-case hex), `%p` (`0x` and 16 hex digits),
`%s` (`None` prints `(null)`), `%c` and `%%`. Any other conversion is copied
through as `%` and the character. `fprintf(stream, fmt, *args)` writes the
result to a stream and `printf(fmt, *args)` to standard output. Too few
arguments raise `TypeError`.

```python
from xv6util.fmt import format_string

format_string("%d items", -42)   # "-42 items"
format_string("%x", 255)         # "FF"
```

### Strings — `xv6util.cstring`

- `atoi(s)` parses leading decimal digits only (no sign, no spaces).
- `strcmp(p, q)` compares as unsigned bytes up to a NUL and returns the
  difference at the first mismatch.
- `strchr(s, c)` returns the index of `c`, or `None`.
- `memcmp(a, b, n)` compares the first `n` bytes.
- `gets(stream, limit)` reads up to `limit - 1` characters, stopping after a
  newline or carriage return.

### Matching and counting

```python
import io
from xv6util.grep import grep, match
from xv6util.wc import wc

match("^ab*c$", "abbbc")                     # True

out = io.StringIO()
grep("needle", io.StringIO("hay\nneedle\n"), out)
out.getvalue()                               # "needle\n"

counts = wc(io.StringIO("one two\nthree\n"))
counts.lines, counts.words, counts.chars     # (2, 3, 14)
```

`grep` only considers lines that end with a newline and stops at a line
longer than 1022 characters. `wc` accepts text or binary streams; binary
streams are counted in bytes.

Other helpers: `xv6util.cat.cat(stream, out)` copies a binary stream and
raises `OSError` on a read or write failure; `xv6util.echo.echo(words)`
returns the joined line; `xv6util.ls.fmtname(path)` and `ls(path, out)`;
`xv6util.find.find(path, name)` is a generator of matching paths and
`basename(path)` returns the part after the last slash;
`xv6util.primes.sieve(numbers)` yields the numbers that survive the
divisibility pipeline; `xv6util.stressfs.stress(directory, workers)` returns
the paths it wrote; `xv6util.pingpong.pingpong(out)` writes its two lines to
`out`.

### Shell parsing — `xv6util.sh`

`parse_cmd(text)` turns a command line into a tree of `ExecCmd` (`argv`),
`RedirCmd` (`cmd`, `file`, `mode`, `fd`), `PipeCmd` and `ListCmd` (`left`,
`right`) and `BackCmd` (`cmd`). It understands words, `<`, `>`, `>>`, `|`,
`;`, `&` and parentheses. Malformed input, such as a redirection without a
file, a missing `)` or ten or more arguments, raises `ShellSyntaxError`;
unparsed trailing text is in its `leftovers` attribute.

```python
from xv6util.sh import parse_cmd

tree = parse_cmd("cat < in.txt | grep x > out.txt; echo done &")
```

### Random numbers — `xv6util.rand`

`do_rand(ctx)` computes the next Park–Miller state. `ParkMiller(seed)` keeps
the state; call `next()` or iterate over it.

```python
from xv6util.rand import ParkMiller

rng = ParkMiller(31)
first = rng.next()
```

### Memory allocation — `xv6util.umalloc`

`Allocator(limit)` hands out byte offsets into a simulated heap that grows,
at least 4096 units of 16 bytes at a time, up to `limit` bytes. `malloc`
raises `OutOfMemoryError` when the heap cannot grow enough; `free` raises
`ValueError` for an address that is not allocated. `heap_size` and
`free_bytes` report the heap's state.

```python
from xv6util.umalloc import Allocator

heap = Allocator(1 << 20)
addr = heap.malloc(100)
heap.free(addr)
```

### Kernel formats

- `xv6util.kparams` — system limits (`NPROC`, `MAXARG`, `MAXPATH`, …),
  `FileType`, `OpenMode`, `Stat` (with `to_bytes` / `from_bytes`) and
  `RtcDate`.
- `xv6util.riscv` — `pgroundup`, `pgrounddown`, `pa2pte`, `pte2pa`,
  `pte_flags`, `PteFlag`, `px`, `make_satp` and the status and interrupt
  register bit constants.
- `xv6util.memlayout` — device and RAM addresses, `TRAMPOLINE`, `TRAPFRAME`,
  `kstack`, `clint_mtimecmp` and the `plic_*` register helpers.
- `xv6util.elf` — `ElfHeader`, `ProgramHeader`, `ProgFlag` and
  `read_program_headers`, raising `ElfFormatError` on bad input.
- `xv6util.virtio` — `MmioRegister`, `ConfigStatus`, `BlkFeature`,
  `DescFlag` and the `VRingDesc`, `VRingUsedElem` and `UsedArea` structures
  with `to_bytes` / `from_bytes`.

## What this package does not do

- There is no interactive shell: `xv6util.sh` parses command lines but does
  not run them.
- There is no kernel, file-system image or emulator. The kernel modules only
  describe constants, address arithmetic and binary layouts.
- There are no system-call stress or regression test programs, and no
  `init` process.