"""Parser for the shell's command language: words, < > >>, |, ;, & and ( )."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .kparams import OpenMode

MAXARGS = 10

_WHITESPACE = " \t\r\n\v"
_SYMBOLS = "<|>&;()"

# Token kinds returned by the tokenizer.
_WORD = "a"
_APPEND = "+"
_END = ""


class ShellSyntaxError(Exception):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message: str, leftovers: str | None = None) -> None:
        super().__init__(message)
        self.leftovers = leftovers


@dataclass
class ExecCmd:
    """Run a program with arguments; argv[0] names the program."""

    argv: list[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run cmd with file descriptor fd reopened on file."""

    cmd: Command
    file: str
    mode: OpenMode
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of left to the input of right."""

    left: Command
    right: Command


@dataclass
class ListCmd:
    """Run left, wait for it, then run right."""

    left: Command
    right: Command


@dataclass
class BackCmd:
    """Run cmd without waiting for it."""

    cmd: Command


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self, toks: str) -> bool:
        self._skip_space()
        return self.pos < len(self.text) and self.text[self.pos] in toks

    def gettoken(self) -> tuple[str, str]:
        """Consume one token; return its kind and its text."""
        self._skip_space()
        text = self.text
        start = self.pos
        if start >= len(text):
            return _END, ""
        ch = text[start]
        if ch in "|();&<":
            kind = ch
            self.pos += 1
        elif ch == ">":
            kind = ">"
            self.pos += 1
            if self.pos < len(text) and text[self.pos] == ">":
                kind = _APPEND
                self.pos += 1
        else:
            kind = _WORD
            while (
                self.pos < len(text)
                and text[self.pos] not in _WHITESPACE
                and text[self.pos] not in _SYMBOLS
            ):
                self.pos += 1
        word = text[start:self.pos]
        self._skip_space()
        return kind, word

    def parse_line(self) -> Command:
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.gettoken()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.gettoken()
            cmd = ListCmd(cmd, self.parse_line())
        return cmd

    def parse_pipe(self) -> Command:
        cmd = self.parse_exec()
        if self.peek("|"):
            self.gettoken()
            cmd = PipeCmd(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self, cmd: Command) -> Command:
        while self.peek("<>"):
            tok, _ = self.gettoken()
            kind, word = self.gettoken()
            if kind != _WORD:
                raise ShellSyntaxError("missing file for redirection")
            if tok == "<":
                cmd = RedirCmd(cmd, word, OpenMode.RDONLY, 0)
            elif tok == ">":
                cmd = RedirCmd(cmd, word, OpenMode.WRONLY | OpenMode.CREATE | OpenMode.TRUNC, 1)
            else:
                cmd = RedirCmd(cmd, word, OpenMode.WRONLY | OpenMode.CREATE, 1)
        return cmd

    def parse_block(self) -> Command:
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.gettoken()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.gettoken()
        return self.parse_redirs(cmd)

    def parse_exec(self) -> Command:
        if self.peek("("):
            return self.parse_block()
        exec_cmd = ExecCmd()
        ret: Command = self.parse_redirs(exec_cmd)
        while not self.peek("|)&;"):
            kind, word = self.gettoken()
            if kind == _END:
                break
            if kind != _WORD:
                raise ShellSyntaxError("syntax")
            exec_cmd.argv.append(word)
            if len(exec_cmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.parse_redirs(ret)
        return ret


def parse_cmd(text: str) -> Command:
    """Parse a whole command line into a command tree."""
    parser = _Parser(text.split("\0", 1)[0])
    cmd = parser.parse_line()
    parser.peek("")
    if parser.pos != len(parser.text):
        raise ShellSyntaxError("syntax", leftovers=parser.text[parser.pos:])
    return cmd