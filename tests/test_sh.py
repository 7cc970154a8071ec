import pytest

from xv6util.kparams import OpenMode
from xv6util.sh import (
    MAXARGS,
    BackCmd,
    ExecCmd,
    ListCmd,
    PipeCmd,
    RedirCmd,
    ShellSyntaxError,
    parse_cmd,
)


def test_simple_command():
    assert parse_cmd("echo hi\n") == ExecCmd(["echo", "hi"])


def test_tabs_and_spaces_separate_words():
    assert parse_cmd("  ls\t-l   x ") == ExecCmd(["ls", "-l", "x"])


def test_empty_line_gives_empty_exec():
    assert parse_cmd("") == ExecCmd([])


def test_redirections_wrap_in_order():
    cmd = parse_cmd("cat < in > out")
    assert cmd == RedirCmd(
        RedirCmd(ExecCmd(["cat"]), "in", OpenMode.RDONLY, 0),
        "out",
        OpenMode.WRONLY | OpenMode.CREATE | OpenMode.TRUNC,
        1,
    )


def test_append_redirection():
    cmd = parse_cmd("echo x >> log")
    assert cmd == RedirCmd(ExecCmd(["echo", "x"]), "log", OpenMode.WRONLY | OpenMode.CREATE, 1)


def test_redirection_before_words():
    cmd = parse_cmd("< in grep a")
    assert cmd == RedirCmd(ExecCmd(["grep", "a"]), "in", OpenMode.RDONLY, 0)


def test_pipe_is_right_associative():
    cmd = parse_cmd("a | b | c")
    assert cmd == PipeCmd(ExecCmd(["a"]), PipeCmd(ExecCmd(["b"]), ExecCmd(["c"])))


def test_list_is_right_associative():
    cmd = parse_cmd("a ; b ; c")
    assert cmd == ListCmd(ExecCmd(["a"]), ListCmd(ExecCmd(["b"]), ExecCmd(["c"])))


def test_background():
    assert parse_cmd("sleep 5 &") == BackCmd(ExecCmd(["sleep", "5"]))


def test_background_then_list():
    cmd = parse_cmd("a & ; b")
    assert cmd == ListCmd(BackCmd(ExecCmd(["a"])), ExecCmd(["b"]))


def test_block_with_redirection():
    cmd = parse_cmd("(echo a ; echo b) > out")
    assert cmd == RedirCmd(
        ListCmd(ExecCmd(["echo", "a"]), ExecCmd(["echo", "b"])),
        "out",
        OpenMode.WRONLY | OpenMode.CREATE | OpenMode.TRUNC,
        1,
    )


def test_symbols_end_words_without_spaces():
    cmd = parse_cmd("echo hi|wc")
    assert cmd == PipeCmd(ExecCmd(["echo", "hi"]), ExecCmd(["wc"]))


def test_leftovers_raise():
    with pytest.raises(ShellSyntaxError) as info:
        parse_cmd("echo hi ) rest")
    assert info.value.leftovers == ") rest"


def test_word_after_background_is_leftover():
    with pytest.raises(ShellSyntaxError) as info:
        parse_cmd("a & b")
    assert info.value.leftovers == "b"


def test_missing_close_paren():
    with pytest.raises(ShellSyntaxError, match="missing \\)"):
        parse_cmd("(echo hi")


def test_missing_redirection_file():
    with pytest.raises(ShellSyntaxError, match="missing file for redirection"):
        parse_cmd("echo hi >")


def test_open_paren_inside_words_is_syntax_error():
    with pytest.raises(ShellSyntaxError, match="^syntax$"):
        parse_cmd("echo (")


def test_too_many_args():
    words = ["w"] * MAXARGS
    with pytest.raises(ShellSyntaxError, match="too many args"):
        parse_cmd(" ".join(words))


def test_most_args_allowed():
    words = [f"w{i}" for i in range(MAXARGS - 1)]
    assert parse_cmd(" ".join(words)) == ExecCmd(words)