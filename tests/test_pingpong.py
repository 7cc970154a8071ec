import io
import os

from xv6util.pingpong import main, pingpong


def test_ping_then_pong():
    out = io.StringIO()
    pingpong(out)
    pid = os.getpid()
    assert out.getvalue() == f"{pid}: received ping\n{pid}: received pong\n"


def test_repeatable():
    first, second = io.StringIO(), io.StringIO()
    pingpong(first)
    pingpong(second)
    assert first.getvalue() == second.getvalue()


def test_main_prints(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(": ", 1)[1] for line in lines] == ["received ping", "received pong"]


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == -1
    assert capsys.readouterr().out == "Error: Incorrect number of arguments\n"