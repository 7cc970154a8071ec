import io
import os

from xv6util.ls import DIRSIZ, fmtname, ls, main


def test_fmtname_pads_short_names():
    name = fmtname("a/b/hello")
    assert len(name) == DIRSIZ
    assert name.rstrip(" ") == "hello"


def test_fmtname_keeps_long_names():
    assert fmtname("dir/averyveryverylongname") == "averyveryverylongname"


def test_fmtname_without_slash():
    assert fmtname("file").rstrip(" ") == "file"


def test_ls_file(tmp_path):
    target = tmp_path / "note"
    target.write_bytes(b"hello")
    out = io.StringIO()
    assert ls(str(target), out) is True
    line = out.getvalue()
    assert line.startswith(fmtname(str(target)))
    fields = line.split()
    assert fields[1] == "2"
    assert fields[2] == str(os.stat(target).st_ino)
    assert fields[3] == "5"


def test_ls_directory(tmp_path):
    (tmp_path / "one").write_text("x")
    (tmp_path / "sub").mkdir()
    out = io.StringIO()
    assert ls(str(tmp_path), out) is True
    rows = {line.split()[0]: line.split()[1] for line in out.getvalue().splitlines()}
    assert rows == {".": "1", "..": "1", "one": "2", "sub": "1"}


def test_ls_missing(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    assert ls(missing, io.StringIO()) is False
    assert capsys.readouterr().err == f"ls: cannot open {missing}\n"


def test_ls_path_too_long(tmp_path):
    path = str(tmp_path) + "/." * 250
    out = io.StringIO()
    assert ls(path, out) is True
    assert out.getvalue() == "ls: path too long\n"


def test_main_lists_arguments(tmp_path, capsys):
    (tmp_path / "f").write_text("abc")
    assert main([str(tmp_path / "f")]) == 0
    assert capsys.readouterr().out.split()[-1] == "3"