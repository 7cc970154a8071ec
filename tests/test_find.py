import pytest

from xv6util.find import basename, find, main


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("1")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "a.txt").write_text("2")
    (sub / "b.txt").write_text("3")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "a.txt").write_text("4")
    return tmp_path


def test_basename():
    assert basename("a/b/c") == "c"
    assert basename("c") == "c"
    assert basename("a/") == ""


def test_find_all_matches(tree):
    root = str(tree)
    assert sorted(find(root, "a.txt")) == sorted(
        [f"{root}/a.txt", f"{root}/sub/a.txt", f"{root}/sub/deep/a.txt"]
    )


def test_find_single(tree):
    root = str(tree)
    assert list(find(root, "b.txt")) == [f"{root}/sub/b.txt"]


def test_directories_do_not_match(tree):
    assert list(find(str(tree), "deep")) == []


def test_root_file(tree):
    path = str(tree / "a.txt")
    assert list(find(path, "a.txt")) == [path]


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(find(str(tmp_path / "missing"), "x"))


def test_path_too_long(tmp_path, capsys):
    path = str(tmp_path) + "/." * 250
    assert list(find(path, "x")) == []
    assert capsys.readouterr().out == "find: path too long\n"


def test_main_prints_paths(tree, capsys):
    root = str(tree)
    assert main([root, "b.txt"]) == 0
    assert capsys.readouterr().out == f"{root}/sub/b.txt\n"


def test_main_usage(capsys):
    assert main(["only"]) == 1
    assert capsys.readouterr().err == "usage:find <path> <name>\n"


def test_main_missing(tmp_path, capsys):
    missing = str(tmp_path / "gone")
    assert main([missing, "x"]) == 1
    assert capsys.readouterr().err == f"find open {missing} error\n"