import io

import pytest

from rvkit.grep import grep, main, match


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("abc", "xxabcxx"),
        ("^abc", "abcdef"),
        ("abc$", "xxabc"),
        ("a.c", "abc"),
        ("a*b", "b"),
        ("a*b", "aaab"),
        ("^$", ""),
        ("", "anything"),
        ("x.*z", "x123z"),
        ("^.*$", "whole line"),
    ],
)
def test_matches(pattern, text):
    assert match(pattern, text)


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("x", "abc"),
        ("^abc", "xabc"),
        ("abc$", "abcx"),
        ("a.c", "ac"),
        ("^$", "a"),
        ("^a*$", "aab"),
    ],
)
def test_non_matches(pattern, text):
    assert not match(pattern, text)


def test_long_text_does_not_recurse_deeply():
    text = "a" * 5000 + "b"
    assert match("b$", text)


def test_grep_prints_matching_lines():
    out = io.StringIO()
    grep("an", io.StringIO("apple\nbanana\nmango\ncherry\n"), out)
    assert out.getvalue() == "banana\nmango\n"


def test_grep_ignores_unterminated_last_line():
    out = io.StringIO()
    grep("cherry", io.StringIO("apple\ncherry"), out)
    assert out.getvalue() == ""


def test_grep_stops_at_overlong_line():
    data = "match\n" + "x" * 2000 + "\nmatch again\n"
    out = io.StringIO()
    grep("match", io.StringIO(data), out)
    assert out.getvalue() == "match\n"


def test_main_reads_files(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_text("one\ntwo\nthree\n")
    assert main(["^t", str(path)]) == 0
    assert capsys.readouterr().out == "two\nthree\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main(["x", str(missing)]) == 1
    assert f"cannot open {missing}" in capsys.readouterr().out


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage: grep" in capsys.readouterr().err