import os

import pytest

from luna.utils import (
    damerau_levenshtein,
    expand_aliases,
    expand_braces,
    expand_paths,
    suggest_commands,
)


def test_expand_aliases_with_rest():
    assert expand_aliases("ll -a /tmp", {"ll": "ls -l"}) == "ls -l -a /tmp"


def test_expand_aliases_alone():
    assert expand_aliases("ll", {"ll": "ls -l"}) == "ls -l"


def test_expand_aliases_no_match():
    assert expand_aliases("lls -a", {"ll": "ls -l"}) == "lls -a"


def test_expand_aliases_only_first_word():
    assert expand_aliases("echo ll", {"ll": "ls -l"}) == "echo ll"


@pytest.mark.parametrize("word", ["", "a", "hello", "grep"])
def test_distance_identity_and_empty(word):
    assert damerau_levenshtein(word, word) == 0
    assert damerau_levenshtein(word, "") == len(word)
    assert damerau_levenshtein("", word) == len(word)


def test_distance_transposition():
    assert damerau_levenshtein("ab", "ba") == 1


def test_distance_unrestricted():
    assert damerau_levenshtein("ca", "abc") == 2


@pytest.mark.parametrize(
    "a,b,c", [("kitten", "sitting", "mitten"), ("grep", "gerp", "greps"), ("ls", "cd", "lsd")]
)
def test_distance_symmetry_and_triangle(a, b, c):
    assert damerau_levenshtein(a, b) == damerau_levenshtein(b, a)
    assert damerau_levenshtein(a, c) <= damerau_levenshtein(a, b) + damerau_levenshtein(b, c)


def test_suggest_commands_builtins():
    result = suggest_commands("gerp", ["ls", "cd", "cat", "grep"], [], True, False)
    assert result[0] == "grep"
    assert len(result) <= 3
    assert all(damerau_levenshtein("gerp", r) <= 2 for r in result)


def test_suggest_commands_ordering():
    builtins = ["ls", "lsof", "less", "cd", "cat", "lsd"]
    result = suggest_commands("lss", builtins, ["lx"], True, False)
    assert result[0] == "ls"
    distances = [(damerau_levenshtein("lss", r), r) for r in result]
    assert distances == sorted(distances)
    assert len(result) <= 3


def test_suggest_commands_aliases_included():
    assert "gst" in suggest_commands("gsst", [], ["gst"], True, False)


def test_suggest_commands_excludes_builtins():
    assert suggest_commands("gerp", ["grep"], ["grep"], False, False) == []


def test_suggest_commands_system(tmp_path, monkeypatch):
    (tmp_path / "mytool").write_text("")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert suggest_commands("mytol", [], [], False, True) == ["mytool"]


def test_expand_braces_simple():
    assert expand_braces("a{b,c}d") == ["abd", "acd"]


def test_expand_braces_two_groups():
    assert expand_braces("x{1,2}{a,b}") == ["x1a", "x1b", "x2a", "x2b"]


def test_expand_braces_none_or_unclosed():
    assert expand_braces("plain") == ["plain"]
    assert expand_braces("a{b") == ["a{b"]


def test_expand_paths_absolute(tmp_path):
    for name in ("a.txt", "b.txt", "c.md"):
        (tmp_path / name).write_text("")
    cwd = str(tmp_path)
    assert expand_paths(["*.txt"], cwd) == [
        str(tmp_path / "a.txt"),
        str(tmp_path / "b.txt"),
    ]


def test_expand_paths_relative(tmp_path):
    for name in ("a.txt", "b.txt"):
        (tmp_path / name).write_text("")
    assert expand_paths(["./*.txt"], str(tmp_path)) == ["./a.txt", "./b.txt"]


def test_expand_paths_no_match_and_plain(tmp_path):
    result = expand_paths(["*.zzz", "plain", "x{1,2}"], str(tmp_path))
    assert result == ["*.zzz", "plain", "x1", "x2"]


def test_expand_paths_absolute_pattern(tmp_path):
    (tmp_path / "f.log").write_text("")
    pattern = os.path.join(str(tmp_path), "*.log")
    assert expand_paths([pattern], "/nonexistent") == [str(tmp_path / "f.log")]