"""Tests for args.py — command tokenizing."""

import pytest

from shellproc.args import group_tokens, normalize_program, parse, split_command
from shellproc.errors import ArgumentError
from shellproc.osinfo import OSKind


def test_split_plain():
    assert split_command("ls -la /tmp") == ["ls", "-la", "/tmp"]


def test_split_collapses_whitespace():
    assert split_command("  ls   -la\t/tmp  ") == ["ls", "-la", "/tmp"]


def test_single_quote_span_stripped():
    assert split_command("prog a 'b c' d") == ["prog", "a", "b c", "d"]


def test_double_quote_span_stripped():
    assert split_command('prog "one two three" x') == ["prog", "one two three", "x"]


def test_quoted_single_token():
    assert split_command('prog "abc" d') == ["prog", "abc", "d"]


def test_backtick_span_kept():
    assert split_command("echo `date +%s` done") == ["echo", "`date +%s`", "done"]


def test_only_opening_character_closes_span():
    assert split_command("prog \"it's here\"") == ["prog", "it's here"]


def test_multiple_spans():
    tokens = split_command("prog 'a b' \"c d\" e")
    assert tokens == ["prog", "a b", "c d", "e"]


def test_unterminated_span_raises():
    with pytest.raises(ArgumentError, match="unterminated"):
        split_command("prog 'a b")


def test_unterminated_backtick_raises():
    with pytest.raises(ArgumentError, match="unterminated"):
        split_command("prog `date")


def test_lone_quote_opens_span():
    assert split_command("prog ' a '") == ["prog", " a "]


def test_group_tokens_does_not_mutate_input():
    tokens = ["'a", "b'", "c"]
    assert group_tokens(tokens) == ["a b", "c"]
    assert tokens == ["'a", "b'", "c"]


def test_parse_string():
    assert parse("prog a 'b c' d", OSKind.LINUX) == ("prog", ["a", "b c", "d"])


def test_parse_sequence_not_split():
    program, args = parse(["prog", "a b", "'c d'"], OSKind.LINUX)
    assert program == "prog"
    assert args == ["a b", "'c d'"]


def test_parse_empty_raises():
    with pytest.raises(ArgumentError):
        parse("   ", OSKind.LINUX)
    with pytest.raises(ArgumentError):
        parse([], OSKind.LINUX)


def test_parse_empty_argument_raises():
    with pytest.raises(ArgumentError):
        parse(["prog", ""], OSKind.LINUX)


def test_normalize_program_windows():
    assert normalize_program("git.exe", OSKind.WINDOWS) == "git"
    assert normalize_program("C:\\bin\\Tool.EXE", OSKind.WINDOWS) == "C:\\bin\\Tool"


def test_normalize_program_other_os_untouched():
    assert normalize_program("git.exe", OSKind.LINUX) == "git.exe"
    assert normalize_program("git", OSKind.WINDOWS) == "git"


def test_empty_quoted_argument_raises():
    with pytest.raises(ArgumentError, match="Empty argument"):
        split_command("prog ''")
    with pytest.raises(ArgumentError, match="Empty argument"):
        split_command('prog "" x')
