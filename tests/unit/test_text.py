"""Tests for text helpers."""

from shellctx.text import first_line, indent_lines, quote_join, trim_space


def test_indent_lines_drops_empty_lines() -> None:
    assert indent_lines("a\n\nb\n", " > ") == " > a\n > b"


def test_indent_lines_empty_input() -> None:
    assert indent_lines("", " > ") == ""


def test_quote_join_quotes_arguments_with_spaces() -> None:
    assert quote_join(["sh", "-c", "echo hi"]) == 'sh -c "echo hi"'


def test_trim_space_is_idempotent() -> None:
    text = " \n  \n \t stdout  \n  \n "

    assert trim_space(text) == "stdout"
    assert trim_space(trim_space(text)) == trim_space(text)


def test_first_line_boundaries() -> None:
    assert first_line("a\nb\nc") == "a"
    assert first_line("\nrest") == ""
    assert first_line("only") == "only"
    assert first_line("c\rr\nx") == "cr"
