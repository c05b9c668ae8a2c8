"""Tests for Formatter implementations."""

import io

import click

from shellctx.formatter import AnsiFormatter, PlainFormatter, SilencedFormatter


def test_ansi_printf_styles_text_when_color_forced() -> None:
    stream = io.StringIO()
    formatter = AnsiFormatter(stream, color=True)

    written = formatter.make_printf("green", None, "bold")(" $ %s", "ls")

    assert written == len(" $ ls")
    assert stream.getvalue() == click.style(" $ ls", fg="green", bold=True)


def test_ansi_strips_styles_for_non_terminal_stream() -> None:
    stream = io.StringIO()
    formatter = AnsiFormatter(stream)

    formatter.make_printf("red", None)("plain")

    assert stream.getvalue() == "plain"


def test_printf_without_arguments_writes_format_verbatim() -> None:
    stream = io.StringIO()

    PlainFormatter(stream).make_printf(None, None)("100%")

    assert stream.getvalue() == "100%"


def test_plain_formatter_never_styles() -> None:
    stream = io.StringIO()
    formatter = PlainFormatter(stream, color=True)

    formatter.make_printf("green", "black", "bold", "underline")("text")

    assert stream.getvalue() == "text"
    assert formatter.style("red", None)("x") == "x"


def test_warning_and_error_lines_are_prefixed() -> None:
    stream = io.StringIO()
    formatter = PlainFormatter(stream)

    formatter.warning_line("%s returned %d", "make", 2)
    formatter.error_line("gone")

    assert stream.getvalue() == "WARNING: make returned 2\nERROR: gone\n"


def test_error_prefix_is_red_and_bold() -> None:
    stream = io.StringIO()

    AnsiFormatter(stream, color=True).error_line("gone")

    assert stream.getvalue() == click.style("ERROR: ", fg="red", bold=True) + "gone\n"


def test_silenced_formatter_accepts_everything(capsys) -> None:
    formatter = SilencedFormatter()

    assert formatter.make_printf("green", None, "bold")("%s", "x") == 1
    formatter.warning_line("w")
    formatter.error_line("e")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
