"""Styled output sinks used by execution contexts.

A Formatter is the only way the library writes user-facing text: the verbose
preamble printed before each command and the warning/error lines emitted by
the WARN and MUST_EXIT policies.

Three implementations are provided:
- AnsiFormatter: click-styled output, ANSI codes stripped automatically when
  the target stream is not a terminal
- PlainFormatter: identical text with no styling at all
- SilencedFormatter: accepts every call and writes nothing

Usage:
    formatter = AnsiFormatter()
    green = formatter.make_printf("green", None)
    green(" $ ")
    formatter.warning_line("%s returned %d", "make", 2)
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import IO, Literal, Protocol

import click

Emphasis = Literal["bold", "dim", "underline", "italic", "blink", "reverse"]
Styler = Callable[[str], str]


class Printf(Protocol):
    """Callable returned by Formatter.make_printf()."""

    def __call__(self, fmt: str, *args: object) -> int: ...


def _interpolate(fmt: str, args: tuple[object, ...]) -> str:
    # Same rule as the logging module: only %-format when arguments are given
    if args:
        return fmt % args
    return fmt


class Formatter(ABC):
    """Abstract colour/emphasis sink."""

    @abstractmethod
    def style(self, fg: str | None, bg: str | None, *emphasis: Emphasis) -> Styler:
        """Build a function that applies the given style to a string.

        Args:
            fg: Foreground colour name (click colour names) or None
            bg: Background colour name or None
            *emphasis: Extra emphasis such as "bold" or "underline"

        Returns:
            Function returning the styled text without writing it
        """
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Write already-styled text without a trailing newline."""
        ...

    def make_printf(self, fg: str | None, bg: str | None, *emphasis: Emphasis) -> Printf:
        """Build a printf-style function writing in the given style.

        Args:
            fg: Foreground colour name or None
            bg: Background colour name or None
            *emphasis: Extra emphasis such as "bold"

        Returns:
            Function taking a %-format string and arguments, returning the
            number of characters of (unstyled) text written
        """
        styler = self.style(fg, bg, *emphasis)

        def printf(fmt: str, *args: object) -> int:
            text = _interpolate(fmt, args)
            self.write(styler(text))
            return len(text)

        return printf

    def warning_line(self, fmt: str, *args: object) -> None:
        """Write a line prefixed with a bold "WARNING: " marker."""
        prefix = self.style("yellow", None, "bold")("WARNING: ")
        self.write(prefix + _interpolate(fmt, args) + "\n")

    def error_line(self, fmt: str, *args: object) -> None:
        """Write a line prefixed with a bold red "ERROR: " marker."""
        prefix = self.style("red", None, "bold")("ERROR: ")
        self.write(prefix + _interpolate(fmt, args) + "\n")


class AnsiFormatter(Formatter):
    """Formatter styling text with click.

    Args:
        stream: Target stream (default: sys.stdout at write time)
        color: Passed to click.echo; None lets click decide from the stream
    """

    def __init__(self, stream: IO[str] | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self._color = color

    def style(self, fg: str | None, bg: str | None, *emphasis: Emphasis) -> Styler:
        kwargs = {name: True for name in emphasis}

        def styler(text: str) -> str:
            return click.style(text, fg=fg, bg=bg, **kwargs)

        return styler

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        click.echo(text, file=stream, nl=False, color=self._color)


class PlainFormatter(AnsiFormatter):
    """Formatter writing unstyled text."""

    def style(self, fg: str | None, bg: str | None, *emphasis: Emphasis) -> Styler:
        return _identity


class SilencedFormatter(Formatter):
    """Formatter that accepts all calls and writes nothing."""

    def style(self, fg: str | None, bg: str | None, *emphasis: Emphasis) -> Styler:
        return _identity

    def write(self, text: str) -> None:
        pass


def _identity(text: str) -> str:
    return text
