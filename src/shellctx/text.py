"""Text helpers for rendering errors and post-processing captured output."""

from collections.abc import Iterable


def indent_lines(text: str, indent: str) -> str:
    """Prefix every non-empty line of text with indent.

    Empty lines are dropped entirely.

    Args:
        text: Text to indent
        indent: Prefix applied to each kept line

    Returns:
        Indented lines joined with newlines
    """
    return "\n".join(indent + line for line in text.split("\n") if line != "")


def quote_join(args: Iterable[str]) -> str:
    """Join arguments with spaces, double-quoting the ones containing spaces.

    Only meant for human-readable display (logs), not for shell consumption.
    """
    return " ".join(f'"{arg}"' if " " in arg else arg for arg in args)


def trim_space(text: str) -> str:
    """Strip leading and trailing whitespace, newlines included."""
    return text.strip()


def first_line(text: str) -> str:
    """Return the part of text before the first newline, with CR removed.

    Examples:
        >>> first_line("a\\nb\\nc")
        'a'
        >>> first_line("\\nrest")
        ''
        >>> first_line("only\\r")
        'only'
    """
    return text.split("\n", 1)[0].replace("\r", "")
