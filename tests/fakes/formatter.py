"""Recording Formatter for testing."""

from shellctx.formatter import Emphasis, Formatter, Styler


class RecordingFormatter(Formatter):
    """Formatter that keeps everything written in memory.

    Styling is ignored; warning and error lines are additionally recorded
    without their prefixes so tests can assert on the message alone.
    """

    def __init__(self) -> None:
        self._writes: list[str] = []
        self._warnings: list[str] = []
        self._errors: list[str] = []

    def style(self, fg: str | None, bg: str | None, *emphasis: Emphasis) -> Styler:
        return lambda text: text

    def write(self, text: str) -> None:
        self._writes.append(text)

    def warning_line(self, fmt: str, *args: object) -> None:
        self._warnings.append(fmt % args if args else fmt)
        super().warning_line(fmt, *args)

    def error_line(self, fmt: str, *args: object) -> None:
        self._errors.append(fmt % args if args else fmt)
        super().error_line(fmt, *args)

    @property
    def output(self) -> str:
        """Everything written so far, concatenated."""
        return "".join(self._writes)

    @property
    def warnings(self) -> list[str]:
        return self._warnings.copy()

    @property
    def errors(self) -> list[str]:
        return self._errors.copy()
