"""Execution contexts: run shell command lines under a fixed policy.

An ExecContext bundles a working directory, a Formatter and a set of Flags.
Each call to execf()/pipe_execf() formats a command line, hands it to the
shell with ``-c``, wires the standard streams according to the flags, waits
for the child, classifies the outcome and applies the escalation policy.

Command lines are passed to the shell verbatim. Arguments interpolated with
%-formatting are NOT escaped; quote untrusted values yourself (for example
with shlex.quote) before passing them in.

Usage:
    ctx = new_context(".", AnsiFormatter(), Flag.TRIM_SPACE)
    branch, _, error = ctx.execf("git rev-parse --abbrev-ref HEAD")
    if error is not None:
        ...

    ctx = new_context("/srv/app", AnsiFormatter(), Flag.STRICT, Flag.MUST_EXIT)
    ctx.pipe_execf(b"a\\nb\\n", "sort | uniq -c")
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, NamedTuple, TextIO

from shellctx.config import DEFAULT_CONFIG, ExecConfig
from shellctx.errors import ContextSetupError, ExecError, LaunchError
from shellctx.flags import Flag, combine_flags
from shellctx.formatter import Formatter, Printf
from shellctx.policy import ErrorPolicy, policy_for_flags
from shellctx.runner.abc import ProcessRunner, RunRequest, StdinMode, StreamMode
from shellctx.runner.real import RealProcessRunner
from shellctx.text import first_line, trim_space

logger = logging.getLogger(__name__)

STRICT_PREAMBLE = "set -eu -o pipefail; "

InputSource = BinaryIO | TextIO | bytes | bytearray | str


class ExecResult(NamedTuple):
    """Outcome of one execution; unpacks as (stdout, stderr, error)."""

    stdout: str
    stderr: str
    error: ExecError | LaunchError | None

    @property
    def ok(self) -> bool:
        return self.error is None


class ExecContext:
    """Policy-bearing handle through which command lines are run.

    The constructor does not probe the shell; use new_context() unless the
    shell is already known to work. Contexts never change after construction
    and may be shared between threads.

    Args:
        working_dir: Directory commands run in; None, "" and "." mean the
            current directory, resolved once here
        formatter: Sink for the verbose preamble and warning/error lines
        *flags: Policy flags
        config: Execution configuration (default: DEFAULT_CONFIG)
        runner: Process runner (default: RealProcessRunner)

    Raises:
        ContextSetupError: If the working directory cannot be resolved
    """

    def __init__(
        self,
        working_dir: str | Path | None,
        formatter: Formatter,
        *flags: Flag,
        config: ExecConfig | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        self._formatter = formatter
        self._flags = combine_flags(flags)
        self._config = config if config is not None else DEFAULT_CONFIG
        self._runner = runner if runner is not None else RealProcessRunner()
        self._policy = policy_for_flags(self._flags)
        self._working_dir = _resolve_working_dir(working_dir)

        self._regular: Printf | None = None
        self._green: Printf | None = None
        self._bold: Printf | None = None
        if Flag.VERBOSE in self._flags:
            self._regular = formatter.make_printf(None, None)
            self._green = formatter.make_printf("green", None)
            self._bold = formatter.make_printf(None, None, "bold")

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def flags(self) -> Flag:
        return self._flags

    @property
    def config(self) -> ExecConfig:
        return self._config

    @property
    def policy(self) -> ErrorPolicy:
        return self._policy

    def execf(self, fmt: str, *args: object) -> ExecResult:
        """Run a formatted command line with no input.

        Equivalent to pipe_execf(None, fmt, *args).
        """
        return self.pipe_execf(None, fmt, *args)

    def pipe_execf(self, source: InputSource | None, fmt: str, *args: object) -> ExecResult:
        """Run a formatted command line, optionally feeding it input.

        Args:
            source: Data streamed to the child's stdin (binary or text
                file-like object, bytes or str), or None
            fmt: Command line template; %-formatted when args are given
            *args: Values interpolated into fmt without any escaping

        Returns:
            ExecResult of (stdout, stderr, error). error is None on success,
            an ExecError when the command exited non-zero, or a LaunchError
            when it could not be started.

        Raises:
            SystemExit: On failure under MUST_EXIT
            ExecAbort: On failure under MUST_PANIC
            UnicodeEncodeError: If text input cannot be encoded with the
                configured encoding
        """
        cmd_line = fmt % args if args else fmt
        request = self._build_request(cmd_line, source)

        self._print_preamble(cmd_line)

        error: ExecError | LaunchError | None = None
        stdout = ""
        stderr = ""
        try:
            outcome = self._runner.run(request)
        except OSError as e:
            error = LaunchError(cmd_line, str(e))
            error.__cause__ = e
        else:
            stdout = outcome.stdout.decode(self._config.encoding, errors="replace")
            stderr = outcome.stderr.decode(self._config.encoding, errors="replace")
            if outcome.returncode != 0:
                error = ExecError(outcome.returncode, cmd_line, stderr, self._flags)

        if error is not None:
            logger.debug("Command failed: %r", error)
            self._policy.handle(error, self._formatter)

        if Flag.TRIM_SPACE in self._flags:
            stdout = trim_space(stdout)
            stderr = trim_space(stderr)

        if Flag.FIRST_LINE in self._flags:
            stdout = first_line(stdout)

        return ExecResult(stdout, stderr, error)

    def _build_request(self, cmd_line: str, source: InputSource | None) -> RunRequest:
        script = STRICT_PREAMBLE + cmd_line if Flag.STRICT in self._flags else cmd_line

        reader = _as_reader(source, self._config.encoding)
        if reader is not None:
            stdin = StdinMode.READER
        elif Flag.PASS_THROUGH_STDIN in self._flags:
            stdin = StdinMode.INHERIT
        else:
            stdin = StdinMode.NONE

        if Flag.PASS_THROUGH_STDOUT in self._flags:
            stdout = StreamMode.INHERIT
        else:
            stdout = StreamMode.CAPTURE

        # Pass-through wins over merging
        if Flag.PASS_THROUGH_STDERR in self._flags:
            stderr = StreamMode.INHERIT
        elif Flag.STDERR_IN_RESULT in self._flags:
            stderr = StreamMode.MERGE
        else:
            stderr = StreamMode.CAPTURE

        return RunRequest(
            argv=(self._config.shell, "-c", script),
            cwd=self._working_dir,
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            reader=reader,
            encoding=self._config.encoding,
        )

    def _print_preamble(self, cmd_line: str) -> None:
        if self._regular is None or self._green is None or self._bold is None:
            return
        self._regular("%s", self._working_dir)
        self._green(" $ ")
        self._bold("%s", cmd_line)
        self._regular("\n")

    def __repr__(self) -> str:
        return f"ExecContext(working_dir={str(self._working_dir)!r}, flags={self._flags!r})"


def _resolve_working_dir(working_dir: str | Path | None) -> Path:
    try:
        if working_dir is None or str(working_dir) in ("", "."):
            return Path.cwd()
        return Path(working_dir).absolute()
    except OSError as e:
        raise ContextSetupError(f"Can't get current working directory: {e}") from e


def _as_reader(source: InputSource | None, encoding: str) -> BinaryIO | TextIO | None:
    if source is None:
        return None
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    if isinstance(source, str):
        # Encoded here so encoding errors reach the caller before anything runs
        return io.BytesIO(source.encode(encoding))
    return source
