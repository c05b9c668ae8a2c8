"""Exceptions raised or returned by execution contexts.

Error taxonomy:
- ContextSetupError / ShellCheckError: the environment is broken; raised at
  construction time
- LaunchError: the shell could not be started for a given command line
- ExecError: the command ran and exited non-zero
- ExecAbort: raised when MUST_PANIC escalates one of the above
"""

from shellctx.flags import NO_FLAGS, Flag
from shellctx.text import indent_lines

COMMAND_NOT_FOUND = 127


class ExecError(Exception):
    """A command ran to completion but returned a non-zero exit code.

    Attributes:
        exit_code: Exit status of the shell. When the child was killed by a
            signal this is the negative signal number (-9 for SIGKILL), as
            subprocess reports it; it is not collapsed to -1
        cmd_line: Fully formatted command line as executed
        stderr: Captured standard error; empty when stderr was passed through
            or merged into stdout
        flags: Flags of the originating context, used only for rendering
    """

    def __init__(self, exit_code: int, cmd_line: str, stderr: str, flags: Flag = NO_FLAGS) -> None:
        super().__init__(exit_code, cmd_line, stderr)
        self.exit_code = exit_code
        self.cmd_line = cmd_line
        self.stderr = stderr
        self.flags = flags

    @property
    def not_found(self) -> bool:
        """True when the shell could not locate the program."""
        return self.exit_code == COMMAND_NOT_FOUND

    @property
    def signal(self) -> int | None:
        """Number of the signal that terminated the child, if any."""
        if self.exit_code < 0:
            return -self.exit_code
        return None

    def render(self) -> str:
        """Render the error as a human-readable message."""
        if Flag.NO_ANNOTATE in self.flags:
            return self.stderr

        if Flag.VERBOSE in self.flags:
            # The command line was already printed in the verbose preamble
            lines = [f"  returned {self.exit_code}"]
        else:
            lines = [f"{self.cmd_line} returned {self.exit_code}"]

        stderr = indent_lines(self.stderr, " > ")
        if stderr:
            lines.append(stderr)

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ExecError(exit_code={self.exit_code!r}, cmd_line={self.cmd_line!r})"


class LaunchError(RuntimeError):
    """The command line could not be started at all."""

    def __init__(self, cmd_line: str, reason: str) -> None:
        super().__init__(f"Failed to launch {cmd_line!r}: {reason}")
        self.cmd_line = cmd_line


class ShellCheckError(RuntimeError):
    """The shell interpreter is unusable or does not relay output correctly."""


class ContextSetupError(RuntimeError):
    """An execution context could not be constructed."""


class ExecAbort(RuntimeError):
    """Raised by the MUST_PANIC policy; the message is the rendered error."""
