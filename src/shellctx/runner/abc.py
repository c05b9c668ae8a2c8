"""Process runner abstraction.

The execution context decides *what* to run and how each standard stream is
wired; a ProcessRunner does the actual spawning. Swapping the runner lets
tests exercise the context without starting processes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO


class StdinMode(Enum):
    """Where the child's standard input comes from."""

    NONE = "none"  # /dev/null, EOF immediately
    INHERIT = "inherit"  # host stdin
    READER = "reader"  # streamed from RunRequest.reader


class StreamMode(Enum):
    """Where one of the child's output streams goes."""

    CAPTURE = "capture"
    INHERIT = "inherit"
    MERGE = "merge"  # stderr only: captured into the stdout buffer


@dataclass(frozen=True)
class RunRequest:
    """Everything needed to spawn one child process.

    Fields:
        argv: Program and arguments
        cwd: Working directory of the child
        stdin: Standard input mode
        stdout: Standard output mode (CAPTURE or INHERIT)
        stderr: Standard error mode (CAPTURE, INHERIT or MERGE)
        reader: Input source, required when stdin is READER
        encoding: Encoding applied to text read from a text-mode reader
    """

    argv: tuple[str, ...]
    cwd: Path
    stdin: StdinMode = StdinMode.NONE
    stdout: StreamMode = StreamMode.CAPTURE
    stderr: StreamMode = StreamMode.CAPTURE
    reader: BinaryIO | TextIO | None = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.stdout is StreamMode.MERGE:
            raise ValueError("stdout cannot be merged")
        if (self.stdin is StdinMode.READER) != (self.reader is not None):
            raise ValueError("reader must be given exactly when stdin is READER")


@dataclass(frozen=True)
class RunOutcome:
    """Result of a finished child process.

    Captured streams are complete: the child has exited and every pipe has
    been drained before a RunOutcome is produced.
    """

    returncode: int
    stdout: bytes
    stderr: bytes


class ProcessRunner(ABC):
    """Abstract process spawning for dependency injection."""

    @abstractmethod
    def run(self, request: RunRequest) -> RunOutcome:
        """Run a child process to completion.

        Args:
            request: Process and stream wiring to use

        Returns:
            RunOutcome with the exit status and captured output

        Raises:
            OSError: If the child could not be launched
            Exception: Whatever reading or encoding the request's reader raised
                (for example UnicodeEncodeError), after the child has exited
        """
        ...
