"""Fake implementation of ProcessRunner for testing.

This fake lets tests drive ExecContext through every outcome (success,
non-zero exit, launch failure) without spawning processes.
"""

from shellctx.runner.abc import ProcessRunner, RunOutcome, RunRequest


class FakeProcessRunner(ProcessRunner):
    """In-memory fake returning a predetermined outcome.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only the request log changes during execution

    Examples:
        # Command that fails with a message on stderr
        runner = FakeProcessRunner(returncode=2, stderr=b"boom\\n")
        ctx = ExecContext("/repo", RecordingFormatter(), runner=runner)
        _, _, error = ctx.execf("make")
        assert error.exit_code == 2

        # Shell binary missing
        runner = FakeProcessRunner(launch_error=FileNotFoundError("sh"))
    """

    def __init__(
        self,
        *,
        returncode: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
        launch_error: OSError | None = None,
    ) -> None:
        """Initialize fake with the outcome every run() returns.

        Args:
            returncode: Exit status to report
            stdout: Captured stdout bytes to report
            stderr: Captured stderr bytes to report
            launch_error: If given, run() raises it instead of returning
        """
        self._returncode = returncode
        self._stdout = stdout
        self._stderr = stderr
        self._launch_error = launch_error
        self._requests: list[RunRequest] = []
        self._inputs: list[bytes | str | None] = []

    def run(self, request: RunRequest) -> RunOutcome:
        """Record the request and return the configured outcome."""
        self._requests.append(request)
        self._inputs.append(request.reader.read() if request.reader is not None else None)
        if self._launch_error is not None:
            raise self._launch_error
        return RunOutcome(returncode=self._returncode, stdout=self._stdout, stderr=self._stderr)

    @property
    def requests(self) -> list[RunRequest]:
        """Get the list of requests passed to run().

        This property is for test assertions only.
        """
        return self._requests.copy()

    @property
    def inputs(self) -> list[bytes | str | None]:
        """Get the full input read from each request's reader (None without one).

        This property is for test assertions only.
        """
        return self._inputs.copy()
