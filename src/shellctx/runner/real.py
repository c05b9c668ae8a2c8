"""Production process runner built on subprocess.Popen."""

import logging
import subprocess
import threading
from collections.abc import Callable
from typing import IO, BinaryIO, TextIO

from shellctx.runner.abc import ProcessRunner, RunOutcome, RunRequest, StdinMode, StreamMode
from shellctx.text import quote_join

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


class RealProcessRunner(ProcessRunner):
    """Spawns children with subprocess and drains captured pipes on threads.

    Each captured pipe gets its own drain thread so that a child filling one
    pipe never blocks on the other. Reader input is copied by a daemon thread
    that closes the child's stdin at EOF; it is not waited on, so a reader
    that never ends does not hold the call once the child has exited. An
    error raised while reading or encoding the input is re-raised on the
    calling thread after the child exits.
    """

    def run(self, request: RunRequest) -> RunOutcome:
        stdout_arg = subprocess.PIPE if request.stdout is StreamMode.CAPTURE else None
        stderr_arg = _stderr_target(request)

        logger.debug("Running %s in %s", quote_join(request.argv), request.cwd)
        proc = subprocess.Popen(
            list(request.argv),
            cwd=request.cwd,
            stdin=_stdin_target(request.stdin),
            stdout=stdout_arg,
            stderr=stderr_arg,
        )

        stdout_chunks: list[bytes] = []
        stderr_chunks: list[bytes] = []
        drains: list[threading.Thread] = []
        if proc.stdout is not None:
            drains.append(_start(_drain, proc.stdout, stdout_chunks))
        if proc.stderr is not None:
            drains.append(_start(_drain, proc.stderr, stderr_chunks))
        copy_errors: list[Exception] = []
        if proc.stdin is not None and request.reader is not None:
            _start(_copy_input, request.reader, proc.stdin, request.encoding, copy_errors)

        returncode = proc.wait()
        for thread in drains:
            thread.join()
        logger.debug("Child %d exited with %d", proc.pid, returncode)

        if copy_errors:
            # Recorded before stdin was closed, so visible once the child exits
            raise copy_errors[0]

        stdout = b"".join(stdout_chunks)
        stderr = b"".join(stderr_chunks)
        if request.stderr is StreamMode.MERGE and request.stdout is StreamMode.INHERIT:
            # stdout went to the host, the merged buffer only holds stderr
            stdout, stderr = stderr, b""

        return RunOutcome(returncode=returncode, stdout=stdout, stderr=stderr)


def _stdin_target(mode: StdinMode) -> int | None:
    if mode is StdinMode.READER:
        return subprocess.PIPE
    if mode is StdinMode.INHERIT:
        return None
    return subprocess.DEVNULL


def _stderr_target(request: RunRequest) -> int | None:
    if request.stderr is StreamMode.INHERIT:
        return None
    if request.stderr is StreamMode.MERGE and request.stdout is StreamMode.CAPTURE:
        return subprocess.STDOUT
    return subprocess.PIPE


def _start(target: Callable[..., None], *args: object) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def _drain(stream: IO[bytes], chunks: list[bytes]) -> None:
    with stream:
        while True:
            chunk = stream.read(_CHUNK_SIZE)
            if not chunk:
                return
            chunks.append(chunk)


def _copy_input(
    reader: BinaryIO | TextIO, pipe: IO[bytes], encoding: str, errors: list[Exception]
) -> None:
    try:
        with pipe:
            try:
                while True:
                    chunk = reader.read(_CHUNK_SIZE)
                    if not chunk:
                        return
                    if isinstance(chunk, str):
                        chunk = chunk.encode(encoding)
                    pipe.write(chunk)
            except BrokenPipeError:
                raise
            except Exception as e:
                # Must be recorded before the pipe closes and the child sees EOF
                errors.append(e)
    except BrokenPipeError:
        logger.debug("Child closed stdin before input was exhausted")
