"""Escalation strategies applied when a command fails.

Exactly one policy is chosen per context at construction time, in precedence
order MUST_EXIT > MUST_PANIC > WARN > return. Adding a new escalation means
adding one ErrorPolicy subclass and one line in policy_for_flags().
"""

import logging
import os
import sys
import threading
from abc import ABC, abstractmethod

from shellctx.errors import ExecAbort
from shellctx.flags import Flag
from shellctx.formatter import Formatter

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """What an execution context does with a failure before returning it."""

    @abstractmethod
    def handle(self, error: Exception, formatter: Formatter) -> None:
        """React to a failed execution.

        Args:
            error: ExecError or LaunchError produced by the execution
            formatter: Sink for user-facing output

        Raises:
            SystemExit: ExitPolicy terminates the host process
            ExecAbort: AbortPolicy aborts with the rendered error
        """
        ...


class ReturnPolicy(ErrorPolicy):
    """Leave the error for the caller."""

    def handle(self, error: Exception, formatter: Formatter) -> None:
        pass


class WarnPolicy(ErrorPolicy):
    """Print a warning line and still return the error."""

    def handle(self, error: Exception, formatter: Formatter) -> None:
        formatter.warning_line("%s", error)


class ExitPolicy(ErrorPolicy):
    """Print an error line and exit the host with status 1.

    On the main thread this raises SystemExit so cleanup handlers run. A
    SystemExit raised on any other thread only ends that thread, so worker
    threads flush the standard streams and terminate the process directly.
    """

    def handle(self, error: Exception, formatter: Formatter) -> None:
        formatter.error_line("%s", error)
        logger.debug("Exiting host process after failure: %r", error)
        if threading.current_thread() is threading.main_thread():
            raise SystemExit(1)
        sys.stdout.flush()
        sys.stderr.flush()
        os._exit(1)


class AbortPolicy(ErrorPolicy):
    """Abort with the rendered error text."""

    def handle(self, error: Exception, formatter: Formatter) -> None:
        raise ExecAbort(str(error)) from error


def policy_for_flags(flags: Flag) -> ErrorPolicy:
    """Select the escalation policy for a flag set."""
    if Flag.MUST_EXIT in flags:
        return ExitPolicy()
    if Flag.MUST_PANIC in flags:
        return AbortPolicy()
    if Flag.WARN in flags:
        return WarnPolicy()
    return ReturnPolicy()
