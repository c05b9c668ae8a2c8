"""Public construction of execution contexts."""

from pathlib import Path

from shellctx.config import ExecConfig
from shellctx.context import ExecContext
from shellctx.flags import Flag
from shellctx.formatter import Formatter
from shellctx.probe import ensure_shell


def new_context(
    working_dir: str | Path | None,
    formatter: Formatter,
    *flags: Flag,
    config: ExecConfig | None = None,
) -> ExecContext:
    """Create an execution context after verifying the shell works.

    The shell probe runs once per process; later calls reuse its result.

    Raises:
        ShellCheckError: If the shell probe failed
        ContextSetupError: If the working directory cannot be resolved
    """
    ensure_shell(config)
    return ExecContext(working_dir, formatter, *flags, config=config)
