"""Run shell command lines and capture their results under a declarative policy."""

from shellctx.config import DEFAULT_CONFIG, ExecConfig, configure_debug_logging
from shellctx.context import ExecContext, ExecResult
from shellctx.errors import (
    COMMAND_NOT_FOUND,
    ContextSetupError,
    ExecAbort,
    ExecError,
    LaunchError,
    ShellCheckError,
)
from shellctx.factory import new_context
from shellctx.flags import NO_FLAGS, Flag, combine_flags
from shellctx.formatter import AnsiFormatter, Formatter, PlainFormatter, SilencedFormatter
from shellctx.probe import check, ensure_shell, reset_check

__version__ = "0.1.0"

__all__ = [
    # Contexts
    "ExecContext",
    "ExecResult",
    "new_context",
    # Flags
    "Flag",
    "NO_FLAGS",
    "combine_flags",
    # Formatters
    "Formatter",
    "AnsiFormatter",
    "PlainFormatter",
    "SilencedFormatter",
    # Errors
    "COMMAND_NOT_FOUND",
    "ContextSetupError",
    "ExecAbort",
    "ExecError",
    "LaunchError",
    "ShellCheckError",
    # Shell probe
    "check",
    "ensure_shell",
    "reset_check",
    # Configuration
    "DEFAULT_CONFIG",
    "ExecConfig",
    "configure_debug_logging",
]
