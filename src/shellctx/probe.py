"""One-shot check that the shell interpreter is usable.

The probe launches the shell once with a trivial script, then runs a canary
command through a regular ExecContext and verifies that both stdout and
stderr are captured. The result is memoised per shell for the lifetime of
the process; concurrent first callers are serialised so the probe runs once.
"""

import logging
import subprocess
import threading

from shellctx.config import DEFAULT_CONFIG, ExecConfig
from shellctx.context import ExecContext
from shellctx.errors import ContextSetupError, ShellCheckError
from shellctx.formatter import SilencedFormatter

logger = logging.getLogger(__name__)

CANARY_COMMAND = "echo 'stdout'; echo 'stderr' 1>&2"

_lock = threading.Lock()
_results: dict[str, ShellCheckError | None] = {}


def check(config: ExecConfig | None = None) -> ShellCheckError | None:
    """Return the cached probe result, running the probe on first use.

    Args:
        config: Configuration naming the shell (default: DEFAULT_CONFIG)

    Returns:
        None if the shell works, otherwise the first failure found
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    with _lock:
        if cfg.shell not in _results:
            _results[cfg.shell] = _run_probe(cfg)
        return _results[cfg.shell]


def ensure_shell(config: ExecConfig | None = None) -> None:
    """Raise the probe failure, if any.

    Raises:
        ShellCheckError: If the shell is unusable
    """
    error = check(config)
    if error is not None:
        raise error


def reset_check() -> None:
    """Forget every cached probe result so the next check() probes again."""
    with _lock:
        _results.clear()


def _run_probe(config: ExecConfig) -> ShellCheckError | None:
    logger.debug("Probing shell %r", config.shell)
    try:
        proc = subprocess.run([config.shell, "-c", "true"], capture_output=True, check=False)
    except OSError as e:
        return ShellCheckError(f"Shell {config.shell!r} could not be launched: {e}")
    if proc.returncode != 0:
        return ShellCheckError(f"Shell {config.shell!r} returned {proc.returncode} for 'true'")

    try:
        ctx = ExecContext("", SilencedFormatter(), config=config)
    except ContextSetupError as e:
        return ShellCheckError(str(e))

    stdout, stderr, error = ctx.execf(CANARY_COMMAND)
    if error is not None:
        return ShellCheckError(f"Shell canary failed: {error}")
    if "stdout" not in stdout:
        return ShellCheckError("Shell execution did not capture stdout correctly")
    if "stderr" not in stderr:
        return ShellCheckError("Shell execution did not capture stderr correctly")

    logger.debug("Shell %r passed the probe", config.shell)
    return None
