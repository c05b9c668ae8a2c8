"""Execution configuration.

ExecConfig is an immutable value read once (typically from the environment)
and handed to contexts. Contexts built without a config use DEFAULT_CONFIG.

Environment variables:
    SHELLCTX_SHELL: Shell interpreter looked up on PATH (default: sh)
    SHELLCTX_ENCODING: Encoding used to decode captured output (default: utf-8)
    SHELLCTX_DEBUG: Enable debug logging when set to 1/true/yes
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ExecConfig:
    """Immutable execution configuration.

    Fields:
        shell: Shell interpreter invoked with ``-c``
        encoding: Encoding used to decode captured stdout/stderr
        debug: Whether debug logging was requested
    """

    shell: str = "sh"
    encoding: str = "utf-8"
    debug: bool = False

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "ExecConfig":
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            ExecConfig with unset variables falling back to defaults

        Raises:
            ValueError: If SHELLCTX_SHELL is set but empty
        """
        env = os.environ if environ is None else environ

        shell = env.get("SHELLCTX_SHELL", "sh")
        if not shell.strip():
            raise ValueError("SHELLCTX_SHELL must not be empty")

        return ExecConfig(
            shell=shell.strip(),
            encoding=env.get("SHELLCTX_ENCODING", "utf-8") or "utf-8",
            debug=env.get("SHELLCTX_DEBUG", "").strip().lower() in _TRUTHY,
        )


DEFAULT_CONFIG = ExecConfig()


def configure_debug_logging(config: ExecConfig) -> None:
    """Install a DEBUG-level root handler if the config asks for it."""
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
