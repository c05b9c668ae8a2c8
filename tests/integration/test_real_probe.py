"""Integration tests for the shell probe against the real system."""

from collections.abc import Iterator

import pytest

from shellctx.config import ExecConfig
from shellctx.errors import ShellCheckError
from shellctx.probe import check, reset_check


@pytest.fixture(autouse=True)
def fresh_probe() -> Iterator[None]:
    reset_check()
    yield
    reset_check()


def test_real_sh_passes_probe() -> None:
    assert check() is None


def test_probe_result_is_reused() -> None:
    first = check(ExecConfig(shell="/nonexistent/shellctx-sh"))
    second = check(ExecConfig(shell="/nonexistent/shellctx-sh"))

    assert isinstance(first, ShellCheckError)
    assert second is first
    assert "could not be launched" in str(first)


def test_shell_failing_trivial_script_is_rejected() -> None:
    error = check(ExecConfig(shell="false"))

    assert isinstance(error, ShellCheckError)
    assert "returned 1" in str(error)
