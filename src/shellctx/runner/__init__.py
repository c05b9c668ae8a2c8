from shellctx.runner.abc import ProcessRunner, RunOutcome, RunRequest, StdinMode, StreamMode
from shellctx.runner.real import RealProcessRunner

__all__ = [
    "ProcessRunner",
    "RealProcessRunner",
    "RunOutcome",
    "RunRequest",
    "StdinMode",
    "StreamMode",
]
