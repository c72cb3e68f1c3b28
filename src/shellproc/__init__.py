try:
    from importlib.metadata import version

    __version__ = version("shellproc")
except Exception:
    __version__ = "0.0.0"

from shellproc.errors import (  # noqa: E402
    ArgumentError,
    InvalidStateError,
    ProcessExitError,
    RunnerEnvironmentError,
    ShellProcError,
    WriteError,
)
from shellproc.runner import ProcessRunner, SessionMode  # noqa: E402

__all__ = [
    "ArgumentError",
    "InvalidStateError",
    "ProcessExitError",
    "ProcessRunner",
    "RunnerEnvironmentError",
    "SessionMode",
    "ShellProcError",
    "WriteError",
]
