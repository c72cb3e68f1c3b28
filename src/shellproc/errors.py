"""Error taxonomy. Every error is raised to the caller; nothing is retried."""


class ShellProcError(Exception):
    """Base class for all shellproc errors."""


class ArgumentError(ShellProcError, ValueError):
    """Malformed command input or an invalid interactive mode."""


class InvalidStateError(ShellProcError, RuntimeError):
    """Operation called in the wrong session state."""


class RunnerEnvironmentError(ShellProcError, OSError):
    """Working directory not writable, or a required OS capability is missing."""


class WriteError(ShellProcError):
    """Write to an interactive session failed or was zero length."""


class ProcessExitError(ShellProcError):
    """Exit code did not match the expected value (only raised when tossing)."""

    def __init__(self, returncode: int, expected: int, output: str = ""):
        self.returncode = returncode
        self.expected = expected
        self.output = output
        super().__init__(
            f"Return value was not expected value (got: {returncode}, wanted: {expected})"
        )
