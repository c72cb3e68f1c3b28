"""ProcessRunner: build, run and drive external commands."""

import contextlib
import enum
import os
from collections.abc import Sequence

from shellproc import log, osinfo, process, search_path
from shellproc.args import parse, split_command
from shellproc.command import build_command_line
from shellproc.errors import (
    ArgumentError,
    InvalidStateError,
    ProcessExitError,
    RunnerEnvironmentError,
    WriteError,
)
from shellproc.fs import Directory, File

CAPTURE_PREFIX = "shellproc__"


def _join_lines(stdout: str) -> str:
    """Split on line feeds only, drop trailing whitespace per line, rejoin."""
    if stdout.endswith("\n"):
        stdout = stdout[:-1]
    if not stdout:
        return ""
    return "\n".join(line.rstrip() for line in stdout.split("\n"))


class SessionMode(str, enum.Enum):
    WRITE = "w"
    READ = "r"


class ProcessRunner:
    """One external command, run once or driven through interactive sessions.

    The command may be given as a single string (split on whitespace, with
    "double", 'single' and `backtick` spans kept together), as one list of
    already-split arguments, or as several positional arguments:

        ProcessRunner("tar -czf 'my archive.tgz' src")
        ProcessRunner(["tar", "-czf", "my archive.tgz", "src"])
        ProcessRunner("tar", "-czf", "my archive.tgz", "src")

    Arguments starting with -, | or ` are emitted unescaped; everything else is
    quoted for the shell.
    """

    def __init__(self, *command: str | Sequence[str], toss: bool = False):
        if not command:
            raise ArgumentError("No program specified")
        if len(command) > 1 and not all(isinstance(c, str) for c in command):
            raise ArgumentError("Pass either one list of arguments or several strings, not both")
        source = command[0] if len(command) == 1 else list(command)
        self.program, self._arguments = parse(source, osinfo.current_os())
        self.toss = toss
        self.working_directory = Directory(os.getcwd())
        self.prior_directory: Directory | None = None
        self.mode: SessionMode | None = None
        self.output: str | None = None
        self.last_returncode: int | None = None
        self._redirect_stderr = False
        self._handle = None
        self._pipe_file: File | None = None

    def __repr__(self) -> str:
        state = f"interactive:{self.mode.value}" if self.is_interactive else "idle"
        return f"<ProcessRunner {self.command_line()!r} {state}>"

    # --- search path helpers ---

    exists = staticmethod(search_path.exists)

    @staticmethod
    def set_path(path: str | None = None) -> str:
        return search_path.resolve_search_path(path)

    @staticmethod
    def get_path(as_list: bool = False) -> str | list[str]:
        if as_list:
            return search_path.search_path_entries()
        return search_path.resolve_search_path()

    # --- configuration (idle only) ---

    @property
    def arguments(self) -> list[str]:
        return list(self._arguments)

    @property
    def redirect_stderr(self) -> bool:
        return self._redirect_stderr

    @property
    def is_interactive(self) -> bool:
        return self._handle is not None

    def _require_idle(self, action: str) -> None:
        if self._handle is not None:
            raise InvalidStateError(f"Attempted to {action} while an interactive session is active")

    def add_argument(self, *args: str) -> "ProcessRunner":
        """Append arguments. Each value is split and grouped like a command string."""
        self._require_idle("add arguments")
        for arg in args:
            self._arguments.extend(split_command(str(arg)))
        return self

    def toss_if_unexpected(self, enabled: bool = True) -> "ProcessRunner":
        """Raise ProcessExitError when the exit code differs from the expected one."""
        self.toss = enabled
        return self

    def redirect_standard_error(self, enabled: bool = True) -> "ProcessRunner":
        """Discard the command's stderr."""
        self._require_idle("change stderr redirection")
        self._redirect_stderr = enabled
        return self

    def set_working_directory(self, path: str | os.PathLike) -> "ProcessRunner":
        """Change into path and run the command there.

        Raises RunnerEnvironmentError if path is not a writable directory, in
        which case nothing changes. The change is process-wide.
        """
        self._require_idle("change the working directory")
        directory = Directory(path)
        if not directory.is_writable():
            raise RunnerEnvironmentError(f"Working directory {directory} is not writable")
        os.chdir(directory.path)
        self.working_directory = directory
        return self

    def command_line(self) -> str:
        return build_command_line(
            self.program, self._arguments, redirect_stderr=self._redirect_stderr
        )

    # --- synchronous execution ---

    def execute(self, expected: int = 0) -> str:
        """Run to completion and return stdout, one line per line, trailing
        whitespace removed.

        Raises ProcessExitError if tossing is enabled and the exit code is not
        expected.
        """
        self._require_idle("execute")
        command = self.command_line()
        log.debug(f"Executing: {command}")
        result = process.run(command, cwd=self.working_directory.path)
        self.last_returncode = result.returncode
        output = _join_lines(result.stdout)
        if self.toss and result.returncode != expected:
            raise ProcessExitError(result.returncode, expected, output)
        return output

    # --- interactive sessions ---

    def _capture_file(self) -> File:
        if self._pipe_file is None:
            self._pipe_file = File.temporary(self.working_directory, CAPTURE_PREFIX)
        return self._pipe_file

    def _release_capture_file(self) -> None:
        if self._pipe_file is not None:
            self._pipe_file.delete()
            self._pipe_file = None

    def _restore_directory(self) -> None:
        if self.prior_directory is not None:
            os.chdir(self.prior_directory.path)

    def begin_interactive(self, mode: str | SessionMode = SessionMode.WRITE) -> "ProcessRunner":
        """Start the command with a pipe.

        In write mode ("w") data sent with write() goes to the command's stdin
        and its stdout is collected in a scratch file, returned by eof(). In
        read mode ("r") the command's stdout is available through read().
        """
        if self._handle is not None:
            raise InvalidStateError(
                "Attempted to open an interactive session when there is already one active"
            )
        try:
            mode = SessionMode(mode)
        except ValueError:
            raise ArgumentError(f"Invalid mode {mode!r}. Valid values: r, w") from None

        self.prior_directory = Directory(os.getcwd())
        os.chdir(self.working_directory.path)
        command = self.program
        try:
            capture_path = self._capture_file().path if mode is SessionMode.WRITE else None
            command = build_command_line(
                self.program,
                self._arguments,
                redirect_stderr=self._redirect_stderr,
                capture_path=capture_path,
            )
            log.debug(f"Executing: {command}")
            self._handle = process.open_pipe(command, mode.value, cwd=self.working_directory.path)
        except OSError as e:
            self._release_capture_file()
            self._restore_directory()
            raise RunnerEnvironmentError(f"Could not start {command}: {e}") from e
        self.mode = mode
        self.output = None
        return self

    def write(self, fmt: str, *args) -> "ProcessRunner":
        """printf-style write to the command's stdin."""
        if self._handle is None:
            raise InvalidStateError("Attempted to write to non-existent handle")
        if self.mode is not SessionMode.WRITE:
            raise InvalidStateError("Attempted to write to non-writable handle")
        try:
            data = fmt % args if args else fmt
        except (TypeError, ValueError) as e:
            raise ArgumentError(f"Cannot format {fmt!r}: {e}") from e
        if not data:
            raise WriteError("String was zero length")

        log.debug(f"Writing {data[:100]}... to handle")
        try:
            written = self._handle.stdin.write(data)
            self._handle.stdin.flush()
        except OSError as e:
            raise WriteError(f"Could not write to handle: {e}") from e
        if not written:
            raise WriteError("Could not write to handle")
        return self

    def _require_reader(self) -> None:
        if self._handle is None:
            raise InvalidStateError("Attempted to read from non-existent handle")
        if self.mode is not SessionMode.READ:
            raise InvalidStateError("Attempted to read from non-readable handle")

    def read(self, size: int = -1) -> str:
        """Read from the command's stdout (read mode). Blocks until size chars or EOF."""
        self._require_reader()
        return self._handle.stdout.read(size)

    def readline(self) -> str:
        self._require_reader()
        return self._handle.stdout.readline()

    def _close_session(self) -> tuple[int, str]:
        handle, mode = self._handle, self.mode
        self._handle = None
        self.mode = None
        try:
            if mode is SessionMode.WRITE:
                # The command may already have exited; its exit code says so.
                with contextlib.suppress(BrokenPipeError):
                    handle.stdin.close()
                returncode = handle.wait()
                output = self._pipe_file.read()
            else:
                try:
                    output = handle.stdout.read()
                finally:
                    handle.stdout.close()
                    returncode = handle.wait()
        finally:
            self._release_capture_file()
            self._restore_directory()
        self.output = output
        self.last_returncode = returncode
        return returncode, output

    def eof(self, expected: int = 0) -> str:
        """Close the session and return its output.

        Write mode returns everything the command printed; read mode returns
        whatever was not consumed by read(). The scratch file is removed and
        the directory in effect before begin_interactive() is restored, also
        when ProcessExitError is raised.
        """
        if self._handle is None:
            raise InvalidStateError("Attempted to close non-existent handle")
        returncode, output = self._close_session()
        if self.toss and returncode != expected:
            raise ProcessExitError(returncode, expected, output)
        return output

    @contextlib.contextmanager
    def interactive(self, mode: str | SessionMode = SessionMode.WRITE, expected: int = 0):
        """Scoped session. Output is left in self.output.

        If the block raises, the session is closed without checking the exit
        code and the exception propagates.
        """
        self.begin_interactive(mode)
        try:
            yield self
        except BaseException:
            if self._handle is not None:
                self._close_session()
            raise
        if self._handle is not None:
            self.eof(expected)
