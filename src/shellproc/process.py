"""Subprocess wrapper — the single mock seam for all tests.

Command lines are handed to the system shell so that pipes, backticks and
redirections in them keep their shell meaning.
"""

import locale
import subprocess
from dataclasses import dataclass


@dataclass
class Result:
    returncode: int
    stdout: str


def run(command: str, cwd: str | None = None) -> Result:
    """Run a command line to completion. Captures stdout; stderr passes through.

    Stdout is decoded without newline translation; undecodable bytes become U+FFFD.
    """
    proc = subprocess.run(
        command,
        shell=True,
        stdout=subprocess.PIPE,
        cwd=cwd,
    )
    stdout = proc.stdout.decode(locale.getpreferredencoding(False), errors="replace")
    return Result(returncode=proc.returncode, stdout=stdout)


def open_pipe(command: str, mode: str, cwd: str | None = None) -> subprocess.Popen:
    """Start a command line with a one-directional pipe.

    mode "w" connects our end to the child's stdin, mode "r" to its stdout.
    """
    if mode == "w":
        return subprocess.Popen(
            command, shell=True, stdin=subprocess.PIPE, text=True, errors="replace", cwd=cwd
        )
    return subprocess.Popen(
        command, shell=True, stdout=subprocess.PIPE, text=True, errors="replace", cwd=cwd
    )
