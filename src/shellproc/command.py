"""Command-line assembly + per-OS argument quoting."""

import re
import shlex
from collections.abc import Sequence

from shellproc import osinfo
from shellproc.osinfo import OSKind

VERBATIM_PREFIXES = ("-", "|", "`")


def quote(arg: str, os_kind: OSKind) -> str:
    """Quote one argument as a single literal for the target shell."""
    if os_kind is OSKind.WINDOWS:
        # cmd.exe cannot escape these inside double quotes
        body = re.sub(r'["%!]', " ", arg)
        # an odd run of trailing backslashes would escape the closing quote
        if (len(body) - len(body.rstrip("\\"))) % 2:
            body += "\\"
        return '"' + body + '"'
    return shlex.quote(arg)


def is_verbatim(arg: str) -> bool:
    """Flags, pipes and backtick spans are passed through unescaped."""
    return arg.startswith(VERBATIM_PREFIXES)


def null_sink(os_kind: OSKind) -> str:
    return "2>nul" if os_kind is OSKind.WINDOWS else "2>/dev/null"


def build_command_line(
    program: str,
    arguments: Sequence[str],
    *,
    redirect_stderr: bool = False,
    capture_path: str | None = None,
    os_kind: OSKind | None = None,
) -> str:
    """Assemble the shell command line.

    Format: <program> <args...> [2>/dev/null|2>nul] [> <capture_path>]
    """
    os_kind = os_kind or osinfo.current_os()
    parts = [program]
    for arg in arguments:
        parts.append(arg if is_verbatim(arg) else quote(arg, os_kind))
    if redirect_stderr:
        parts.append(null_sink(os_kind))
    if capture_path is not None:
        parts.append(">")
        parts.append(quote(capture_path, os_kind))
    return " ".join(parts)
