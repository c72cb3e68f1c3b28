"""Process-wide search path (PATH / Path) + binary lookup."""

import os

from shellproc import osinfo
from shellproc.osinfo import OSKind

_search_path: str | None = None


def _env_name() -> str:
    return "Path" if osinfo.check_os(OSKind.WINDOWS) else "PATH"


def _separator() -> str:
    return ";" if osinfo.check_os(OSKind.WINDOWS) else ":"


def resolve_search_path(override: str | None = None) -> str:
    """Return the cached search path, initializing it from the environment once.

    An explicit override replaces the cached value. On Windows a
    colon-delimited override is rewritten to semicolons.
    """
    global _search_path
    if override is not None:
        if osinfo.check_os(OSKind.WINDOWS) and ":" in override:
            override = override.replace(":", ";")
        _search_path = override
    elif _search_path is None:
        _search_path = osinfo.get_env(_env_name())
    return _search_path


def search_path_entries() -> list[str]:
    """Search path split into its directories, empty entries dropped."""
    return [p for p in resolve_search_path().split(_separator()) if p]


def reset_search_path() -> None:
    """Forget the cached value so the next lookup re-reads the environment."""
    global _search_path
    _search_path = None


def _candidate_names(binary_name: str) -> list[str]:
    name = binary_name.replace("\\", "/").rsplit("/", 1)[-1]
    if osinfo.check_os(OSKind.WINDOWS):
        if not name.lower().endswith(".exe"):
            name += ".exe"
        return [name]
    names = [name]
    if name.lower().endswith(".exe") and len(name) > 4:
        names.append(name[:-4])
    return names


def exists(binary_name: str) -> bool:
    """Find out if a binary exists as a regular file on the search path.

    Any leading directories in binary_name are ignored. The file is not
    tested for executability.
    """
    names = _candidate_names(binary_name)
    for entry in search_path_entries():
        for name in names:
            if os.path.isfile(os.path.join(entry, name)):
                return True
    return False
