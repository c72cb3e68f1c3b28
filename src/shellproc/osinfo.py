"""OS detection + environment lookup."""

import enum
import os
import sys


class OSKind(enum.Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "mac"


def current_os() -> OSKind:
    if sys.platform.startswith(("win", "cygwin")):
        return OSKind.WINDOWS
    if sys.platform == "darwin":
        return OSKind.MAC
    return OSKind.LINUX


def check_os(*kinds: OSKind) -> bool:
    """Return True if the running OS is any of the given kinds."""
    return current_os() in kinds


def get_env(name: str) -> str:
    """Environment variable value, or empty string when unset."""
    return os.environ.get(name, "")
