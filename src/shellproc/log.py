"""Timestamped output + GitHub Actions formatting."""

import os
import sys
from datetime import datetime


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _debug_enabled() -> bool:
    if os.environ.get("SHELLPROC_DEBUG", "").lower() in ("1", "true", "yes"):
        return True
    return _is_github_actions() and os.environ.get("RUNNER_DEBUG") == "1"


def info(msg: str) -> None:
    print(f"[{_timestamp()}] {msg}", flush=True)


def success(msg: str) -> None:
    info(f"  ✓ {msg}")


def failure(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    info(f"  ✗ {msg}")


def debug(msg: str) -> None:
    """Trace output, off unless SHELLPROC_DEBUG or RUNNER_DEBUG is set.

    Outside GitHub Actions it goes to stderr.
    """
    if not _debug_enabled():
        return
    if _is_github_actions():
        print(f"::debug::{msg}", flush=True)
        return
    print(f"[{_timestamp()}] DEBUG: {msg}", file=sys.stderr, flush=True)


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
