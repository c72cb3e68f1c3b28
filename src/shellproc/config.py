"""Parse shellproc settings (YAML) into a Settings object."""

import os
from dataclasses import dataclass

import yaml

from shellproc import search_path
from shellproc.errors import ArgumentError

CONFIG_FILE = ".shellproc.yml"


@dataclass
class Settings:
    path: str | None = None
    toss: bool = False
    redirect_stderr: bool = False
    working_dir: str | None = None
    expect: int = 0


def config_path() -> str | None:
    """Resolve the settings file to use.

    Order: SHELLPROC_CONFIG env → .shellproc.yml (if present) → none.
    """
    env_path = os.environ.get("SHELLPROC_CONFIG")
    if env_path:
        return env_path
    if os.path.isfile(CONFIG_FILE):
        return CONFIG_FILE
    return None


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def parse_settings(data: dict) -> Settings:
    """Build Settings from a parsed YAML mapping. Unknown keys are ignored."""
    path = data.get("path")
    if isinstance(path, list):
        # Allow a YAML list of directories
        path = os.pathsep.join(str(p) for p in path)
    working_dir = data.get("working_dir")
    try:
        expect = int(data.get("expect", 0))
    except (TypeError, ValueError):
        raise ArgumentError(f"expect must be an integer, got {data.get('expect')!r}") from None
    return Settings(
        path=str(path) if path is not None else None,
        toss=_as_bool(data.get("toss", False)),
        redirect_stderr=_as_bool(data.get("redirect_stderr", False)),
        working_dir=str(working_dir) if working_dir is not None else None,
        expect=expect,
    )


def load_settings(path: str | None = None) -> Settings:
    """Load settings from path (or the resolved config file).

    No file requested or found → defaults. A requested file that is missing
    raises FileNotFoundError.
    """
    path = path or config_path()
    if path is None:
        return Settings()
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ArgumentError(f"{path}: expected a mapping at the top level")
    return parse_settings(data)


def apply(settings: Settings, runner) -> None:
    """Push settings onto a ProcessRunner and the process-wide search path."""
    if settings.path is not None:
        search_path.resolve_search_path(settings.path)
    if settings.toss:
        runner.toss_if_unexpected()
    if settings.redirect_stderr:
        runner.redirect_standard_error()
    if settings.working_dir is not None:
        runner.set_working_directory(settings.working_dir)
