"""Tests for search_path.py — cached PATH + binary lookup."""

import os

from shellproc import search_path
from shellproc.search_path import (
    exists,
    reset_search_path,
    resolve_search_path,
    search_path_entries,
)


def _make_bin(directory, name):
    directory.mkdir(exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    return path


def test_initialized_from_path(linux, monkeypatch):
    monkeypatch.setenv("PATH", "/a:/b")
    assert resolve_search_path() == "/a:/b"


def test_cached_after_first_read(linux, monkeypatch):
    monkeypatch.setenv("PATH", "/a")
    resolve_search_path()
    monkeypatch.setenv("PATH", "/changed")
    assert resolve_search_path() == "/a"


def test_reset_rereads_environment(linux, monkeypatch):
    monkeypatch.setenv("PATH", "/a")
    resolve_search_path()
    monkeypatch.setenv("PATH", "/changed")
    reset_search_path()
    assert resolve_search_path() == "/changed"


def test_windows_reads_path_variable(windows, monkeypatch):
    monkeypatch.setattr(search_path.osinfo, "get_env", lambda name: {"Path": "C:\\bin"}.get(name, ""))
    assert resolve_search_path() == "C:\\bin"


def test_override(linux, monkeypatch):
    monkeypatch.setenv("PATH", "/a")
    assert resolve_search_path("/x:/y") == "/x:/y"
    assert resolve_search_path() == "/x:/y"


def test_override_windows_colons_become_semicolons(windows):
    assert resolve_search_path("/x:/y") == "/x;/y"


def test_entries_drop_empty(linux):
    resolve_search_path("/a::/b:")
    assert search_path_entries() == ["/a", "/b"]


def test_entries_windows_separator(windows):
    resolve_search_path("C\\bin;D\\tools")
    assert search_path_entries() == ["C\\bin", "D\\tools"]


def test_exists_missing(linux, tmp_path):
    resolve_search_path(str(tmp_path))
    assert exists("doesnotexist12345") is False


def test_exists_found(linux, tmp_path):
    _make_bin(tmp_path / "bin", "mytool")
    resolve_search_path(f"/nonexistent:{tmp_path / 'bin'}")
    assert exists("mytool") is True


def test_exists_strips_directories(linux, tmp_path):
    _make_bin(tmp_path / "bin", "mytool")
    resolve_search_path(str(tmp_path / "bin"))
    assert exists("/opt/elsewhere/mytool") is True
    assert exists("C:\\elsewhere\\mytool") is True


def test_exists_ignores_suffix_off_windows(linux, tmp_path):
    _make_bin(tmp_path / "bin", "mytool")
    resolve_search_path(str(tmp_path / "bin"))
    assert exists("mytool.exe") is True


def test_exists_appends_exe_on_windows(windows, tmp_path):
    _make_bin(tmp_path / "bin", "mytool.exe")
    resolve_search_path(str(tmp_path / "bin"))
    assert exists("mytool") is True
    assert exists("mytool.exe") is True


def test_exists_directory_is_not_a_binary(linux, tmp_path):
    (tmp_path / "bin" / "subdir").mkdir(parents=True)
    resolve_search_path(str(tmp_path / "bin"))
    assert exists("subdir") is False


def test_exists_real_binary():
    assert exists("sh") is True
