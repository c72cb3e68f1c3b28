"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def fresh_search_path():
    """Each test starts with an uncached search path."""
    from shellproc import search_path

    search_path.reset_search_path()
    yield
    search_path.reset_search_path()


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run and process.open_pipe for tests."""
    from shellproc import process

    calls = []
    responses = []

    def fake_run(command, cwd=None):
        calls.append(("run", command, cwd))
        if responses:
            return responses.pop(0)
        return process.Result(returncode=0, stdout="")

    def fake_open_pipe(command, mode, cwd=None):
        calls.append(("open_pipe", command, mode, cwd))
        raise OSError("pipes are not available in mock_process")

    monkeypatch.setattr(process, "run", fake_run)
    monkeypatch.setattr(process, "open_pipe", fake_open_pipe)

    return type("MockProcess", (), {"calls": calls, "responses": responses})()


@pytest.fixture
def windows(monkeypatch):
    """Pretend to run on Windows."""
    from shellproc import osinfo

    monkeypatch.setattr(osinfo, "current_os", lambda: osinfo.OSKind.WINDOWS)


@pytest.fixture
def linux(monkeypatch):
    from shellproc import osinfo

    monkeypatch.setattr(osinfo, "current_os", lambda: osinfo.OSKind.LINUX)
