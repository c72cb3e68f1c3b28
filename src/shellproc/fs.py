"""Directory / File handles used by the runner."""

import os
import tempfile


class Directory:
    def __init__(self, path: str | os.PathLike):
        self._path = os.path.abspath(os.fspath(path))

    @property
    def path(self) -> str:
        return self._path

    def is_writable(self) -> bool:
        """True only for an existing directory the process may write into."""
        return os.path.isdir(self._path) and os.access(self._path, os.W_OK)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Directory({self._path!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Directory) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self._path)


class File:
    def __init__(self, path: str | os.PathLike):
        self._path = os.path.abspath(os.fspath(path))

    @classmethod
    def temporary(cls, directory: Directory, prefix: str) -> "File":
        """Create an empty file with a unique name inside directory."""
        fd, path = tempfile.mkstemp(dir=directory.path, prefix=prefix)
        os.close(fd)
        return cls(path)

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.isfile(self._path)

    def read(self) -> str:
        with open(self._path, newline="", errors="replace") as f:
            return f.read()

    def delete(self) -> None:
        if os.path.exists(self._path):
            os.remove(self._path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"File({self._path!r})"
