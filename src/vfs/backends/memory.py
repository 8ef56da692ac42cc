"""In-memory backend, scheme ``mem``."""

import io
import logging
import threading
from datetime import datetime, timezone
from typing import BinaryIO, Callable, Hashable

from .. import paths
from ..errors import BackendError, NotFoundError
from .base import BaseFileSystem
from .models import FileInfo

logger = logging.getLogger(__name__)

SCHEME = "mem"


class _MemoryWriter(io.BytesIO):
    """Write buffer that hands its content to the store on close."""

    def __init__(self, commit: Callable[[bytes], None]):
        super().__init__()
        self._commit = commit

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._commit(self.getvalue())
        finally:
            super().close()


class MemFileSystem(BaseFileSystem):
    """In-memory file system.

    Provides a dict-based store keyed by canonical file path. Directories
    are implied by the files under them and the root always exists.
    Thread-safe via threading.RLock; write streams buffer locally and
    replace the stored content in one step when closed.

    Example:
        fs = MemFileSystem({
            "/src/main.py": "def main(): pass",
            "/README.md": b"# My Project",
        })
        fs.new_location("", "/src/").list()  # ["main.py"]
    """

    scheme = SCHEME
    name = "In-Memory Filesystem"

    def __init__(self, files: dict[str, bytes | str] | None = None):
        """Initialize with optional file contents.

        Args:
            files: Mapping of file paths to content; str content is UTF-8 encoded
        """
        self._lock = threading.RLock()
        self._files: dict[str, tuple[bytes, datetime]] = {}
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str, content: bytes | str) -> None:
        """Add or replace a file in the store.

        Args:
            path: File path, resolved against the root
            content: File content
        """
        normalized = paths.normalize(paths.ROOT, path)
        if normalized.endswith(paths.SEP):
            raise ValueError(f"Not a file path: {path}")
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self._store(normalized, data, "add_file")

    def _store(self, path: str, data: bytes, op: str) -> None:
        with self._lock:
            self._check_file_slot(path, op)
            self._files[path] = (data, datetime.now(timezone.utc))

    def _check_file_slot(self, path: str, op: str) -> None:
        """Reject paths that clash with the implied directory tree. Caller must hold _lock."""
        parent = paths.dirname(path)
        while parent != paths.ROOT:
            if parent.rstrip(paths.SEP) in self._files:
                raise BackendError(op, path, f"Not a directory: {parent.rstrip(paths.SEP)}")
            parent = paths.dirname(parent)
        if self._dir_exists(path + paths.SEP):
            raise BackendError(op, path, "Is a directory")

    def _get(self, path: str) -> tuple[bytes, datetime]:
        with self._lock:
            entry = self._files.get(path)
        if entry is None:
            raise NotFoundError(f"Not found: {path}", path)
        return entry

    def _dir_exists(self, path: str) -> bool:
        """Caller must hold _lock."""
        if path == paths.ROOT:
            return True
        return any(key.startswith(path) for key in self._files)

    def list_directory(self, path: str) -> list[str]:
        with self._lock:
            if not self._dir_exists(path):
                raise NotFoundError(f"Not found: {path}", path)
            names = [
                key[len(path):]
                for key in self._files
                if key.startswith(path) and paths.SEP not in key[len(path):]
            ]
        return sorted(names)

    def exists(self, path: str) -> bool:
        with self._lock:
            if path.endswith(paths.SEP):
                return self._dir_exists(path)
            return path in self._files

    def open_read(self, path: str) -> BinaryIO:
        data, _ = self._get(path)
        return io.BytesIO(data)

    def open_write(self, path: str) -> BinaryIO:
        # Truncate on open to match disk semantics
        self._store(path, b"", "open_write")
        logger.debug("Opened memory write stream for %s", path)
        return _MemoryWriter(lambda data: self._store(path, data, "open_write"))

    def delete(self, path: str) -> None:
        with self._lock:
            if self._files.pop(path, None) is None:
                raise NotFoundError(f"Not found: {path}", path)

    def volume_of(self, path: str) -> str:
        return ""

    def identity(self, path: str) -> Hashable:
        return (SCHEME, id(self), path)

    def stat(self, path: str) -> FileInfo:
        data, modified = self._get(path)
        return FileInfo(size=len(data), last_modified=modified)

    def touch(self, path: str) -> None:
        with self._lock:
            data, _ = self._files.get(path, (b"", None))
            self._store(path, data, "touch")
