"""Local disk backend, scheme ``file``."""

import logging
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Hashable, Iterator

from ..errors import BackendError, NotFoundError
from .base import BaseFileSystem
from .models import FileInfo

logger = logging.getLogger(__name__)

SCHEME = "file"


class OSFileSystem(BaseFileSystem):
    """Local filesystem backend rooted at a host directory.

    VFS paths map under ``root``. With the default root of ``/`` a VFS path
    is the real path; with any other root the backend is confined to that
    directory since canonical paths never climb above ``/``.
    """

    scheme = SCHEME
    name = "os lib"

    def __init__(self, root: str | Path = "/"):
        """Initialize backend bound to a root directory.

        Args:
            root: Host directory that VFS path ``/`` maps to
        """
        self._root = Path(root).resolve()

        if not self._root.is_dir():
            raise ValueError(f"Root path is not a directory: {root}")

    @property
    def root(self) -> str:
        """Host directory this backend is bound to."""
        return str(self._root)

    def _real_path(self, path: str) -> str:
        """Host path for a canonical VFS path."""
        return os.path.join(self._root, *[part for part in path.split("/") if part])

    @contextmanager
    def _translate(self, op: str, path: str, writing: bool = False) -> Iterator[None]:
        """Map OS errors onto the VFS error taxonomy.

        A file standing where a parent directory should be is a missing
        object when reading but a failure when writing.
        """
        missing = (FileNotFoundError,) if writing else (FileNotFoundError, NotADirectoryError)
        try:
            yield
        except missing as e:
            raise NotFoundError(f"Not found: {path}", path) from e
        except OSError as e:
            raise BackendError(op, path, e.strerror or e) from e

    def list_directory(self, path: str) -> list[str]:
        real = self._real_path(path)
        with self._translate("list", path):
            with os.scandir(real) as entries:
                names = [entry.name for entry in entries if entry.is_file()]
        logger.debug("Listed %d files in %s", len(names), real)
        return sorted(names)

    def exists(self, path: str) -> bool:
        real = self._real_path(path)
        if path.endswith("/"):
            return os.path.isdir(real)
        return os.path.isfile(real)

    def open_read(self, path: str) -> BinaryIO:
        real = self._real_path(path)
        if os.path.isdir(real):
            raise NotFoundError(f"Not a file: {path}", path)
        with self._translate("open_read", path):
            return open(real, "rb")

    def open_write(self, path: str) -> BinaryIO:
        real = self._real_path(path)
        with self._translate("open_write", path, writing=True):
            os.makedirs(os.path.dirname(real), exist_ok=True)
            return open(real, "wb")

    def delete(self, path: str) -> None:
        real = self._real_path(path)
        with self._translate("delete", path):
            os.remove(real)

    def volume_of(self, path: str) -> str:
        return os.path.splitdrive(self._real_path(path))[0]

    def identity(self, path: str) -> Hashable:
        # Host path, so separate instances over one directory agree
        return (SCHEME, os.path.normcase(os.path.realpath(self._real_path(path))))

    def stat(self, path: str) -> FileInfo:
        real = self._real_path(path)
        with self._translate("stat", path):
            st = os.stat(real)
        if os.path.isdir(real):
            raise NotFoundError(f"Not a file: {path}", path)
        return FileInfo(
            size=st.st_size,
            last_modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    def touch(self, path: str) -> None:
        real = Path(self._real_path(path))
        if real.is_dir():
            raise BackendError("touch", path, "Is a directory")
        with self._translate("touch", path, writing=True):
            real.parent.mkdir(parents=True, exist_ok=True)
            real.touch()
