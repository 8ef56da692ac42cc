"""File: an addressable single object within one file system."""

from __future__ import annotations

import logging
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, BinaryIO, Iterator

from . import paths
from .errors import InvalidPathError

if TYPE_CHECKING:
    from .backends.protocol import FileSystem
    from .location import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class File:
    """Immutable file address bound to a file system.

    ``path`` is canonical and never slash-terminated. Byte I/O is delegated
    to the file system; streams are only handed out through context managers
    so they are closed on every exit path.
    """

    file_system: FileSystem
    path: str

    def __post_init__(self) -> None:
        if self.path.endswith(paths.SEP) or paths.normalize(paths.ROOT, self.path) != self.path:
            raise InvalidPathError(f"File path must be canonical and absolute: {self.path!r}")

    @property
    def location(self) -> Location:
        """Location holding this file."""
        from .location import Location

        return Location(self.file_system, paths.dirname(self.path))

    @property
    def name(self) -> str:
        return paths.basename(self.path)

    @property
    def volume(self) -> str:
        return self.file_system.volume_of(self.path)

    @property
    def uri(self) -> str:
        return f"{self.file_system.scheme}://{self.volume}{self.path}"

    def exists(self) -> bool:
        return self.file_system.exists(self.path)

    @contextmanager
    def open_read(self) -> Iterator[BinaryIO]:
        """Open a read stream.

        Raises:
            NotFoundError: If the file does not exist
        """
        stream = self.file_system.open_read(self.path)
        try:
            yield stream
        finally:
            stream.close()

    @contextmanager
    def open_write(self) -> Iterator[BinaryIO]:
        """Open a write stream, creating parents and replacing any content."""
        stream = self.file_system.open_write(self.path)
        try:
            yield stream
        finally:
            stream.close()

    def read(self) -> bytes:
        with self.open_read() as stream:
            return stream.read()

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read().decode(encoding)

    def write(self, data: bytes) -> int:
        """Replace the file content with ``data``.

        Returns:
            Number of bytes written
        """
        with self.open_write() as stream:
            written = stream.write(data)
        logger.debug("Wrote %d bytes to %s", written, self.uri)
        return written

    def write_text(self, text: str, encoding: str = "utf-8") -> int:
        return self.write(text.encode(encoding))

    def delete(self) -> None:
        """Remove the file. Raises NotFoundError if it is already absent."""
        self.file_system.delete(self.path)
        logger.debug("Deleted %s", self.uri)

    def size(self) -> int:
        return self.file_system.stat(self.path).size

    def last_modified(self) -> datetime:
        return self.file_system.stat(self.path).last_modified

    def touch(self) -> None:
        self.file_system.touch(self.path)

    def _same_object(self, target: File) -> bool:
        return self.file_system.identity(self.path) == target.file_system.identity(target.path)

    def copy_to_file(self, target: File) -> File:
        """Stream this file's content into ``target``, possibly on another backend."""
        if self._same_object(target):
            return target
        with self.open_read() as source, target.open_write() as dest:
            shutil.copyfileobj(source, dest)
        logger.debug("Copied %s to %s", self.uri, target.uri)
        return target

    def copy_to_location(self, location: Location) -> File:
        """Copy into ``location`` under the same name."""
        return self.copy_to_file(location.new_file(self.name))

    def move_to_file(self, target: File) -> File:
        """Copy into ``target`` then delete this file. Not atomic."""
        if self._same_object(target):
            return target
        self.copy_to_file(target)
        self.delete()
        return target

    def move_to_location(self, location: Location) -> File:
        return self.move_to_file(location.new_file(self.name))

    def __str__(self) -> str:
        return self.uri

    def __repr__(self) -> str:
        return f"File({self.uri!r})"
