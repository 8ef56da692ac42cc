"""Abstract base class shared by the bundled file system backends."""

from abc import ABC, abstractmethod
from typing import BinaryIO, Hashable

from .. import paths
from ..errors import InvalidPathError
from ..file import File
from ..location import Location
from .models import FileInfo


class BaseFileSystem(ABC):
    """Factories for Location and File plus the abstract storage contract.

    Subclasses set ``scheme`` and ``name`` and implement the storage
    methods; path handling lives here so it is identical for every backend.
    """

    scheme: str = ""
    name: str = ""

    def new_location(self, volume: str, path: str) -> Location:
        """Build a Location for ``path``, resolved against the root.

        A missing trailing separator is added, a location is always a
        directory.

        Raises:
            InvalidPathError: If the path is empty or the volume does not
                belong to this backend
        """
        canonical = paths.normalize(paths.ROOT, path)
        if not canonical.endswith(paths.SEP):
            canonical += paths.SEP
        self._check_volume(volume, canonical)
        return Location(self, canonical)

    def new_file(self, volume: str, path: str) -> File:
        """Build a File for ``path``, resolved against the root.

        Raises:
            InvalidPathError: If the path is empty, names a directory, or the
                volume does not belong to this backend
        """
        canonical = paths.normalize(paths.ROOT, path)
        if canonical.endswith(paths.SEP):
            raise InvalidPathError(f"File path names a directory: {path!r}")
        self._check_volume(volume, canonical)
        return File(self, canonical)

    def _check_volume(self, volume: str, path: str) -> None:
        if volume and volume != self.volume_of(path):
            raise InvalidPathError(
                f"Volume {volume!r} is not valid for {self.scheme} path {path!r}"
            )

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        pass

    @abstractmethod
    def open_write(self, path: str) -> BinaryIO:
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        pass

    @abstractmethod
    def volume_of(self, path: str) -> str:
        pass

    @abstractmethod
    def stat(self, path: str) -> FileInfo:
        pass

    @abstractmethod
    def touch(self, path: str) -> None:
        pass

    @abstractmethod
    def identity(self, path: str) -> Hashable:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self.scheme!r})"
