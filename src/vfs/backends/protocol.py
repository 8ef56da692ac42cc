"""Protocol definition for file system backends."""

from __future__ import annotations
from typing import BinaryIO, Hashable, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from ..file import File
    from ..location import Location
    from .models import FileInfo


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for file system backends.

    A file system is bound to exactly one storage medium and hands out
    Location and File values that delegate their I/O back to it. Every
    path passed to the storage methods is canonical: absolute, ``/``
    separated, slash-terminated for directories and never for files.

    Implementations must handle:
    - Translating native "missing" errors into NotFoundError
    - Wrapping any other native failure in BackendError
    - Thread safety of any state they hold themselves
    """

    @property
    def scheme(self) -> str:
        """Fixed URI scheme of this backend, e.g. ``file`` or ``mem``."""
        ...

    @property
    def name(self) -> str:
        """Human readable backend name."""
        ...

    def new_location(self, volume: str, path: str) -> Location:
        """Build a Location for ``path`` resolved against the root."""
        ...

    def new_file(self, volume: str, path: str) -> File:
        """Build a File for ``path`` resolved against the root."""
        ...

    def list_directory(self, path: str) -> list[str]:
        """List immediate child file names of a directory.

        Args:
            path: Canonical directory path

        Returns:
            File names (not paths), sorted ascending. Subdirectories are
            not included.

        Raises:
            NotFoundError: If the directory does not exist
        """
        ...

    def exists(self, path: str) -> bool:
        """Check for a directory (slash-terminated path) or a file."""
        ...

    def open_read(self, path: str) -> BinaryIO:
        """Open a binary read stream. Raises NotFoundError if absent."""
        ...

    def open_write(self, path: str) -> BinaryIO:
        """Open a binary write stream, creating parents and truncating."""
        ...

    def delete(self, path: str) -> None:
        """Remove a file. Raises NotFoundError if absent."""
        ...

    def volume_of(self, path: str) -> str:
        """Platform volume for ``path``, ``""`` where not applicable."""
        ...

    def stat(self, path: str) -> FileInfo:
        """Size and modification time of a file. Raises NotFoundError."""
        ...

    def touch(self, path: str) -> None:
        """Create an empty file or bump the modification time of one."""
        ...

    def identity(self, path: str) -> Hashable:
        """Key naming the stored object behind ``path``.

        Two File values address the same bytes exactly when their keys are
        equal, even across file system instances sharing one medium.
        """
        ...
