"""Location: an addressable directory within one file system."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Pattern, Union

from . import paths
from .errors import InvalidPathError, NotFoundError
from .file import File

if TYPE_CHECKING:
    from .backends.protocol import FileSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """Immutable directory address bound to a file system.

    ``path`` is always canonical and slash-terminated; the root is ``/``.
    Two locations are equal when they share the same file system instance
    and path. Navigation returns new locations.

    Usage:
        fs = MemFileSystem()
        loc = fs.new_location("", "/foo/")
        sub = loc.new_location("other/")        # /foo/other/
        up = sub.new_location("../../bar/")     # /bar/
        f = up.new_file("data.txt")             # /bar/data.txt
    """

    file_system: FileSystem
    path: str

    def __post_init__(self) -> None:
        if not self.path.endswith(paths.SEP) or paths.normalize(paths.ROOT, self.path) != self.path:
            raise InvalidPathError(f"Location path must be canonical and absolute: {self.path!r}")

    @property
    def name(self) -> str:
        """Last path segment, empty for the root."""
        return paths.basename(self.path)

    @property
    def volume(self) -> str:
        return self.file_system.volume_of(self.path)

    @property
    def uri(self) -> str:
        return f"{self.file_system.scheme}://{self.volume}{self.path}"

    def new_location(self, relative_path: str) -> Location:
        """Resolve ``relative_path`` against this location.

        Raises:
            InvalidPathError: If ``relative_path`` is empty or malformed
        """
        canonical = paths.normalize(self.path, relative_path)
        if not canonical.endswith(paths.SEP):
            canonical += paths.SEP
        return Location(self.file_system, canonical)

    def new_file(self, relative_path: str) -> File:
        """Resolve ``relative_path`` against this location as a file.

        Raises:
            InvalidPathError: If ``relative_path`` is empty or names a directory
        """
        canonical = paths.normalize(self.path, relative_path)
        if canonical.endswith(paths.SEP):
            raise InvalidPathError(f"File path names a directory: {relative_path!r}")
        return File(self.file_system, canonical)

    def change_dir(self, relative_path: str) -> Location:
        """Return the location ``relative_path`` leads to; ``self`` is unchanged."""
        return self.new_location(relative_path)

    def exists(self) -> bool:
        return self.file_system.exists(self.path)

    def list(self) -> list[str]:
        """List file names directly under this location.

        Returns:
            Sorted file names, or an empty list if the directory is missing
        """
        try:
            names = self.file_system.list_directory(self.path)
        except NotFoundError:
            logger.debug("Listing missing directory %s as empty", self.uri)
            return []
        return sorted(names)

    def list_by_prefix(self, prefix: str) -> list[str]:
        """List file names starting with ``prefix``.

        Raises:
            BadFilePrefixError: If ``prefix`` contains a path separator
        """
        paths.validate_prefix(prefix)
        return [name for name in self.list() if name.startswith(prefix)]

    def list_by_regex(self, pattern: Union[str, Pattern[str]]) -> list[str]:
        """List file names in which ``pattern`` matches."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return [name for name in self.list() if regex.search(name)]

    def delete_file(self, name: str) -> None:
        """Delete the file ``name`` relative to this location.

        Raises:
            InvalidPathError: If ``name`` is empty or names a directory
            NotFoundError: If the file does not exist
        """
        self.new_file(name).delete()

    def __str__(self) -> str:
        return self.uri

    def __repr__(self) -> str:
        return f"Location({self.uri!r})"
