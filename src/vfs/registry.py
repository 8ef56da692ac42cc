"""Explicit scheme -> file system registry.

The application builds a Registry and passes it to whatever needs to turn
URIs into Locations and Files; nothing is registered process-wide.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional

from .backends import FileSystem, MemFileSystem, OSFileSystem
from .config import Config
from .errors import InvalidPathError, UnknownSchemeError
from .file import File
from .location import Location

logger = logging.getLogger(__name__)

SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")

BACKEND_FACTORIES: dict[str, Callable[[Config], FileSystem]] = {
    OSFileSystem.scheme: lambda config: OSFileSystem(config.local_root),
    MemFileSystem.scheme: lambda config: MemFileSystem(),
}


def parse_uri(uri: str) -> tuple[str, str, str]:
    """Split ``scheme://[volume]/path`` into its parts.

    Returns:
        Tuple of (scheme, volume, path)

    Raises:
        InvalidPathError: If the URI has no scheme or no path
    """
    scheme, sep, rest = uri.partition("://")
    if not sep or not SCHEME_RE.fullmatch(scheme):
        raise InvalidPathError(f"URI must look like scheme://[volume]/path: {uri!r}")

    # The path is taken verbatim; "#" and "?" are ordinary file name characters
    slash = rest.find("/")
    if slash < 0:
        raise InvalidPathError(f"URI has no path: {uri!r}")
    return scheme.lower(), rest[:slash], rest[slash:]


class Registry:
    """Maps URI schemes to file system instances.

    Usage:
        registry = Registry([OSFileSystem(), MemFileSystem()])
        loc = registry.new_location("mem:///scratch/")
        f = registry.new_file("file:///tmp/report.txt")
    """

    def __init__(self, file_systems: Iterable[FileSystem] = ()):
        self._file_systems: dict[str, FileSystem] = {}
        for fs in file_systems:
            self.register(fs)

    def register(self, fs: FileSystem) -> None:
        """Register ``fs`` under its scheme, replacing any previous entry."""
        if not isinstance(fs, FileSystem):
            raise TypeError(f"Not a file system: {fs!r}")
        if fs.scheme in self._file_systems:
            logger.warning("Replacing file system registered for scheme %s", fs.scheme)
        self._file_systems[fs.scheme] = fs
        logger.info("Registered %s for scheme %s", fs.name, fs.scheme)

    def get(self, scheme: str) -> FileSystem:
        try:
            return self._file_systems[scheme]
        except KeyError:
            raise UnknownSchemeError(scheme) from None

    @property
    def schemes(self) -> list[str]:
        return sorted(self._file_systems)

    def __contains__(self, scheme: object) -> bool:
        return scheme in self._file_systems

    def new_location(self, uri: str) -> Location:
        """Location for a URI such as ``file:///some/dir/``."""
        scheme, volume, path = parse_uri(uri)
        return self.get(scheme).new_location(volume, path)

    def new_file(self, uri: str) -> File:
        """File for a URI such as ``mem:///some/file.txt``."""
        scheme, volume, path = parse_uri(uri)
        return self.get(scheme).new_file(volume, path)


def default_registry(config: Optional[Config] = None) -> Registry:
    """Build a registry holding the backends named in ``config``.

    Raises:
        ValueError: If the config names a backend that does not exist
    """
    if config is None:
        config = Config.from_env()
    registry = Registry()
    for scheme in config.backends:
        factory = BACKEND_FACTORIES.get(scheme)
        if factory is None:
            raise ValueError(
                f"Unknown backend: {scheme}. Use one of: {', '.join(sorted(BACKEND_FACTORIES))}."
            )
        registry.register(factory(config))
    return registry
