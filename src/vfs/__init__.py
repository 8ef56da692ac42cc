"""vfs - Location/File addressing over interchangeable storage backends."""

__version__ = "0.1.0"

from .config import Config
from .errors import (
    VFSError,
    InvalidPathError,
    BadFilePrefixError,
    NotFoundError,
    BackendError,
    UnknownSchemeError,
)
from .paths import normalize
from .file import File
from .location import Location
from .backends import (
    FileSystem,
    BaseFileSystem,
    FileInfo,
    OSFileSystem,
    MemFileSystem,
)
from .registry import Registry, default_registry, parse_uri

__all__ = [
    "Config",
    "VFSError",
    "InvalidPathError",
    "BadFilePrefixError",
    "NotFoundError",
    "BackendError",
    "UnknownSchemeError",
    "normalize",
    "File",
    "Location",
    "FileSystem",
    "BaseFileSystem",
    "FileInfo",
    "OSFileSystem",
    "MemFileSystem",
    "Registry",
    "default_registry",
    "parse_uri",
]
