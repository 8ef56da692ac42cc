"""File system backends.

This module provides pluggable storage backends, enabling:
- Local disk access (``file``)
- In-memory stores for tests and scratch data (``mem``)
- Future: object stores implementing the same FileSystem protocol
"""

from .protocol import FileSystem
from .base import BaseFileSystem
from .models import FileInfo
from .local import OSFileSystem
from .memory import MemFileSystem

__all__ = [
    "FileSystem",
    "BaseFileSystem",
    "FileInfo",
    "OSFileSystem",
    "MemFileSystem",
]
