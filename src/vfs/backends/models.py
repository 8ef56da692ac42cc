"""Data models returned by file system backends."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FileInfo:
    """Metadata about a stored file."""

    size: int
    last_modified: datetime  # timezone-aware, UTC
