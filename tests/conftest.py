"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from vfs.backends import MemFileSystem, OSFileSystem
from vfs.config import Config


@pytest.fixture
def os_fs(tmp_path: Path) -> OSFileSystem:
    """Disk backend confined to a temporary directory."""
    return OSFileSystem(tmp_path)


@pytest.fixture
def mem_fs() -> MemFileSystem:
    """Empty in-memory backend."""
    return MemFileSystem()


@pytest.fixture(params=["file", "mem"])
def fs(request, tmp_path: Path):
    """Each bundled backend in turn, so shared behavior is checked on both."""
    if request.param == "file":
        return OSFileSystem(tmp_path)
    return MemFileSystem()


@pytest.fixture
def test_files(fs):
    """Location /test_files/ holding two files and one subdirectory."""
    fs.new_file("", "/test_files/test.txt").write(b"hello world")
    fs.new_file("", "/test_files/prefix-file.txt").write(b"prefixed")
    fs.new_file("", "/test_files/subdir/nested.txt").write(b"nested")
    return fs.new_location("", "/test_files/")


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a test configuration rooted in a temporary directory."""
    return Config(local_root=tmp_path, backends=["file", "mem"], log_level="DEBUG")
