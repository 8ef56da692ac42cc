"""Tests for the scheme registry and URI parsing."""

import pytest
from vfs.backends import MemFileSystem, OSFileSystem
from vfs.config import Config
from vfs.errors import InvalidPathError, UnknownSchemeError
from vfs.registry import Registry, default_registry, parse_uri


class TestParseUri:
    """Tests for parse_uri."""

    def test_file_uri(self):
        assert parse_uri("file:///some/file/") == ("file", "", "/some/file/")

    def test_volume(self):
        assert parse_uri("file://C:/some/file.txt") == ("file", "C:", "/some/file.txt")

    def test_mem_uri(self):
        assert parse_uri("mem:///a/b.txt") == ("mem", "", "/a/b.txt")

    def test_path_kept_verbatim(self):
        """Query and fragment markers are part of the file name."""
        assert parse_uri("mem:///dir/report#1.txt") == ("mem", "", "/dir/report#1.txt")
        assert parse_uri("file:///dir/q?x=1.txt") == ("file", "", "/dir/q?x=1.txt")

    def test_scheme_lowercased(self):
        assert parse_uri("MEM:///a.txt") == ("mem", "", "/a.txt")

    @pytest.mark.parametrize(
        "bad", ["/no/scheme/", "mem:", "mem://", "file:/x", ":///x", "mem://vol"]
    )
    def test_malformed(self, bad):
        with pytest.raises(InvalidPathError):
            parse_uri(bad)


class TestRegistry:
    """Tests for Registry."""

    def test_lookup(self, os_fs, mem_fs):
        registry = Registry([os_fs, mem_fs])

        assert registry.get("file") is os_fs
        assert registry.get("mem") is mem_fs
        assert registry.schemes == ["file", "mem"]
        assert "mem" in registry
        assert "s3" not in registry

    def test_unknown_scheme_raises(self):
        with pytest.raises(UnknownSchemeError):
            Registry().get("s3")

    def test_register_rejects_non_file_systems(self):
        with pytest.raises(TypeError):
            Registry().register(object())

    def test_register_replaces(self):
        first, second = MemFileSystem(), MemFileSystem()
        registry = Registry([first])
        registry.register(second)
        assert registry.get("mem") is second

    def test_new_location_and_file(self, mem_fs):
        registry = Registry([mem_fs])

        location = registry.new_location("mem:///some/dir/")
        file = registry.new_file("mem:///some/dir/file.txt")

        assert location.file_system is mem_fs
        assert location.path == "/some/dir/"
        assert file.location == location

    def test_new_file_rejects_directory_uri(self, mem_fs):
        with pytest.raises(InvalidPathError):
            Registry([mem_fs]).new_file("mem:///some/dir/")

    def test_uri_round_trip(self, os_fs, mem_fs):
        """A value's URI resolves back to an equal value."""
        registry = Registry([os_fs, mem_fs])
        for fs in (os_fs, mem_fs):
            location = fs.new_location("", "/x/y/")
            file = location.new_file("../z.txt")
            assert registry.new_location(location.uri) == location
            assert registry.new_file(file.uri) == file

    @pytest.mark.parametrize("name", ["report#1.txt", "q?x=1.txt", "a%20b.txt"])
    def test_uri_round_trip_special_characters(self, os_fs, mem_fs, name):
        """URIs round-trip file names holding URL delimiters."""
        registry = Registry([os_fs, mem_fs])
        for fs in (os_fs, mem_fs):
            file = fs.new_file("", f"/dir/{name}")
            file.write(b"payload")

            resolved = registry.new_file(file.uri)

            assert resolved == file
            assert resolved.read() == b"payload"

    def test_unknown_scheme_from_uri(self):
        with pytest.raises(UnknownSchemeError):
            Registry().new_file("s3://bucket/key.txt")


class TestDefaultRegistry:
    """Tests for default_registry."""

    def test_builds_configured_backends(self, config, tmp_path):
        registry = default_registry(config)

        assert registry.schemes == ["file", "mem"]
        assert isinstance(registry.get("file"), OSFileSystem)
        assert registry.get("file").root == str(tmp_path.resolve())
        assert isinstance(registry.get("mem"), MemFileSystem)

    def test_subset_of_backends(self):
        registry = default_registry(Config(backends=["mem"]))
        assert registry.schemes == ["mem"]

    def test_unknown_backend_raises(self):
        with pytest.raises(ValueError):
            default_registry(Config(backends=["s3"]))
