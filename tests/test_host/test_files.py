"""Tests for file discovery and bounded reads."""

import pytest

from deadcss.config import DEFAULT_EXCLUDE_PATTERNS
from deadcss.errors import FileAccessError, FileAccessReason
from deadcss.host.files import LocalFileReader, discover_files
from deadcss.host.sink import MemoryDiagnosticsSink


def touch(path, text=""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestDiscoverFiles:
    def test_filters_by_extension(self, tmp_path):
        touch(tmp_path / "a.css")
        touch(tmp_path / "b.scss")
        touch(tmp_path / "c.txt")
        found = discover_files(tmp_path, [".css", ".scss"])
        assert found == [str((tmp_path / "a.css").resolve()), str((tmp_path / "b.scss").resolve())]

    def test_extension_match_is_case_insensitive(self, tmp_path):
        touch(tmp_path / "LOUD.CSS")
        assert len(discover_files(tmp_path, [".css"])) == 1

    def test_sorted_and_recursive(self, tmp_path):
        touch(tmp_path / "z" / "deep" / "x.css")
        touch(tmp_path / "a.css")
        found = discover_files(tmp_path, [".css"])
        assert found == sorted(found)
        assert len(found) == 2

    def test_default_excludes(self, tmp_path):
        touch(tmp_path / "src" / "keep.css")
        touch(tmp_path / "node_modules" / "pkg" / "skip.css")
        touch(tmp_path / "src" / "node_modules" / "skip.css")
        touch(tmp_path / "dist" / "skip.css")
        touch(tmp_path / ".git" / "skip.css")
        found = discover_files(tmp_path, [".css"], DEFAULT_EXCLUDE_PATTERNS)
        assert [p.rsplit("/", 1)[-1] for p in found] == ["keep.css"]

    def test_file_pattern(self, tmp_path):
        touch(tmp_path / "a.css")
        touch(tmp_path / "a.min.css")
        found = discover_files(tmp_path, [".css"], ["*.min.css"])
        assert [p.rsplit("/", 1)[-1] for p in found] == ["a.css"]


class TestLocalFileReader:
    def test_reads_text(self, tmp_path):
        path = touch(tmp_path / "a.css", ".a { }")
        assert LocalFileReader().read(str(path), 100) == ".a { }"

    def test_missing(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            LocalFileReader().read(str(tmp_path / "nope.css"), 100)
        assert exc_info.value.reason is FileAccessReason.NOT_FOUND

    def test_too_large(self, tmp_path):
        path = touch(tmp_path / "big.css", "x" * 11)
        with pytest.raises(FileAccessError) as exc_info:
            LocalFileReader().read(str(path), 10)
        assert exc_info.value.reason is FileAccessReason.TOO_LARGE
        assert exc_info.value.file == str(path)

    def test_limit_is_inclusive(self, tmp_path):
        path = touch(tmp_path / "exact.css", "x" * 10)
        assert LocalFileReader().read(str(path), 10) == "x" * 10

    def test_invalid_utf8_is_replaced(self, tmp_path):
        path = tmp_path / "bin.css"
        path.write_bytes(b".a\xff { }")
        assert LocalFileReader().read(str(path), 100) == ".a� { }"


class TestMemoryDiagnosticsSink:
    def test_empty_set_removes_file(self):
        sink = MemoryDiagnosticsSink()
        sink.set("a.css", ["d"])
        sink.set("a.css", [])
        assert sink.files == []
