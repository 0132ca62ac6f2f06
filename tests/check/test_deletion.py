"""Tests for bunch file deletion state."""

import pytest

from bunch_check.check.deletion import DeletionCache, is_deleted_bunch_file
from bunch_check.exceptions import FileAccessError


class TestIsDeletedBunchFile:
    """Tests for is_deleted_bunch_file."""

    def test_empty_file_is_deleted(self, tmp_path):
        path = tmp_path / "foo.c.x"
        path.write_text("")
        assert is_deleted_bunch_file(path) is True

    def test_whitespace_only_file_is_deleted(self, tmp_path):
        path = tmp_path / "foo.c.x"
        path.write_text("  \n\t\n")
        assert is_deleted_bunch_file(path) is True

    def test_file_with_content_is_not_deleted(self, tmp_path):
        path = tmp_path / "foo.c.x"
        path.write_text("\n  int x;\n")
        assert is_deleted_bunch_file(path) is False

    def test_non_utf8_file_is_not_deleted(self, tmp_path):
        """Undecodable bytes are content, not a read failure."""
        path = tmp_path / "foo.c.x"
        path.write_bytes(b"\xcf\xf0\xe8\xe2\xe5\xf2")
        assert is_deleted_bunch_file(path) is False

    def test_control_characters_are_blank(self, tmp_path):
        path = tmp_path / "foo.c.x"
        path.write_bytes(b"\r\n\x0b\x0c\x00 ")
        assert is_deleted_bunch_file(path) is True

    def test_non_breaking_space_is_content(self, tmp_path):
        path = tmp_path / "foo.c.x"
        path.write_text("\u00a0\n", encoding="utf-8")
        assert is_deleted_bunch_file(path) is False

    def test_missing_file_is_not_deleted(self, tmp_path):
        assert is_deleted_bunch_file(tmp_path / "missing.x") is False

    def test_unreadable_file_raises(self, tmp_path):
        """A directory in place of the file cannot be read as text."""
        path = tmp_path / "foo.c.x"
        path.mkdir()
        with pytest.raises(FileAccessError):
            is_deleted_bunch_file(path)


class TestDeletionCache:
    """Tests for DeletionCache."""

    def test_resolves_relative_to_root(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.c.x").write_text("")
        (tmp_path / "src" / "b.c.x").write_text("code")

        cache = DeletionCache(tmp_path)
        assert cache.is_deleted("src/a.c.x") is True
        assert cache.is_deleted("src/b.c.x") is False

    def test_memoizes_first_answer(self, tmp_path):
        """File contents are assumed stable, so later changes are not seen."""
        path = tmp_path / "a.c.x"
        path.write_text("")

        cache = DeletionCache(tmp_path)
        assert cache.is_deleted("a.c.x") is True
        assert "a.c.x" in cache

        path.write_text("now has content")
        assert cache.is_deleted("a.c.x") is True
        assert len(cache) == 1
