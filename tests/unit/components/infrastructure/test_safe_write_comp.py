"""Unit tests for atomic file writes."""

import os
from pathlib import Path

import pytest

from songtags.components.infrastructure.safe_write_comp import write_data_to_file


class TestWriteDataToFile:
    """Test write_data_to_file()."""

    @pytest.mark.unit
    def test_writes_text_as_utf8(self, tmp_path: Path) -> None:
        """Strings are encoded before writing."""
        target = tmp_path / "out.json"
        result = write_data_to_file(target, '{"Artist":["Björk"]}')

        assert result.success is True
        assert result.error is None
        assert target.read_text(encoding="utf-8") == '{"Artist":["Björk"]}'

    @pytest.mark.unit
    def test_replaces_existing_content(self, tmp_path: Path) -> None:
        """The old content is fully replaced."""
        target = tmp_path / "out.bin"
        target.write_bytes(b"old content that is longer")

        assert write_data_to_file(str(target), b"new").success is True
        assert target.read_bytes() == b"new"

    @pytest.mark.unit
    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        """Only the destination remains after a successful write."""
        write_data_to_file(tmp_path / "a.txt", "x")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]

    @pytest.mark.unit
    def test_missing_directory_fails_without_raising(self, tmp_path: Path) -> None:
        """Errors are reported in the result."""
        result = write_data_to_file(tmp_path / "missing" / "a.txt", "x")

        assert result.success is False
        assert result.error

    @pytest.mark.unit
    def test_failed_replace_keeps_destination_and_cleans_up(self, tmp_path: Path, monkeypatch) -> None:
        """A failing rename leaves the old file and removes the temp file."""
        target = tmp_path / "a.txt"
        target.write_text("original")

        def failing_replace(src, dst):
            raise OSError("rename failed")

        monkeypatch.setattr(os, "replace", failing_replace)
        result = write_data_to_file(target, "new")

        assert result.success is False
        assert "rename failed" in (result.error or "")
        assert target.read_text() == "original"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]
