"""
Tests for output folder preparation and script writing.
"""

import os
import stat
from unittest.mock import patch

import pytest

from easypack.services.scripts import ScriptIOError, prepare, write_script


@pytest.mark.unit
class TestPrepare:
    """Tests for prepare()."""

    def test_creates_missing_folder(self, tmp_path):
        folder = tmp_path / "target" / "bin"

        assert prepare(folder) == folder
        assert folder.is_dir()
        assert list(folder.iterdir()) == []

    def test_removes_existing_content(self, tmp_path):
        """Test stale files from previous runs are removed."""
        folder = tmp_path / "bin"
        (folder / "nested").mkdir(parents=True)
        (folder / "old.sh").write_text("stale")
        (folder / "nested" / "file.txt").write_text("stale")

        prepare(folder)

        assert folder.is_dir()
        assert list(folder.iterdir()) == []

    def test_replaces_file_at_path(self, tmp_path):
        folder = tmp_path / "bin"
        folder.write_text("not a folder")

        prepare(folder)

        assert folder.is_dir()

    def test_remove_failure(self, tmp_path):
        folder = tmp_path / "bin"
        folder.mkdir()

        with patch("easypack.services.scripts.output.shutil.rmtree", side_effect=PermissionError("denied")):
            with pytest.raises(ScriptIOError, match="Failed to remove output folder") as exc_info:
                prepare(folder)

        assert exc_info.value.path == folder
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_create_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")

        with pytest.raises(ScriptIOError, match="Failed to create output folder"):
            prepare(blocker / "bin")


@pytest.mark.unit
class TestWriteScript:
    """Tests for write_script()."""

    def test_writes_content_verbatim(self, tmp_path):
        """Test line endings are not translated."""
        path = write_script(tmp_path, "start.bat", "@echo off\r\njava -jar app.jar\r\n")

        assert path == tmp_path / "start.bat"
        assert path.read_bytes() == b"@echo off\r\njava -jar app.jar\r\n"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_executable(self, tmp_path):
        path = write_script(tmp_path, "start.sh", "#!/bin/sh\n", executable=True)
        assert path.stat().st_mode & stat.S_IXUSR

    def test_write_failure(self, tmp_path):
        with pytest.raises(ScriptIOError, match="Failed to write script"):
            write_script(tmp_path / "missing", "start.sh", "#!/bin/sh\n")
