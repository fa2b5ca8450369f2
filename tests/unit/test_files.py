"""Tests for version file, changelog file and preflight handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipper_release.core.version import Version
from shipper_release.exceptions import ParseError, PreflightError, ProjectError
from shipper_release.project import (
    check_running_directory,
    read_changelog,
    read_version_file,
    write_changelog,
    write_version_file,
)

CHANGELOG = Path("CHANGELOG.md")
VERSION_FILE = Path("version.txt")


class TestCheckRunningDirectory:
    """Tests for check_running_directory()."""

    def test_valid_directory(self, project_dir: Path):
        check_running_directory(project_dir, CHANGELOG, VERSION_FILE)

    @pytest.mark.parametrize("missing", [".git", "CHANGELOG.md", "version.txt"])
    def test_missing_file(self, project_dir: Path, missing: str):
        """Each of the three markers is required."""
        target = project_dir / missing
        if target.is_dir():
            target.rmdir()
        else:
            target.unlink()

        with pytest.raises(PreflightError, match="Unable to find repository files"):
            check_running_directory(project_dir, CHANGELOG, VERSION_FILE)

    def test_git_must_be_directory(self, tmp_path: Path):
        """A .git file (worktree pointer) is not accepted."""
        (tmp_path / ".git").write_text("gitdir: elsewhere\n")
        (tmp_path / "CHANGELOG.md").write_text("")
        (tmp_path / "version.txt").write_text("1.0.0")

        with pytest.raises(PreflightError, match=r"\.git/"):
            check_running_directory(tmp_path, CHANGELOG, VERSION_FILE)

    def test_preflight_is_not_fatal(self, tmp_path: Path):
        with pytest.raises(PreflightError) as exc_info:
            check_running_directory(tmp_path, CHANGELOG, VERSION_FILE)

        assert exc_info.value.is_fatal is False


class TestVersionFile:
    """Tests for read_version_file()/write_version_file()."""

    def test_read(self, project_dir: Path):
        assert read_version_file(project_dir / "version.txt") == Version(1, 2, 3)

    def test_read_first_line_only(self, tmp_path: Path):
        path = tmp_path / "version.txt"
        path.write_text("  2.0.1  \nsomething else\n")

        assert read_version_file(path) == Version(2, 0, 1)

    def test_read_malformed(self, tmp_path: Path):
        path = tmp_path / "version.txt"
        path.write_text("one point two\n")

        with pytest.raises(ParseError):
            read_version_file(path)

    def test_read_missing(self, tmp_path: Path):
        with pytest.raises(ProjectError, match="Unable to read version file"):
            read_version_file(tmp_path / "version.txt")

    def test_write_keeps_trailing_newline(self, project_dir: Path):
        path = project_dir / "version.txt"
        write_version_file(path, Version(1, 3, 0))

        assert path.read_text() == "1.3.0\n"

    def test_write_without_trailing_newline(self, tmp_path: Path):
        path = tmp_path / "version.txt"
        path.write_text("1.2.3")
        write_version_file(path, Version(1, 2, 4))

        assert path.read_text() == "1.2.4"

    def test_write_failure(self, tmp_path: Path):
        with pytest.raises(ProjectError):
            write_version_file(tmp_path / "missing" / "version.txt", Version(1, 0, 0))


class TestChangelogFile:
    """Tests for read_changelog()/write_changelog()."""

    def test_round_trip_preserves_bytes(self, tmp_path: Path):
        """CRLF endings and trailing newlines survive a read/write cycle."""
        path = tmp_path / "CHANGELOG.md"
        raw = b"# Changelog\r\n\r\n- \xc3\xa9l\xc3\xa8ve\r\n"
        path.write_bytes(raw)

        write_changelog(path, read_changelog(path))

        assert path.read_bytes() == raw

    def test_read_missing(self, tmp_path: Path):
        with pytest.raises(ProjectError, match="Failed to read the changelog"):
            read_changelog(tmp_path / "CHANGELOG.md")

    def test_write_failure(self, tmp_path: Path):
        with pytest.raises(ProjectError, match="Failed to write the new changelog"):
            write_changelog(tmp_path / "missing" / "CHANGELOG.md", "x")
