"""Project file handling: version file, changelog and preflight checks."""

from __future__ import annotations

from shipper_release.project.files import (
    check_running_directory,
    read_changelog,
    read_version_file,
    write_changelog,
    write_version_file,
)

__all__ = [
    "check_running_directory",
    "read_changelog",
    "read_version_file",
    "write_changelog",
    "write_version_file",
]
