"""Access to the project's release files.

The release state lives in two files at the repository root: a one-line
version file holding the last released version, and the Markdown
changelog. Both are rewritten in place and otherwise left as found
(encoding, trailing newline).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shipper_release.core.version import Version
from shipper_release.exceptions import PreflightError, ProjectError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def check_running_directory(project_path: Path, changelog: Path, version_file: Path) -> None:
    """Make sure we are at the root of the managed repository.

    Args:
        project_path: Directory the tool was started in
        changelog: Changelog path, relative to ``project_path``
        version_file: Version file path, relative to ``project_path``

    Raises:
        PreflightError: If ``.git``, the changelog or the version file is missing
    """
    missing = []
    if not (project_path / ".git").is_dir():
        missing.append(".git/")
    if not (project_path / changelog).exists():
        missing.append(str(changelog))
    if not (project_path / version_file).exists():
        missing.append(str(version_file))

    if missing:
        raise PreflightError(
            "Unable to find repository files "
            f"({', '.join(missing)}). Are you sure you're running "
            "this program in the repository root?"
        )


def read_version_file(path: Path) -> Version:
    """Read the last released version.

    Only the first line is considered; surrounding whitespace is ignored.

    Raises:
        ProjectError: If the file cannot be read
        ParseError: If the content is not a valid version
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Unable to read version file {path}: {e}") from e

    first_line = content.split("\n", 1)[0]
    version = Version.parse(first_line)
    logger.debug("Read version %s from %s", version, path)
    return version


def write_version_file(path: Path, version: Version) -> None:
    """Overwrite the version file with ``version``.

    A trailing newline is kept if the file had one.

    Raises:
        ProjectError: If the file cannot be written
    """
    try:
        keep_newline = path.is_file() and path.read_text(encoding="utf-8").endswith("\n")
        path.write_text(f"{version}\n" if keep_newline else str(version), encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Failed to write the new version to {path}: {e}") from e


def read_changelog(path: Path) -> str:
    """Read the changelog text.

    Raises:
        ProjectError: If the file cannot be read
    """
    try:
        # newline="" keeps CRLF line endings intact
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise ProjectError(f"Failed to read the changelog file {path}: {e}") from e


def write_changelog(path: Path, content: str) -> None:
    """Overwrite the changelog with ``content``.

    Raises:
        ProjectError: If the file cannot be written
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise ProjectError(f"Failed to write the new changelog contents to {path}: {e}") from e
