"""Changelog generation for a new release.

Derives the next version from the version file, harvests the commits
made since the previous release and splices them into the changelog as
a new dated section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from shipper_release.core.changelog import (
    find_unreleased_marker,
    insert_release,
    join_lines,
    render_release_section,
    split_lines,
)
from shipper_release.core.commits import extract_messages
from shipper_release.exceptions import StructuralError
from shipper_release.project import (
    read_changelog,
    read_version_file,
    write_changelog,
    write_version_file,
)

if TYPE_CHECKING:
    from pathlib import Path

    from shipper_release.config.models import ShipperReleaseConfig
    from shipper_release.core.version import BumpType, Version
    from shipper_release.vcs.base import VCSGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of preparing a release.

    Attributes:
        previous_version: Version read from the version file
        new_version: Version being released
        entries: Changelog entries, oldest commit first
        section: The block that replaced the Unreleased link
        changelog: Full changelog text after the rewrite
    """

    previous_version: Version
    new_version: Version
    entries: tuple[str, ...]
    section: str
    changelog: str


def today_iso8601() -> str:
    return date.today().isoformat()


def prepare_release(
    repo: VCSGateway,
    project_path: Path,
    bump_type: BumpType,
    config: ShipperReleaseConfig,
    *,
    release_date: str | None = None,
) -> GenerateResult:
    """Compute the new version and changelog without writing anything.

    Raises:
        ProjectError: If the version file or changelog cannot be read
        ParseError: If the version file does not hold a valid version
        VCSError: If the commit log cannot be retrieved
        StructuralError: If the changelog has no Unreleased link
    """
    # The version file must be read before querying the log that depends on it
    previous_version = read_version_file(project_path / config.version_path)
    raw_log = repo.log(f"{previous_version}...HEAD")
    entries = tuple(extract_messages(raw_log))
    logger.debug("Found %d commits since %s", len(entries), previous_version)

    new_version = previous_version.bump(bump_type, reset=config.version.reset_on_bump)
    release_date = release_date or today_iso8601()

    changelog_path = project_path / config.changelog_path
    lines = split_lines(read_changelog(changelog_path))
    if find_unreleased_marker(lines, config.compare_base_url) is None:
        raise StructuralError(
            f"No '[Unreleased]: {config.compare_base_url}/...' link found in "
            f"{changelog_path}; refusing to write an unchanged changelog."
        )

    updated = insert_release(
        lines,
        new_version,
        previous_version,
        entries,
        release_date,
        config.compare_base_url,
    )
    section = render_release_section(
        new_version, previous_version, entries, release_date, config.compare_base_url
    )
    return GenerateResult(
        previous_version=previous_version,
        new_version=new_version,
        entries=entries,
        section=join_lines(section),
        changelog=join_lines(updated),
    )


def generate_release(
    repo: VCSGateway,
    project_path: Path,
    bump_type: BumpType,
    config: ShipperReleaseConfig,
    *,
    release_date: str | None = None,
) -> GenerateResult:
    """Rewrite the changelog and version file for the next release.

    The changelog is written first and the version file only once that
    succeeded. A failure of the second write is not rolled back.
    """
    result = prepare_release(repo, project_path, bump_type, config, release_date=release_date)

    write_changelog(project_path / config.changelog_path, result.changelog)
    logger.info("Changelog entries added")

    write_version_file(project_path / config.version_path, result.new_version)
    logger.info("Version text updated to %s", result.new_version)
    return result
