"""Publishing a prepared release.

Once the changelog has been generated (and possibly edited by hand), the
release is committed with the changelog section as message body, tagged
with the bare version and pushed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shipper_release.core.changelog import extract_section, has_section
from shipper_release.exceptions import StructuralError
from shipper_release.project import read_changelog, read_version_file

if TYPE_CHECKING:
    from pathlib import Path

    from shipper_release.config.models import ShipperReleaseConfig
    from shipper_release.core.version import Version
    from shipper_release.vcs.base import VCSGateway

logger = logging.getLogger(__name__)


def get_release_notes(project_path: Path, config: ShipperReleaseConfig) -> tuple[Version, str]:
    """Read the current version and its changelog section.

    Returns:
        The version and the verbatim section body, which may be empty

    Raises:
        StructuralError: If the changelog has no section for the version
    """
    version = read_version_file(project_path / config.version_path)
    changelog_path = project_path / config.changelog_path
    changelog = read_changelog(changelog_path)
    if not has_section(changelog, version):
        raise StructuralError(
            f"No changelog section for {version} in {changelog_path}. "
            "Run `generate` first."
        )
    notes = extract_section(changelog, version, config.compare_base_url)
    if not notes.strip():
        logger.warning("Changelog section for %s is empty", version)
    return version, notes


def format_release_message(version: Version | str, notes: str, subject_template: str) -> str:
    """Build the release commit message: subject, blank line, notes."""
    subject = subject_template.format(version=version)
    return f"{subject}\n\n{notes}"


def publish_release(
    repo: VCSGateway,
    version: Version,
    notes: str,
    config: ShipperReleaseConfig,
) -> str:
    """Commit, tag and push a release.

    Each step must succeed before the next one starts; nothing is undone
    when a later step fails.

    Returns:
        The commit message used

    Raises:
        VCSError: If any git command fails
    """
    message = format_release_message(version, notes, config.release.subject_template)

    repo.stage(config.changelog_path)
    repo.stage(config.version_path)
    repo.commit(message)
    logger.info("Committed release %s", version)

    repo.tag(str(version))
    logger.info("Tagged %s", version)

    if config.release.push:
        repo.push()
        logger.info("Pushed release commit")
    if config.release.push_tags:
        repo.push_tags()
        logger.info("Pushed tags")
    return message
