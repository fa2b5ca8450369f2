"""Core business logic for shipper-release.

This module contains the fundamental building blocks:
- Version parsing and bumping (Semantic Versioning 2.0.0)
- Commit log parsing
- Changelog section insertion and extraction

Release orchestration lives in ``core.generator`` and ``core.release``.
"""

from __future__ import annotations

from shipper_release.core.changelog import (
    ChangelogMarkers,
    extract_section,
    insert_release,
    render_release_section,
)
from shipper_release.core.commits import Commit, extract_messages, parse_git_log
from shipper_release.core.version import BumpType, Version, parse_version

__all__ = [
    # Version
    "BumpType",
    # Changelog
    "ChangelogMarkers",
    # Commits
    "Commit",
    "Version",
    "extract_messages",
    "extract_section",
    "insert_release",
    "parse_git_log",
    "parse_version",
    "render_release_section",
]
