"""Configuration management for shipper-release."""

from __future__ import annotations

from shipper_release.config.loader import load_config
from shipper_release.config.models import (
    ChangelogConfig,
    ReleaseConfig,
    RepositoryConfig,
    ShipperReleaseConfig,
    VersionConfig,
)

__all__ = [
    "ChangelogConfig",
    "ReleaseConfig",
    "RepositoryConfig",
    "ShipperReleaseConfig",
    "VersionConfig",
    "load_config",
]
