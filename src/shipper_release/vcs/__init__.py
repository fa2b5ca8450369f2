"""Version control integration."""

from __future__ import annotations

from shipper_release.vcs.base import VCSGateway
from shipper_release.vcs.git import GitRepository

__all__ = ["GitRepository", "VCSGateway"]
