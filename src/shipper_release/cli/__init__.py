"""Command-line interface for shipper-release."""

from __future__ import annotations

from shipper_release.cli.app import app

__all__ = ["app"]
