"""Allow running as ``python -m shipper_release``."""

from __future__ import annotations

from shipper_release.cli import app

if __name__ == "__main__":
    app()
