"""shipper-release: changelog generation and release publishing for shipper."""

from __future__ import annotations

__version__ = "0.1.0"
