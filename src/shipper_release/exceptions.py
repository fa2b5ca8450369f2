"""Exception hierarchy for shipper-release.

All errors raised by the package derive from ``ShipperReleaseError`` so
the CLI can report them uniformly. Recoverable errors (preflight and
usage problems) are distinguished from fatal ones by ``is_fatal``.
"""

from __future__ import annotations


class ShipperReleaseError(Exception):
    """Base exception for all shipper-release errors."""

    is_fatal: bool = True


# Recoverable: reported with guidance, the run ends cleanly


class PreflightError(ShipperReleaseError):
    """The working directory does not look like the managed repository."""

    is_fatal = False


class UsageError(ShipperReleaseError):
    """Missing or conflicting command-line options."""

    is_fatal = False


# Fatal: the run is aborted


class ParseError(ShipperReleaseError):
    """A version string is not a valid semantic version."""


class ProjectError(ShipperReleaseError):
    """The changelog or version file cannot be read or written."""


class StructuralError(ShipperReleaseError):
    """The changelog lacks a marker required for the requested operation."""


class VCSError(ShipperReleaseError):
    """A version control command failed or could not be executed."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}\n{self.stderr.strip()}"
        return base


class ConfigError(ShipperReleaseError):
    """Configuration could not be loaded."""


class ConfigValidationError(ConfigError):
    """Configuration was loaded but contains invalid values."""
