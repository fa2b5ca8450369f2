"""Semantic version parsing and manipulation.

Versions follow the Semantic Versioning 2.0.0 grammar:
``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``. Only the numeric core takes
part in bumping; pre-release and build metadata are parsed so that valid
inputs are accepted, and are dropped when a new release version is derived.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from shipper_release.exceptions import ParseError

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_SEMVER_RE = re.compile(
    r"""
    ^
    (?P<major>0|[1-9]\d*)
    \.(?P<minor>0|[1-9]\d*)
    \.(?P<patch>0|[1-9]\d*)
    (?:-(?P<prerelease>
        (?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)
        (?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*
    ))?
    (?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?
    $
    """,
    re.VERBOSE | re.ASCII,
)


class BumpType(str, Enum):
    """Which version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    def __str__(self) -> str:
        return self.value


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-separated pre-release identifiers, if any
        build: Build metadata, if any (ignored for ordering)
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ParseError(f"Version components must be non-negative: {self!r}")

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a version string.

        Surrounding whitespace is tolerated.

        Raises:
            ParseError: If the string is not a valid semantic version
        """
        match = _SEMVER_RE.match(value.strip())
        if match is None:
            raise ParseError(
                f"Invalid version {value.strip()!r}: expected MAJOR.MINOR.PATCH "
                "(e.g. 1.2.3)"
            )
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease"),
            build=match.group("build"),
        )

    def bump(self, bump_type: BumpType, *, reset: bool = False) -> Version:
        """Return the next version.

        Only the targeted component is incremented. With ``reset`` the
        lower components are zeroed as well (1.2.3 -> 2.0.0 for a major
        bump instead of 2.2.3).
        """
        if bump_type is BumpType.MAJOR:
            if reset:
                return Version(self.major + 1, 0, 0)
            return Version(self.major + 1, self.minor, self.patch)
        if bump_type is BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0 if reset else self.patch)
        if bump_type is BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Unknown bump type: {bump_type!r}")

    def _precedence_key(self) -> tuple:
        # A release ranks above any of its pre-releases.
        if self.prerelease is None:
            return (self.major, self.minor, self.patch, 1, ())
        identifiers = tuple(
            (0, int(part)) if part.isdigit() else (1, part)
            for part in self.prerelease.split(".")
        )
        return (self.major, self.minor, self.patch, 0, identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() == other._precedence_key()

    def __hash__(self) -> int:
        return hash(self._precedence_key())

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version


def parse_version(value: str) -> Version:
    """Parse a version string. Shorthand for ``Version.parse``."""
    return Version.parse(value)
