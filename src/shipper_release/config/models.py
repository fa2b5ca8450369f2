"""Configuration models.

All settings have defaults matching the shipper repository, so a project
that follows the standard layout needs no configuration at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepositoryConfig(BaseModel):
    """Where the repository is hosted, used for changelog comparison links."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field(default="https://github.com", description="Base URL of the forge")
    owner: str = Field(default="shipperstack", description="Repository owner or organisation")
    repo: str = Field(default="shipper", description="Repository name")

    @field_validator("owner", "repo")
    @classmethod
    def _validate_slug(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value:
            raise ValueError("must be a single non-empty path segment")
        return value

    @field_validator("host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value.rstrip("/")

    @property
    def compare_base_url(self) -> str:
        return f"{self.host}/{self.owner}/{self.repo}/compare"


class ChangelogConfig(BaseModel):
    """Changelog file settings."""

    model_config = ConfigDict(extra="forbid")

    path: Path = Field(default=Path("CHANGELOG.md"))


class VersionConfig(BaseModel):
    """Version file settings."""

    model_config = ConfigDict(extra="forbid")

    path: Path = Field(default=Path("version.txt"))
    reset_on_bump: bool = Field(
        default=False,
        description="Zero the lower components on a major or minor bump",
    )


class ReleaseConfig(BaseModel):
    """Release commit and publishing settings."""

    model_config = ConfigDict(extra="forbid")

    subject_template: str = Field(default="release: {version}")
    push: bool = True
    push_tags: bool = True

    @field_validator("subject_template")
    @classmethod
    def _validate_subject(cls, value: str) -> str:
        try:
            rendered = value.format(version="0.0.0")
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(f"must only use the {{version}} placeholder ({e!r})") from e
        if "0.0.0" not in rendered:
            raise ValueError("must contain the {version} placeholder")
        return value


class ShipperReleaseConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
    version: VersionConfig = Field(default_factory=VersionConfig)
    release: ReleaseConfig = Field(default_factory=ReleaseConfig)

    @property
    def compare_base_url(self) -> str:
        return self.repository.compare_base_url

    @property
    def changelog_path(self) -> Path:
        return self.changelog.path

    @property
    def version_path(self) -> Path:
        return self.version.path
