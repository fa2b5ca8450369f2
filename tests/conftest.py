"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipper_release.config.models import RepositoryConfig, ShipperReleaseConfig
from shipper_release.exceptions import VCSError

COMPARE_URL = "https://github.com/org/repo/compare"

SAMPLE_CHANGELOG = """\
# Changelog

All notable changes to this project will be documented in this file.

[Unreleased]: https://github.com/org/repo/compare/1.2.3...HEAD


# [1.2.3] - 2023-12-01

- Older fix

[1.2.3]: https://github.com/org/repo/compare/1.2.2...1.2.3
"""

SAMPLE_LOG = "abc1234 Fix bug\ndef4567 Add feature\n"


class FakeGitRepository:
    """In-memory VCS gateway recording the calls made to it."""

    def __init__(self, log_output: str = "", fail_on: str | None = None) -> None:
        self.log_output = log_output
        self.fail_on = fail_on
        self.calls: list[tuple[str, ...]] = []

    def _record(self, *call: str) -> None:
        if self.fail_on == call[0]:
            raise VCSError(f"git {call[0]} failed", returncode=1, stderr="fatal: boom")
        self.calls.append(call)

    def log(self, revision_range: str) -> str:
        self._record("log", revision_range)
        return self.log_output

    def stage(self, path: Path | str) -> None:
        self._record("stage", str(path))

    def commit(self, message: str) -> None:
        self._record("commit", message)

    def tag(self, name: str) -> None:
        self._record("tag", name)

    def push(self) -> None:
        self._record("push")

    def push_tags(self) -> None:
        self._record("push_tags")


@pytest.fixture
def config() -> ShipperReleaseConfig:
    """Configuration pointing at github.com/org/repo."""
    return ShipperReleaseConfig(repository=RepositoryConfig(owner="org", repo="repo"))


@pytest.fixture
def fake_repo() -> FakeGitRepository:
    return FakeGitRepository(log_output=SAMPLE_LOG)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A repository root with .git/, CHANGELOG.md and version.txt."""
    (tmp_path / ".git").mkdir()
    (tmp_path / "CHANGELOG.md").write_text(SAMPLE_CHANGELOG, encoding="utf-8")
    (tmp_path / "version.txt").write_text("1.2.3\n", encoding="utf-8")
    (tmp_path / ".shipper-release.toml").write_text(
        '[repository]\nowner = "org"\nrepo = "repo"\n', encoding="utf-8"
    )
    return tmp_path
