"""Version control interface used by the release workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class VCSGateway(Protocol):
    """The version control operations a release needs.

    Every method blocks until the underlying command has finished and
    raises ``VCSError`` if it did not succeed.
    """

    def log(self, revision_range: str) -> str:
        """Return ``--oneline`` log output for ``revision_range``, oldest first."""
        ...

    def stage(self, path: Path | str) -> None: ...

    def commit(self, message: str) -> None: ...

    def tag(self, name: str) -> None: ...

    def push(self) -> None: ...

    def push_tags(self) -> None: ...
