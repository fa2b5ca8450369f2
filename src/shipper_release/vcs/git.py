"""Git implementation of the VCS gateway.

Commands are run synchronously with ``subprocess``; a non-zero exit or a
missing ``git`` executable is reported as ``VCSError``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from shipper_release.exceptions import VCSError

logger = logging.getLogger(__name__)


class GitRepository:
    """A git working tree.

    Args:
        path: Repository root (defaults to the current directory)
        git: Name or path of the git executable
    """

    def __init__(self, path: Path | None = None, *, git: str = "git") -> None:
        self.path = (path or Path.cwd()).resolve()
        self.git = git

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            VCSError: If git is not installed or the command fails
        """
        command = [self.git, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise VCSError(
                f"Unable to execute {self.git!r}. Is git installed and on PATH?",
                command=command,
            ) from e
        except subprocess.CalledProcessError as e:
            raise VCSError(
                f"`{' '.join(command)}` failed with exit code {e.returncode}",
                command=command,
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e

        if result.stderr:
            logger.debug("%s", result.stderr.strip())
        return result.stdout

    def log(self, revision_range: str) -> str:
        return self._run("log", "--oneline", "--reverse", revision_range)

    def stage(self, path: Path | str) -> None:
        self._run("add", str(path))

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def tag(self, name: str) -> None:
        self._run("tag", name)

    def push(self) -> None:
        self._run("push")

    def push_tags(self) -> None:
        self._run("push", "--tags")
