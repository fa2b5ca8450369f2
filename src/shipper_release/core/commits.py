"""Commit log parsing.

Turns the output of ``git log --oneline`` into commit messages suitable
for changelog entries. Each line has the form ``<hash> <message>``; the
hash is discarded and the message trimmed. Lines that do not have that
form are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

# Abbreviated hashes are at least 4 hex digits (git's minimum core.abbrev);
# full SHA-256 object names are 64.
_ONELINE_RE = re.compile(r"^(?P<sha>[0-9a-fA-F]{4,64})\s+(?P<message>\S.*)$")


@dataclass(frozen=True)
class Commit:
    """A commit harvested from the log, reduced to its message."""

    message: str


def parse_git_log_line(line: str) -> Commit | None:
    """Parse a single ``--oneline`` log line.

    Returns:
        The commit, or None if the line is not of the form ``<hash> <message>``
    """
    match = _ONELINE_RE.match(line.strip())
    if match is None:
        return None
    return Commit(message=match.group("message").strip())


def parse_git_log(raw_log: str) -> Iterator[Commit]:
    """Lazily parse a ``--oneline`` log, preserving line order.

    Only ``\\n`` separates entries; other control characters inside a
    subject stay part of its message.
    """
    for line in raw_log.split("\n"):
        commit = parse_git_log_line(line)
        if commit is not None:
            yield commit


class CommitMessages:
    """Restartable view of the messages in a raw log.

    Iterating parses the log afresh each time, so the same instance can be
    consumed more than once.
    """

    def __init__(self, raw_log: str) -> None:
        self._raw_log = raw_log

    def __iter__(self) -> Iterator[str]:
        return (commit.message for commit in parse_git_log(self._raw_log))

    def __repr__(self) -> str:
        return f"CommitMessages({list(self)!r})"


def extract_messages(raw_log: str) -> CommitMessages:
    """Extract trimmed commit messages from a ``--oneline`` log.

    Args:
        raw_log: Output of ``git log --oneline --reverse``

    Returns:
        A lazy, restartable sequence of messages in log order
    """
    return CommitMessages(raw_log)
