"""Changelog document manipulation.

The changelog is treated as opaque Markdown except for three kinds of
marker lines, recognised by exact prefix::

    [Unreleased]: https://github.com/<org>/<repo>/compare/<version>...HEAD
    # [<version>] - <YYYY-MM-DD>
    [<version>]: https://github.com/<org>/<repo>/compare/<old>...<version>

A release section is everything strictly between a version's header and
its closing comparison link. Lines outside the edited region are passed
through untouched, so a rewrite only ever changes the Unreleased link and
adds the new section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from shipper_release.core.version import Version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangelogMarkers:
    """Builds and recognises the marker lines for one repository.

    Args:
        compare_base_url: GitHub compare URL without trailing slash,
            e.g. ``https://github.com/org/repo/compare``
    """

    compare_base_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "compare_base_url", self.compare_base_url.rstrip("/"))

    @property
    def unreleased_prefix(self) -> str:
        return f"[Unreleased]: {self.compare_base_url}/"

    def unreleased_link(self, version: Version | str) -> str:
        return f"[Unreleased]: {self.compare_base_url}/{version}...HEAD"

    @staticmethod
    def header_prefix(version: Version | str) -> str:
        return f"# [{version}] - "

    def header(self, version: Version | str, date: str) -> str:
        return f"{self.header_prefix(version)}{date}"

    def closing_link_prefix(self, version: Version | str) -> str:
        return f"[{version}]: {self.compare_base_url}/"

    def closing_link(self, previous: Version | str, version: Version | str) -> str:
        return f"[{version}]: {self.compare_base_url}/{previous}...{version}"


def split_lines(text: str) -> list[str]:
    """Split changelog text into lines.

    Splits on ``\\n`` only, so ``join_lines(split_lines(text)) == text``
    for any input, including a trailing newline or CRLF line endings.
    """
    return text.split("\n")


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def iter_lines(text: str) -> Iterator[str]:
    """Iterate over the lines of ``text`` for reading.

    Only ``\\n`` ends a line. One trailing ``\\r`` is dropped from each line
    and a final newline does not produce an extra empty line.
    """
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece.removesuffix("\r")


def find_unreleased_marker(lines: Sequence[str], compare_base_url: str) -> int | None:
    """Return the index of the first Unreleased link line, if any."""
    prefix = ChangelogMarkers(compare_base_url).unreleased_prefix
    for index, line in enumerate(lines):
        if line.startswith(prefix):
            return index
    return None


def render_release_section(
    new_version: Version | str,
    previous_version: Version | str,
    entries: Iterable[str],
    date: str,
    compare_base_url: str,
) -> list[str]:
    """Render the block that replaces the Unreleased link line.

    The block starts with the new Unreleased link, followed by two blank
    lines, the dated section header, a blank line, one ``- <entry>`` line
    per entry, a blank line and the closing comparison link.
    """
    markers = ChangelogMarkers(compare_base_url)
    block = [
        markers.unreleased_link(new_version),
        "",
        "",
        markers.header(new_version, date),
        "",
    ]
    block.extend(f"- {entry}" for entry in entries)
    block.append("")
    block.append(markers.closing_link(previous_version, new_version))
    return block


def insert_release(
    document: Sequence[str],
    new_version: Version | str,
    previous_version: Version | str,
    entries: Iterable[str],
    date: str,
    compare_base_url: str,
) -> list[str]:
    """Splice a new release section into a changelog.

    The first Unreleased link line is replaced by the rendered section
    (see ``render_release_section``); every other line is kept as is.
    If the document has no Unreleased link, it is returned unchanged and
    callers should treat that as an error.

    Args:
        document: Changelog lines
        new_version: Version being released
        previous_version: Version the comparison link starts from
        entries: Changelog entries, one per line, in order
        date: Release date in ``YYYY-MM-DD`` form
        compare_base_url: Repository compare URL

    Returns:
        New list of changelog lines
    """
    index = find_unreleased_marker(document, compare_base_url)
    if index is None:
        logger.debug("No Unreleased link found, changelog left unchanged")
        return list(document)

    section = render_release_section(
        new_version, previous_version, entries, date, compare_base_url
    )
    logger.debug("Replacing Unreleased link on line %d with %d lines", index + 1, len(section))
    return [*document[:index], *section, *document[index + 1 :]]


def extract_section(text: str, version: Version | str, compare_base_url: str) -> str:
    """Return the verbatim body of a version's changelog section.

    Collects the lines between ``# [<version>] - `` (exclusive) and the
    first following ``[<version>]: <compare_base_url>/`` link (exclusive),
    each terminated by a newline.

    Returns:
        The section body, or an empty string if the version has no header
    """
    markers = ChangelogMarkers(compare_base_url)
    start_marker = markers.header_prefix(version)
    end_marker = markers.closing_link_prefix(version)

    body: list[str] = []
    in_section = False
    for line in iter_lines(text):
        if line.startswith(start_marker):
            in_section = True
            continue
        if line.startswith(end_marker):
            break
        if in_section:
            body.append(f"{line}\n")

    if not in_section:
        logger.debug("No section header found for %s", version)
    return "".join(body)


def has_section(text: str, version: Version | str) -> bool:
    """Check whether the changelog has a section header for ``version``."""
    prefix = ChangelogMarkers.header_prefix(version)
    return any(line.startswith(prefix) for line in iter_lines(text))
