"""Implementation of the 'push' command.

The push command commits the generated release, tags it and pushes
both the commit and the tag.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.panel import Panel

from shipper_release.cli.commands import exit_with_error
from shipper_release.config import load_config
from shipper_release.core.release import get_release_notes, publish_release
from shipper_release.exceptions import ShipperReleaseError
from shipper_release.project import check_running_directory
from shipper_release.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console


def run_push(path: str | None, console: Console, err_console: Console) -> None:
    """Run the push command.

    Args:
        path: Optional path to the repository root
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
        check_running_directory(project_path, config.changelog_path, config.version_path)
        version, notes = get_release_notes(project_path, config)
    except ShipperReleaseError as e:
        exit_with_error(err_console, e)

    console.print(f"Got version: [cyan]{version}[/]")

    repo = GitRepository(project_path)
    try:
        publish_release(repo, version, notes, config)
    except ShipperReleaseError as e:
        exit_with_error(err_console, e, "Error publishing release")

    pushed = config.release.push or config.release.push_tags
    console.print(
        Panel(
            f"[green]Released {version}![/]\n\n"
            f"  • Committed {config.changelog_path} and {config.version_path}\n"
            f"  • Tagged [cyan]{version}[/]"
            + ("\n  • Pushed to the remote" if pushed else ""),
            title="[green]Release Complete[/]",
            border_style="green",
        )
    )
