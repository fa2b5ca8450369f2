"""Implementation of the 'generate' command.

The generate command bumps the version file and adds a changelog section
built from the commits made since the last release.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.text import Text

from shipper_release.cli.commands import exit_with_error
from shipper_release.config import load_config
from shipper_release.core.generator import generate_release, prepare_release
from shipper_release.core.version import BumpType
from shipper_release.exceptions import ShipperReleaseError, UsageError
from shipper_release.project import check_running_directory
from shipper_release.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console


def resolve_bump_type(major: bool, minor: bool, patch: bool) -> BumpType:
    """Turn the version flags into a bump type.

    Raises:
        UsageError: If no flag or more than one flag is set
    """
    flags = {BumpType.MAJOR: major, BumpType.MINOR: minor, BumpType.PATCH: patch}
    selected = [bump_type for bump_type, flag in flags.items() if flag]
    if not selected:
        raise UsageError(
            "At least one version flag should be specified. "
            "Valid options are: --major, --minor, --patch"
        )
    if len(selected) > 1:
        raise UsageError("Only one version flag should be specified.")
    return selected[0]


def run_generate(
    path: str | None,
    major: bool,
    minor: bool,
    patch: bool,
    dry_run: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the generate command.

    Args:
        path: Optional path to the repository root
        major: Bump the major version
        minor: Bump the minor version
        patch: Bump the patch version
        dry_run: Only show what would change
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
        check_running_directory(project_path, config.changelog_path, config.version_path)
        bump_type = resolve_bump_type(major, minor, patch)
    except ShipperReleaseError as e:
        exit_with_error(err_console, e)

    repo = GitRepository(project_path)

    try:
        if dry_run:
            result = prepare_release(repo, project_path, bump_type, config)
        else:
            result = generate_release(repo, project_path, bump_type, config)
    except ShipperReleaseError as e:
        exit_with_error(err_console, e)

    console.print(f"New version is [green]{result.new_version}[/]")
    if not result.entries:
        console.print(f"[yellow]No commits found since {result.previous_version}.[/]")

    if dry_run:
        console.print(
            Panel(
                Text(result.section),
                title=f"[yellow]Would replace the Unreleased link in {config.changelog_path}[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run without [cyan]--dry-run[/] to apply these changes.[/]")
        return

    console.print("  [green]✓[/] Changelog entries added.")
    console.print("  [green]✓[/] Version text updated.")
    console.print(
        "Done! Modify the changelog items as necessary and run [cyan]shipper-release push[/]."
    )
