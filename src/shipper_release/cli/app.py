"""Command-line interface for shipper-release."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from shipper_release import __version__

app = typer.Typer(
    name="shipper-release",
    help="Release orchestrator and changelog management program for shipper.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

PathOption = Annotated[
    str | None,
    typer.Option("--path", "-C", help="Repository root (defaults to the current directory)."),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"shipper-release {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    _configure_logging(verbose)


@app.command()
def generate(
    major: Annotated[bool, typer.Option("--major", help="Bump the major version.")] = False,
    minor: Annotated[bool, typer.Option("--minor", help="Bump the minor version.")] = False,
    patch: Annotated[bool, typer.Option("--patch", "-p", help="Bump the patch version.")] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Show the new section without writing files.")
    ] = False,
    path: PathOption = None,
) -> None:
    """Generate a CHANGELOG entry from the git commit log."""
    from shipper_release.cli.commands.generate import run_generate

    run_generate(path, major, minor, patch, dry_run, console, err_console)


@app.command()
def push(path: PathOption = None) -> None:
    """Create and push a new release to GitHub."""
    from shipper_release.cli.commands.push import run_push

    run_push(path, console, err_console)
