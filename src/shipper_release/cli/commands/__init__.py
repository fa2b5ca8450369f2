"""CLI command implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from rich.markup import escape

from shipper_release.exceptions import UsageError

if TYPE_CHECKING:
    from rich.console import Console

    from shipper_release.exceptions import ShipperReleaseError


def exit_with_error(
    err_console: Console,
    error: ShipperReleaseError,
    prefix: str = "Error",
) -> NoReturn:
    """Report an error and end the run.

    Recoverable errors are shown as guidance; usage errors exit with
    status 2, everything else with 1.
    """
    if error.is_fatal:
        err_console.print(f"[red]{prefix}:[/] {escape(str(error))}")
    else:
        err_console.print(f"[yellow]{escape(str(error))}[/]")
    raise SystemExit(2 if isinstance(error, UsageError) else 1) from error
