"""
Standardized error handling and exit codes for the cmdig CLI.

Components raise typed exceptions; this module turns them into
actionable messages and exit codes in one place.
"""

from enum import IntEnum
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cmdig.core.dashboards.errors import CacheError, CatalogError, DigError, RefreshError

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for cmdig."""

    SUCCESS = 0
    """Operation completed, or nothing to do (missing -p, cancelled prompt)."""

    GENERAL_ERROR = 1
    """Filesystem, cache or gcloud failure."""

    USER_ERROR = 2
    """Invalid configuration file or environment value."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Dashboard cache is malformed",
        ...     reason="entry 0: Field required",
        ...     solution="cmdig -p my-project -u",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}")


def print_missing_project_error() -> None:
    """Print the notice shown when -p is not given."""
    console.print("require flag '-p'. project id must be set")


def print_refresh_error(error: RefreshError, project_id: str) -> None:
    if error.status.started:
        print_error(
            "Failed to list dashboards",
            reason=str(error),
            solution=f"gcloud monitoring dashboards list --project {project_id}  # check access",
        )
    else:
        print_error(
            f"Required tool not found: {error.command}",
            reason=str(error),
            solution="Install the Google Cloud SDK or set CMDIG_GCLOUD",
        )


def handle_dig_error(error: DigError, project_id: str) -> NoReturn:
    """
    Report a DigError and exit with GENERAL_ERROR.

    Raises:
        typer.Exit: Always
    """
    if isinstance(error, RefreshError):
        print_refresh_error(error, project_id)
    elif isinstance(error, CatalogError):
        print_error(
            "Could not load dashboards",
            reason=str(error),
            solution=f"cmdig -p {project_id} -u  # rebuild the cache",
        )
    elif isinstance(error, CacheError):
        print_error(
            "Could not access the dashboard cache",
            reason=str(error),
            solution="Check permissions or set CMDIG_BASE_DIR",
        )
    else:
        print_error(str(error))
    raise typer.Exit(ExitCode.GENERAL_ERROR)


def handle_config_error(error: ValidationError) -> NoReturn:
    """
    Report an invalid configuration and exit with USER_ERROR.

    Raises:
        typer.Exit: Always
    """
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    )
    print_error(
        "Invalid configuration",
        reason=details,
        solution="Fix ~/.config/cmdig/config.json or the CMDIG_* environment variables",
    )
    raise typer.Exit(ExitCode.USER_ERROR)


__all__ = [
    "ExitCode",
    "handle_config_error",
    "handle_dig_error",
    "print_error",
    "print_missing_project_error",
    "print_refresh_error",
]
