"""
cmdig CLI - interactive dashboard picker.

The flow behind bare ``cmdig -p <project>``: refresh the cache if needed,
load the merged dashboard list, prompt, resolve the URL and open it.
"""

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cmdig.cli.errors import (
    ExitCode,
    handle_config_error,
    handle_dig_error,
    print_missing_project_error,
)
from cmdig.core.config import load_config
from cmdig.core.dashboards import DigError
from cmdig.core.dashboards.selector import select_entry
from cmdig.core.services.dig import DigService

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for cmdig.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def require_project(project: str | None) -> str:
    """
    Return the project id, or exit cleanly when it was not given.

    A missing -p is a usage notice, not a failure: exit code 0.
    """
    if not project:
        print_missing_project_error()
        raise typer.Exit(ExitCode.SUCCESS)
    return project


def prepare_service(project: str, update: bool) -> DigService:
    """
    Build the service and make sure the project's cache exists.

    Raises:
        typer.Exit: On configuration or cache errors
    """
    try:
        config = load_config()
    except ValidationError as e:
        handle_config_error(e)

    service = DigService(config, project)
    try:
        if service.needs_refresh(update):
            if update:
                err_console.print("[dim]Updating dashboards from gcloud...[/dim]")
            else:
                err_console.print("[dim]Fetching dashboards from gcloud...[/dim]")
            service.prepare_cache(force=True)
    except DigError as e:
        handle_dig_error(e, project)
    return service


def dig_command(
    project: str | None,
    update: bool = False,
    print_url: bool = False,
) -> None:
    """
    Pick a dashboard interactively and open it.

    Exits with the opener's exit code, 0 on cancel, or 1 on errors.
    """
    project_id = require_project(project)
    service = prepare_service(project_id, update)

    try:
        entries = service.dashboards()
    except DigError as e:
        handle_dig_error(e, project_id)

    entry = select_entry(entries)
    if entry is None:
        logger.debug("Selection cancelled")
        raise typer.Exit(ExitCode.SUCCESS)

    url = service.url_for(entry)
    if print_url:
        console.print(url, soft_wrap=True, markup=False, highlight=False)
        raise typer.Exit(ExitCode.SUCCESS)

    err_console.print(url, soft_wrap=True, markup=False, highlight=False)
    status = service.open(entry)
    if not status.started:
        err_console.print(
            f"[yellow]Warning:[/yellow] Could not run '{escape(service.config.opener_command)}'"
            f" ({escape(status.error or 'not found')})."
        )
        err_console.print(f"Open this URL in your browser: {escape(url)}", soft_wrap=True)
    raise typer.Exit(status.returncode)
