"""
cmdig CLI - non-interactive dashboard commands.

    cmdig list -p <project> [--urls]     # Show the merged dashboard list
    cmdig url -p <project> "<name>"      # Print URL(s) for a display name
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdig.cli.dig import prepare_service, require_project
from cmdig.cli.errors import ExitCode, handle_dig_error, print_error
from cmdig.core.dashboards import DigError

console = Console()


def _global(ctx: typer.Context, key: str):
    """Value of a root-level option (e.g. `cmdig -p demo list`)."""
    return (ctx.obj or {}).get(key)


def list_dashboards(
    ctx: typer.Context,
    project: str | None = typer.Option(
        None,
        "--project",
        "-p",
        help="Google Cloud project id",
    ),
    update: bool = typer.Option(
        False,
        "--update",
        "-u",
        help="Refresh the dashboard list from gcloud first",
    ),
    urls: bool = typer.Option(
        False,
        "--urls",
        help="Include the console URL of each dashboard",
    ),
) -> None:
    """
    List cached and built-in dashboards for a project.

    Examples:
        cmdig list -p my-project
        cmdig list -p my-project -u --urls
    """
    project_id = require_project(project or _global(ctx, "project"))
    service = prepare_service(project_id, update or bool(_global(ctx, "update")))
    try:
        entries = service.dashboards()
    except DigError as e:
        handle_dig_error(e, project_id)

    table = Table(title=f"Dashboards for {escape(project_id)}")
    table.add_column("Name", style="bold")
    table.add_column("Kind", style="dim")
    table.add_column("Identifier")
    if urls:
        table.add_column("URL", overflow="fold")

    for entry in entries:
        row = [escape(entry.display_name), entry.kind, escape(entry.identifier)]
        if urls:
            row.append(escape(service.url_for(entry)))
        table.add_row(*row)

    console.print(table)


def url(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Dashboard display name (case-insensitive)"),
    project: str | None = typer.Option(
        None,
        "--project",
        "-p",
        help="Google Cloud project id",
    ),
    update: bool = typer.Option(
        False,
        "--update",
        "-u",
        help="Refresh the dashboard list from gcloud first",
    ),
) -> None:
    """
    Print the console URL for a dashboard without prompting.

    Every dashboard with a matching display name is printed, one per line.

    Examples:
        cmdig url -p my-project "VM Instances"
    """
    project_id = require_project(project or _global(ctx, "project"))
    service = prepare_service(project_id, update or bool(_global(ctx, "update")))
    try:
        matches = service.find(name)
    except DigError as e:
        handle_dig_error(e, project_id)

    if not matches:
        print_error(
            f"No dashboard named '{name}'",
            solution=f"cmdig list -p {project_id}  # to see available dashboards",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    for entry in matches:
        console.print(service.url_for(entry), soft_wrap=True, markup=False, highlight=False)
