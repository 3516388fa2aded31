"""
cmdig CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import sys

import typer
from rich.console import Console

from cmdig import __version__
from cmdig.cli import dashboards
from cmdig.cli.argv import preprocess_argv
from cmdig.cli.dig import dig_command, setup_logging
from cmdig.core.config.env import load_layered_env

app = typer.Typer(
    name="cmdig",
    help="Pick a Cloud Monitoring dashboard and open it in the browser",
    no_args_is_help=False,
    invoke_without_command=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
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
        help="Update the dashboard list from gcloud before prompting",
    ),
    print_url: bool = typer.Option(
        False,
        "--print-url",
        help="Print the selected dashboard URL instead of opening it",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Fuzzy-pick a Cloud Monitoring dashboard and open it.

    Project dashboards are listed with gcloud and cached under
    ~/.cloudmonitoring_dig/<project>/cache.json; built-in resource
    dashboards (VM Instances, Cloud SQL, GKE, ...) are always offered.

    Examples:
        cmdig -p my-project          # Pick and open a dashboard
        cmdig -p my-project -u       # Refresh the cached list first
        cmdig list -p my-project     # Show all dashboards
    """
    load_layered_env()
    setup_logging(debug)

    ctx.obj = {"debug": debug, "project": project, "update": update}

    if ctx.invoked_subcommand is not None:
        return

    dig_command(project=project, update=update, print_url=print_url)


app.command(name="list")(dashboards.list_dashboards)
app.command(name="url")(dashboards.url)


@app.command()
def version() -> None:
    """Show cmdig version and exit."""
    console.print(f"cmdig version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """
    Main CLI entry point.

    The argv preprocessor normalizes common patterns before Typer
    parses them (e.g. ``cmdig --version``, ``cmdig help list``).
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app()


__all__ = ["app", "cli_main"]
