"""CLI main entry point for MBTA subway info."""

import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console

from .. import __version__
from ..config import Settings
from ..core import SubwayService, TransitInfoError
from ..info import format_aggregate, format_error, format_route_names, format_trip
from .formatters import (
    format_aggregate_json,
    format_aggregate_table,
    format_routes_json,
    format_routes_table,
    format_transfers_json,
    format_transfers_table,
    format_trip_json,
    format_trip_table,
)

console = Console()
error_console = Console(stderr=True)


def _make_service(timeout: int | None) -> SubwayService:
    settings = Settings.from_env()
    if timeout:
        settings = settings.model_copy(update={"timeout": timeout})
    return SubwayService.from_settings(settings)


def _run(status: str, action: Callable[[], Any], verbose: bool) -> Any:
    """Run a service call, exiting with an error message on failure."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        with console.status(f"[bold green]{status}"):
            return action()
    except TransitInfoError as e:
        error_console.print(f"[red]Error:[/red] {format_error(e)}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


def output_options(choices: list[str], default: str) -> Callable[[Any], Any]:
    """Common --format, --timeout and --verbose options."""

    def decorator(func: Any) -> Any:
        func = click.option(
            "--verbose", "-v", is_flag=True, help="Show debug logging"
        )(func)
        func = click.option(
            "--timeout", "-t", type=int, default=None, help="Request timeout in seconds"
        )(func)
        func = click.option(
            "--format",
            "-f",
            "output_format",
            type=click.Choice(choices),
            default=default,
            help="Output format",
        )(func)
        return func

    return decorator


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """MBTA Subway Info - Routes, transfer stations and trips on the MBTA subway."""
    pass


@cli.command()
@output_options(["text", "table", "json"], "text")
def routes(output_format: str, timeout: int | None, verbose: bool) -> None:
    """List the subway routes (light rail and heavy rail).

    Examples:
        mbta-subway routes
        mbta-subway routes --format table
    """
    service = _make_service(timeout)
    subway_routes = _run("Fetching subway routes...", service.subway_routes, verbose)

    if output_format == "json":
        click.echo(format_routes_json(subway_routes))
    elif output_format == "table":
        format_routes_table(subway_routes)
    else:
        click.echo(format_route_names(subway_routes))


@cli.command()
@output_options(["text", "table", "json"], "text")
def stats(output_format: str, timeout: int | None, verbose: bool) -> None:
    """Show the routes with the most and fewest stops and the transfer stations.

    Examples:
        mbta-subway stats
        mbta-subway stats --format json
    """
    service = _make_service(timeout)
    report = _run("Building subway network...", service.aggregate, verbose)

    if output_format == "json":
        click.echo(format_aggregate_json(report))
    elif output_format == "table":
        format_aggregate_table(report)
    else:
        click.echo(format_aggregate(report))


@cli.command()
@output_options(["table", "json"], "table")
def transfers(output_format: str, timeout: int | None, verbose: bool) -> None:
    """List stops served by more than one subway route."""
    service = _make_service(timeout)
    report = _run("Building subway network...", service.aggregate, verbose)

    if output_format == "json":
        click.echo(format_transfers_json(report.transfer_stations))
    else:
        format_transfers_table(report.transfer_stations)


@cli.command()
@click.argument("start")
@click.argument("end")
@output_options(["text", "table", "json"], "text")
def trip(
    start: str, end: str, output_format: str, timeout: int | None, verbose: bool
) -> None:
    """Find a trip between two stops with the fewest line changes.

    Stops may be given by name (case-insensitive) or by ID.

    Examples:
        mbta-subway trip "Northeastern University" "Kendall/MIT"
        mbta-subway trip place-rugg place-dwnxg --format table
    """
    service = _make_service(timeout)
    found = _run(
        f"Finding trip from {start} to {end}...",
        lambda: service.plan_trip(start, end),
        verbose,
    )

    if output_format == "json":
        click.echo(format_trip_json(found))
    elif output_format == "table":
        format_trip_table(found)
    else:
        click.echo(format_trip(found))


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = Settings.from_env()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• API URL: {settings.base_url}")
    console.print(f"• API key: {settings.masked_api_key()}")
    console.print(f"• Timeout: {settings.timeout} seconds")
    console.print(f"• Max concurrent requests: {settings.max_workers}")
    console.print(f"• Max attempts: {settings.max_attempts}")


if __name__ == "__main__":
    cli()
