"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import AggregateReport, Route, TransferStation, Trip

console = Console()


def format_routes_table(routes: list[Route]) -> None:
    """Display subway routes as a rich table."""
    if not routes:
        console.print("No routes found.")
        return

    table = Table(title="Subway Routes", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Type", style="yellow")

    for route in routes:
        table.add_row(
            route.id,
            route.long_name,
            "Heavy rail" if route.type == 1 else "Light rail",
        )

    console.print(table)


def format_transfers_table(stations: list[TransferStation]) -> None:
    """Display transfer stations and the lines serving them."""
    if not stations:
        console.print("No transfer stations found.")
        return

    table = Table(
        title="Transfer Stations", show_header=True, header_style="bold blue"
    )
    table.add_column("Stop", style="cyan", no_wrap=True)
    table.add_column("Lines", style="yellow")
    table.add_column("Count", style="green", justify="right")

    for station in stations:
        table.add_row(station.name, ", ".join(station.routes), str(len(station.routes)))

    console.print(table)


def format_aggregate_table(report: AggregateReport) -> None:
    """Display stop count statistics followed by the transfer stations."""
    table = Table(title="Stop Counts", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Lines", style="green")
    table.add_column("Stops", style="yellow", justify="right")

    table.add_row(
        "Most stops", report.most_stops.name, str(report.most_stops.stop_count)
    )
    table.add_row(
        "Fewest stops", report.fewest_stops.name, str(report.fewest_stops.stop_count)
    )

    console.print(table)
    console.print()
    format_transfers_table(report.transfer_stations)


def format_trip_table(trip: Trip) -> None:
    """Display a trip as a summary panel and one row per line ridden."""
    summary_text = f"""[bold]From:[/bold] {trip.origin}
[bold]To:[/bold] {trip.destination}
[bold]Lines:[/bold] {len(trip.segments)}
[bold]Transfers:[/bold] {trip.transfer_count}"""

    console.print(Panel(summary_text, title="Trip Summary", border_style="blue"))

    if not trip.segments:
        console.print("[dim]Already at the destination[/dim]")
        return

    table = Table(title="Trip Details", show_header=True, header_style="bold blue")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Line", style="yellow")
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")

    for i, (line, from_stop, to_stop) in enumerate(trip.segments, 1):
        table.add_row(str(i), line, from_stop, to_stop)

    console.print(table)


def format_routes_json(routes: list[Route]) -> str:
    return json.dumps(
        [route.model_dump(mode="json") for route in routes],
        ensure_ascii=False,
        indent=2,
    )


def format_transfers_json(stations: list[TransferStation]) -> str:
    return json.dumps(
        [station.model_dump(mode="json") for station in stations],
        ensure_ascii=False,
        indent=2,
    )


def format_aggregate_json(report: AggregateReport) -> str:
    """Format stop count statistics as JSON, tied names split into a list."""
    data = report.model_dump(mode="json")
    data["most_stops"]["names"] = report.most_stops.names
    data["fewest_stops"]["names"] = report.fewest_stops.names
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_trip_json(trip: Trip) -> str:
    data = {
        "origin": trip.origin,
        "destination": trip.destination,
        "transfer_count": trip.transfer_count,
        "steps": [step.model_dump(mode="json") for step in trip.steps],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)
