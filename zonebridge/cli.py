"""CLI entry point for the ZoneBridge transit router."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from zonebridge.errors import MalformedInputError
from zonebridge.models import RouteQuery
from zonebridge.output.cli_formatter import print_no_route, print_route
from zonebridge.query.planner import plan_trip, prepare_context

app = typer.Typer(help="ZoneBridge: cheapest routes across zoned transit networks.")
console = Console()


@app.command()
def main(
    origin: str = typer.Option(..., "--from", "-f", help="Origin place name or 'lat,lon'"),
    destination: str = typer.Option(..., "--to", "-t", help="Destination place name or 'lat,lon'"),
    catalog: Path = typer.Option(None, "--catalog", "-c", help="Path to the cached network JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Find the cheapest transit route between two places."""
    # ── Logging setup ─────────────────────────────────────────────────
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    query = RouteQuery(origin=origin, destination=destination)

    # ── Load network ──────────────────────────────────────────────────
    try:
        with console.status("Loading network...", spinner="dots"):
            ctx = prepare_context(catalog)
    except (FileNotFoundError, MalformedInputError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    # ── Route ─────────────────────────────────────────────────────────
    try:
        with console.status("Finding route...", spinner="dots"):
            result = plan_trip(query, ctx)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if not result.reachable:
        print_no_route(query)
        raise typer.Exit(0)

    print_route(query, result)


if __name__ == "__main__":
    app()
