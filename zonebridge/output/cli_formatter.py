"""Rich CLI output for routes."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel

from zonebridge.models import Coordinate, RideSegment, RouteQuery, RouteResult

console = Console()


# ── URL builders ──────────────────────────────────────────────────────

def _google_maps_url(coord: Coordinate) -> str:
    """Google Maps pin at a coordinate."""
    return f"https://www.google.com/maps?q={coord.lat:.6f},{coord.lon:.6f}"


def _transit_directions_url(origin: Coordinate, destination: Coordinate) -> str:
    """Google Maps transit directions, for comparison."""
    return (
        f"https://www.google.com/maps/dir/?api=1"
        f"&origin={origin.lat:.6f},{origin.lon:.6f}"
        f"&destination={destination.lat:.6f},{destination.lon:.6f}"
        f"&travelmode=transit"
    )


# ── Output functions ──────────────────────────────────────────────────

def _format_walk(meters: int) -> str:
    return f"  [dim](Walk {meters}m)[/dim]"


def _format_segment(n: int, seg: RideSegment) -> str:
    """Format a single ride segment as a string."""
    return (
        f"[bold]{n}. {seg.operator}[/bold] -- {seg.zone}\n"
        f"  {seg.start_name} -> {seg.end_name}"
        f"  ({seg.n_stops} stops)"
    )


def print_route(query: RouteQuery, result: RouteResult) -> None:
    """Print a reachable route: rides interleaved with walks."""
    parts: list[str] = [
        f"From: {query.origin}  [dim]({result.origin})[/dim]",
        f"To:   {query.destination}  [dim]({result.destination})[/dim]",
        "",
    ]

    for n, (walk, seg) in enumerate(zip(result.walks_m, result.segments), 1):
        parts.append(_format_walk(walk))
        parts.append(_format_segment(n, seg))
    parts.append(_format_walk(result.walks_m[-1]))
    if not result.segments:
        parts.append("[yellow]Walking is cheaper than any ride on this trip.[/yellow]")

    parts.append("")
    parts.append(
        f"Total cost: [bold]{result.total_cost:,.0f}[/bold]"
        f"  |  Walking: {result.total_walk_m:,}m"
    )
    parts.append("")
    parts.append("[bold]Links[/bold]")
    parts.append(f"  Destination:     {_google_maps_url(result.destination)}")
    parts.append(
        f"  Transit compare: {_transit_directions_url(result.origin, result.destination)}"
    )

    console.print(
        Panel(
            "\n".join(parts),
            title="ZoneBridge Route",
            border_style="green",
        )
    )


def print_no_route(query: RouteQuery) -> None:
    """Print a message when no route was found."""
    console.print(
        Panel(
            f"No route found from {query.origin} to {query.destination}.\n"
            "The network may not connect these points.",
            title="No Route",
            border_style="red",
        )
    )
