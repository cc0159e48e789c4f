"""Main planning logic: augment the network, solve, and segment the path.

``route`` is the routing core's single entry point.  ``plan_trip`` wraps
it with place-name resolution against a pre-loaded ``RouterContext``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from zonebridge.index.augment import augment_graph
from zonebridge.index.geo import distance_meters
from zonebridge.ingest.catalog import load_network, validate_network
from zonebridge.ingest.geocode import resolve_place
from zonebridge.models import (
    VIRTUAL_DESTINATION,
    VIRTUAL_ORIGIN,
    Catalog,
    Coordinate,
    Graph,
    RideSegment,
    RouteQuery,
    RouteResult,
)
from zonebridge.query.cost import CostModel
from zonebridge.query.segmenter import segment_path
from zonebridge.query.solver import shortest_path

logger = logging.getLogger(__name__)


@dataclass
class RouterContext:
    """Pre-loaded, query-independent data for routing."""
    catalog: Catalog
    graph: Graph
    cost_model: CostModel


def prepare_context(catalog_path: Path | None = None) -> RouterContext:
    """Load and validate the network once for many queries."""
    catalog, graph = load_network(catalog_path)
    validate_network(graph, catalog)
    return RouterContext(catalog=catalog, graph=graph, cost_model=CostModel(catalog))


def _walk_distances(
    segments: list[RideSegment],
    catalog: Catalog,
    origin: Coordinate,
    destination: Coordinate,
) -> list[int]:
    """Walk before each segment, plus the final walk to *destination*."""
    walks: list[int] = []
    here = origin
    for seg in segments:
        walks.append(distance_meters(here, catalog[seg.station_ids[0]].coordinate))
        here = catalog[seg.station_ids[-1]].coordinate
    walks.append(distance_meters(here, destination))
    return walks


def route(
    graph: Graph,
    catalog: Catalog,
    origin: Coordinate,
    destination: Coordinate,
    cost_model: CostModel | None = None,
    validate: bool = True,
) -> RouteResult:
    """Find the cheapest route between two coordinates.

    Parameters
    ----------
    graph : Graph
        Base transit network (left unmodified).
    catalog : Catalog
        Station reference data.
    origin, destination : Coordinate
        Traveller's start and end points.
    cost_model : CostModel, optional
        Defaults to ``CostModel(catalog)`` with the configured tunables.
    validate : bool
        Check the network for dangling station references first.  Callers
        holding a network already checked by ``prepare_context`` skip it.

    Returns
    -------
    RouteResult
        ``reachable`` is False (cost ``inf``, no segments) when no route
        exists.

    Raises
    ------
    MalformedInputError
        If the graph references unknown stations or lacks virtual entries.
    """
    if validate:
        validate_network(graph, catalog)
    if cost_model is None:
        cost_model = CostModel(catalog)

    augmented = augment_graph(graph, catalog, origin, destination)
    result = shortest_path(augmented, cost_model, VIRTUAL_ORIGIN, VIRTUAL_DESTINATION)

    if not result.reachable:
        logger.info("No route from %s to %s", origin, destination)
        return RouteResult(origin=origin, destination=destination, total_cost=math.inf)

    segments = segment_path(result.path, catalog)
    walks = _walk_distances(segments, catalog, origin, destination)
    logger.info(
        "Route %s -> %s: cost %.1f, %d stations, %d ride segments",
        origin,
        destination,
        result.total_cost,
        len(result.path) - 2,
        len(segments),
    )
    return RouteResult(
        origin=origin,
        destination=destination,
        total_cost=result.total_cost,
        path=result.path,
        segments=segments,
        walks_m=walks,
    )


def plan_trip(query: RouteQuery, ctx: RouterContext) -> RouteResult:
    """Resolve the query's place names and route between them.

    Raises
    ------
    ValueError
        If either place is unknown or outside the service area.
    """
    origin = resolve_place(query.origin)
    destination = resolve_place(query.destination)
    logger.info("Origin: %s -> %s", query.origin, origin)
    logger.info("Destination: %s -> %s", query.destination, destination)
    return route(ctx.graph, ctx.catalog, origin, destination, ctx.cost_model, validate=False)
