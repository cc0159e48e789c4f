"""Attach the traveller's start and end points to the transit graph.

Every station gets a walking edge to and from the virtual origin and the
virtual destination, weighted by great-circle distance.  The caller's
graph is copied, never modified, so one loaded network can serve many
routing requests.
"""

from __future__ import annotations

import logging

from zonebridge.errors import MalformedInputError
from zonebridge.index.geo import distance_meters
from zonebridge.models import (
    VIRTUAL_DESTINATION,
    VIRTUAL_ORIGIN,
    Catalog,
    Coordinate,
    Graph,
    NodeId,
)

logger = logging.getLogger(__name__)


def augment_graph(
    base: Graph,
    catalog: Catalog,
    origin: Coordinate,
    destination: Coordinate,
) -> Graph:
    """Return a copy of *base* with walking edges for both virtual nodes.

    Parameters
    ----------
    base : Graph
        Transit network; must already hold (possibly empty) adjacency
        entries for ``VIRTUAL_ORIGIN`` and ``VIRTUAL_DESTINATION``.
    catalog : Catalog
        Stations to connect.
    origin, destination : Coordinate
        Traveller's start and end points.

    Returns
    -------
    Graph
        New adjacency mapping; *base* is left untouched.

    Raises
    ------
    MalformedInputError
        If *base* lacks an adjacency entry for either virtual node.
    """
    for virtual in (VIRTUAL_ORIGIN, VIRTUAL_DESTINATION):
        if virtual not in base:
            raise MalformedInputError(
                f"Graph has no adjacency entry for the virtual {virtual} node"
            )

    graph: Graph = {node: dict(edges) for node, edges in base.items()}

    for station_id, station in catalog.items():
        node = NodeId.station(station_id)
        o = distance_meters(station.coordinate, origin)
        t = distance_meters(station.coordinate, destination)
        graph[VIRTUAL_ORIGIN][node] = o
        graph[VIRTUAL_DESTINATION][node] = t
        edges = graph.setdefault(node, {})
        edges[VIRTUAL_ORIGIN] = o
        edges[VIRTUAL_DESTINATION] = t

    logger.debug(
        "Augmented graph: %d nodes, %d walking edges added",
        len(graph),
        4 * len(catalog),
    )
    return graph
