"""Station catalog and base connectivity graph.

The network is stored as one cached JSON document ``[stations, graph]``:

  - ``stations``: ``{id: {"coordinate": [lat, lon], "zone": ...,
    "application": operator, "station": display name}}``
  - ``graph``: ``{id: {neighbour_id: raw_weight}}``, including (usually
    empty) entries for the reserved ``"-1"`` / ``"-2"`` virtual IDs.

String IDs are converted to typed ``NodeId`` values on load; the reserved
IDs never reach the routing core as strings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from zonebridge.config import CATALOG_PATH, RESERVED_DESTINATION_ID, RESERVED_ORIGIN_ID
from zonebridge.errors import MalformedInputError
from zonebridge.models import (
    VIRTUAL_DESTINATION,
    VIRTUAL_ORIGIN,
    Catalog,
    Coordinate,
    Graph,
    NodeId,
    Station,
)

logger = logging.getLogger(__name__)

_RESERVED = {
    RESERVED_ORIGIN_ID: VIRTUAL_ORIGIN,
    RESERVED_DESTINATION_ID: VIRTUAL_DESTINATION,
}


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _node_id(raw_id: str) -> NodeId:
    return _RESERVED.get(str(raw_id)) or NodeId.station(raw_id)


def _parse_station(station_id: str, entry: dict) -> Station:
    """Build a Station from one catalog entry."""
    try:
        lat, lon = entry["coordinate"]
        return Station(
            id=station_id,
            name=str(entry["station"]),
            coordinate=Coordinate(float(lat), float(lon)),
            zone=str(entry["zone"]),
            operator=str(entry["application"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedInputError(f"Malformed station entry {station_id!r}: {e}") from e


def parse_network(document) -> tuple[Catalog, Graph]:
    """Parse a ``[stations, graph]`` document into a catalog and typed graph.

    Raises
    ------
    MalformedInputError
        If the document shape is wrong, a station entry is incomplete, or
        a station ID collides with a reserved virtual ID.
    """
    try:
        raw_stations, raw_graph = document
    except (TypeError, ValueError) as e:
        raise MalformedInputError(
            "Network document must be a two-element [stations, graph] array"
        ) from e

    if not isinstance(raw_stations, dict) or not isinstance(raw_graph, dict):
        raise MalformedInputError("Network stations and graph must both be JSON objects")

    catalog: Catalog = {}
    for raw_id, entry in raw_stations.items():
        station_id = str(raw_id)
        if station_id in _RESERVED:
            raise MalformedInputError(
                f"Station ID {station_id!r} collides with a reserved virtual ID"
            )
        catalog[station_id] = _parse_station(station_id, entry)

    graph: Graph = {}
    for raw_id, edges in raw_graph.items():
        if not isinstance(edges, dict):
            raise MalformedInputError(f"Adjacency for {raw_id!r} must be a JSON object")
        adjacency = {}
        for neighbour, weight in edges.items():
            try:
                adjacency[_node_id(neighbour)] = float(weight)
            except (TypeError, ValueError) as e:
                raise MalformedInputError(
                    f"Edge {raw_id!r} -> {neighbour!r} has non-numeric weight {weight!r}"
                ) from e
        graph[_node_id(raw_id)] = adjacency

    return catalog, graph


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_network(graph: Graph, catalog: Catalog) -> None:
    """Check that every station referenced by the graph is in the catalog.

    Raises
    ------
    MalformedInputError
        On the first dangling station reference.
    """
    for node, edges in graph.items():
        for ref in (node, *edges):
            if not ref.is_virtual and ref.station_id not in catalog:
                raise MalformedInputError(
                    f"Graph references station {ref.station_id!r} "
                    f"(edge from {node}) which is not in the catalog"
                )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_network(path: Path | None = None) -> tuple[Catalog, Graph]:
    """Load the station catalog and base graph from the cached JSON document.

    Parameters
    ----------
    path : Path, optional
        Path to the document. Defaults to ``data/cached.json``.

    Returns
    -------
    tuple[Catalog, Graph]
    """
    network_path = Path(path) if path is not None else CATALOG_PATH
    if not network_path.exists():
        raise FileNotFoundError(
            f"Network document not found at {network_path}. "
            "Pass --catalog or place cached.json in the data directory."
        )

    logger.info("Loading network from %s", network_path)
    with open(network_path, "r", encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"{network_path} is not valid JSON: {e}") from e

    catalog, graph = parse_network(document)
    n_edges = sum(len(edges) for edges in graph.values())
    logger.info("Loaded %d stations, %d edges", len(catalog), n_edges)
    return catalog, graph
