"""Core data structures for the ZoneBridge transit router."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe, in degrees."""
    lat: float
    lon: float

    def __str__(self) -> str:
        return f"{self.lat:.6f},{self.lon:.6f}"


class NodeKind(Enum):
    STATION = "station"
    ORIGIN = "origin"
    DESTINATION = "destination"


@dataclass(frozen=True)
class NodeId:
    """Graph node: either a real station or one of the two virtual endpoints."""
    kind: NodeKind
    station_id: Optional[str] = None

    @classmethod
    def station(cls, station_id: str) -> NodeId:
        return cls(NodeKind.STATION, str(station_id))

    @property
    def is_virtual(self) -> bool:
        return self.kind is not NodeKind.STATION

    def __str__(self) -> str:
        if self.kind is NodeKind.STATION:
            return self.station_id or ""
        return self.kind.value


VIRTUAL_ORIGIN = NodeId(NodeKind.ORIGIN)
VIRTUAL_DESTINATION = NodeId(NodeKind.DESTINATION)

# node -> neighbour -> raw weight (>= 0 meters, < 0 transfer edge)
Graph = dict[NodeId, dict[NodeId, float]]


@dataclass(frozen=True)
class Station:
    """A station in the catalog."""
    id: str
    name: str
    coordinate: Coordinate
    zone: str
    operator: str  # "application" in the network document


Catalog = dict[str, Station]


@dataclass
class PathResult:
    """Solver output: total effective cost and the node sequence."""
    total_cost: float
    path: list[NodeId] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.total_cost)


@dataclass
class RideSegment:
    """One leg of the itinerary: ride one operator within one zone."""
    operator: str
    zone: str
    start_name: str
    end_name: str
    station_ids: list[str]

    @property
    def n_stops(self) -> int:
        return len(self.station_ids)


@dataclass
class RouteResult:
    """A complete route between two coordinates."""
    origin: Coordinate
    destination: Coordinate
    total_cost: float
    path: list[NodeId] = field(default_factory=list)
    segments: list[RideSegment] = field(default_factory=list)
    # walk before each segment, then the final walk to the destination
    walks_m: list[int] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.total_cost)

    @property
    def total_walk_m(self) -> int:
        return sum(self.walks_m)


@dataclass
class RouteQuery:
    """User query parameters."""
    origin: str
    destination: str
