"""Effective edge cost used by the route solver.

Raw graph weights are either distances in meters (>= 0) or transfer
edges (< 0, magnitude is the transfer's base cost).  The cost model turns
them into a fare-like routing weight:

  - transfers are scaled down, more so onto the rapid rail network;
  - hops under ``MIN_FARE_DISTANCE_M`` are free;
  - longer hops get a convex penalty ``w * 3 * (1 + w / 200)``;
  - moving between two stations in different zones adds a flat surcharge.

A zone change on an edge touching a virtual node is not surcharged.
"""

from __future__ import annotations

from dataclasses import dataclass

from zonebridge.config import (
    DISTANCE_FACTOR,
    DISTANCE_SCALE_M,
    MIN_FARE_DISTANCE_M,
    RAPID_RAIL_OPERATOR,
    RAPID_TRANSFER_FACTOR,
    TRANSFER_FACTOR,
    ZONE_SURCHARGE,
)
from zonebridge.errors import MalformedInputError, NumericAnomalyError
from zonebridge.models import Catalog, NodeId, Station


@dataclass(frozen=True)
class CostModel:
    """Maps (raw weight, source, target) to an effective traversal cost."""
    catalog: Catalog
    rapid_rail_operator: str = RAPID_RAIL_OPERATOR
    rapid_transfer_factor: float = RAPID_TRANSFER_FACTOR
    transfer_factor: float = TRANSFER_FACTOR
    min_fare_distance_m: float = MIN_FARE_DISTANCE_M
    distance_factor: float = DISTANCE_FACTOR
    distance_scale_m: float = DISTANCE_SCALE_M
    zone_surcharge: float = ZONE_SURCHARGE

    def effective_cost(self, raw_weight: float, source: NodeId, target: NodeId) -> float:
        """Return the cost of traversing one edge.

        Raises
        ------
        MalformedInputError
            If a real endpoint is missing from the catalog.
        NumericAnomalyError
            If the computed cost is negative or NaN.
        """
        src = self._station(source)
        dst = self._station(target)
        if raw_weight < 0:
            cost = -raw_weight * self._transfer_factor(dst)
        else:
            cost = self._distance_cost(raw_weight)
            if src is not None and dst is not None and src.zone != dst.zone:
                cost += self.zone_surcharge

        if not cost >= 0:
            raise NumericAnomalyError(
                f"Effective cost {cost!r} for edge {source} -> {target} "
                f"(raw weight {raw_weight!r})"
            )
        return cost

    def _station(self, node: NodeId) -> Station | None:
        if node.is_virtual:
            return None
        try:
            return self.catalog[node.station_id]
        except KeyError:
            raise MalformedInputError(f"station {node.station_id!r} not in catalog") from None

    def _transfer_factor(self, station: Station | None) -> float:
        if station is not None and station.operator == self.rapid_rail_operator:
            return self.rapid_transfer_factor
        return self.transfer_factor

    def _distance_cost(self, meters: float) -> float:
        if meters < self.min_fare_distance_m:
            return 0.0
        return meters * self.distance_factor * (1 + meters / self.distance_scale_m)

