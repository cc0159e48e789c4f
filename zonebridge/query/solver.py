"""Cheapest-path search over the augmented transit graph.

Dijkstra's algorithm with a binary-heap frontier.  Edge weights are the
cost model's effective costs, not raw distances.  Heap entries carry an
insertion counter so ties between equal tentative costs resolve in
push order, keeping results reproducible for a given graph.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math

from zonebridge.models import Graph, NodeId, PathResult
from zonebridge.query.cost import CostModel

logger = logging.getLogger(__name__)


def shortest_path(
    graph: Graph,
    cost_model: CostModel,
    start: NodeId,
    target: NodeId,
) -> PathResult:
    """Find the minimum-cost path from *start* to *target*.

    Args:
        graph: Adjacency mapping of raw weights.
        cost_model: Converts raw weights into effective costs.
        start: Source node.
        target: Destination node.

    Returns:
        A PathResult.  When *target* cannot be reached (or either
        endpoint is missing from the graph) the cost is ``inf`` and the
        path is empty.
    """
    if start not in graph or target not in graph:
        logger.info("Endpoint missing from graph (%s -> %s)", start, target)
        return PathResult(math.inf, [])

    distances: dict[NodeId, float] = {start: 0.0}
    previous: dict[NodeId, NodeId] = {}
    visited: set[NodeId] = set()
    counter = itertools.count()
    frontier: list[tuple[float, int, NodeId]] = [(0.0, next(counter), start)]

    while frontier:
        dist, _, node = heapq.heappop(frontier)
        if node in visited:
            continue  # stale entry
        visited.add(node)

        if node == target:
            break

        for neighbor, raw_weight in graph.get(node, {}).items():
            if neighbor in visited:
                continue
            new_dist = dist + cost_model.effective_cost(raw_weight, node, neighbor)
            if new_dist < distances.get(neighbor, math.inf):
                distances[neighbor] = new_dist
                previous[neighbor] = node
                heapq.heappush(frontier, (new_dist, next(counter), neighbor))

    total = distances.get(target, math.inf)
    if math.isinf(total):
        logger.info("No path from %s to %s (%d nodes settled)", start, target, len(visited))
        return PathResult(math.inf, [])

    path = [target]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()

    logger.debug(
        "Shortest path %s -> %s: cost %.1f, %d nodes, %d settled",
        start, target, total, len(path), len(visited),
    )
    return PathResult(total, path)
