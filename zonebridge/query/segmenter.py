"""Split a station path into rider-facing ride segments."""

from __future__ import annotations

from zonebridge.models import Catalog, NodeId, RideSegment


def segment_path(path: list[NodeId], catalog: Catalog) -> list[RideSegment]:
    """Group consecutive stations sharing a zone into RideSegments.

    The virtual endpoints are skipped.  A zone run of a single station is
    a pass-through with no actual ride and is dropped.
    """
    runs: list[list[str]] = []
    current: list[str] = []
    current_zone = None

    for node in path:
        if node.is_virtual:
            continue
        zone = catalog[node.station_id].zone
        if not current or zone != current_zone:
            runs.append(current)
            current = [node.station_id]
            current_zone = zone
        else:
            current.append(node.station_id)
    runs.append(current)

    segments: list[RideSegment] = []
    for run in runs:
        if len(run) < 2:
            continue
        first = catalog[run[0]]
        last = catalog[run[-1]]
        segments.append(
            RideSegment(
                operator=first.operator,
                zone=first.zone,
                start_name=first.name,
                end_name=last.name,
                station_ids=run,
            )
        )
    return segments
