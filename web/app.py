"""FastAPI web app for the ZoneBridge transit router."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from zonebridge.errors import NumericAnomalyError
from zonebridge.models import RouteQuery, RouteResult
from zonebridge.query.planner import RouterContext, plan_trip, prepare_context

logger = logging.getLogger(__name__)

# ── Shared router context (loaded on first request) ─────────────────
_ctx: RouterContext | None = None


def _get_context() -> RouterContext:
    """Return the shared RouterContext, loading the network on first use."""
    global _ctx
    if _ctx is None:
        _ctx = prepare_context()
        logger.info("RouterContext loaded: %d stations", len(_ctx.catalog))
    return _ctx


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")
    logger.info("Starting ZoneBridge web app")
    yield


app = FastAPI(title="ZoneBridge", version="0.1.0", lifespan=lifespan)


# ── Pydantic request/response models ────────────────────────────────


class RouteRequest(BaseModel):
    origin: str
    destination: str


class StationOut(BaseModel):
    id: str
    name: str
    zone: str
    operator: str
    lat: float
    lon: float


class RideSegmentOut(BaseModel):
    operator: str
    zone: str
    from_station: str
    to_station: str
    stops: int
    walk_before_m: int


class RouteResponse(BaseModel):
    origin: list[float]       # [lat, lon]
    destination: list[float]  # [lat, lon]
    reachable: bool
    total_cost: Optional[float] = None
    segments: list[RideSegmentOut]
    final_walk_m: Optional[int] = None
    total_walk_m: int


# ── Serialization helpers ────────────────────────────────────────────


def _serialize_route(result: RouteResult) -> RouteResponse:
    segments = [
        RideSegmentOut(
            operator=seg.operator,
            zone=seg.zone,
            from_station=seg.start_name,
            to_station=seg.end_name,
            stops=seg.n_stops,
            walk_before_m=walk,
        )
        for seg, walk in zip(result.segments, result.walks_m)
    ]
    return RouteResponse(
        origin=[result.origin.lat, result.origin.lon],
        destination=[result.destination.lat, result.destination.lon],
        reachable=result.reachable,
        total_cost=round(result.total_cost, 2) if result.reachable else None,
        segments=segments,
        final_walk_m=result.walks_m[-1] if result.walks_m else None,
        total_walk_m=result.total_walk_m,
    )


# ── API endpoints ────────────────────────────────────────────────────


@app.get("/api/stations")
async def get_stations():
    """Return the station catalog, sorted by name."""
    ctx = _get_context()
    stations = sorted(ctx.catalog.values(), key=lambda s: (s.name, s.id))
    return {
        "stations": [
            StationOut(
                id=s.id,
                name=s.name,
                zone=s.zone,
                operator=s.operator,
                lat=s.coordinate.lat,
                lon=s.coordinate.lon,
            )
            for s in stations
        ]
    }


@app.post("/api/route", response_model=RouteResponse)
async def plan_route(req: RouteRequest):
    """Find the cheapest route between two places."""
    ctx = _get_context()
    query = RouteQuery(origin=req.origin, destination=req.destination)

    try:
        result = plan_trip(query, ctx)
    except ValueError as e:
        raise HTTPException(400, str(e))
    except NumericAnomalyError:
        raise
    except RuntimeError as e:
        logger.warning("Upstream failure routing %s -> %s: %s", req.origin, req.destination, e)
        raise HTTPException(502, str(e))

    return _serialize_route(result)
