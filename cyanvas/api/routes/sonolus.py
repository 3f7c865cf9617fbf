"""Sonolus Routes — level and background items for the game client.

Invariants:
    - Level names on the wire carry the chcy- prefix; the bare chart name is
      accepted too
    - /levels/random samples from the discovery cache, then loads only the
      sampled charts
    - Background names are chcy-bg-<chart>-<version>; anything else is a 404
"""

import logging

from fastapi import APIRouter, Depends, Query

from cyanvas.api.dependencies import get_chart_store, get_discovery, get_wire_context
from cyanvas.core.domain_types import BackgroundVersion, Genre
from cyanvas.core.errors import ChartNotFoundError
from cyanvas.core.resource_slots import resolve_resources
from cyanvas.core.wire_serializer import (
    BACKGROUND_PREFIX, LEVEL_PREFIX, WireContext, to_wire, to_wire_background,
)
from cyanvas.schemas.sonolus import ItemDetails, ItemList
from cyanvas.services.chart_store import SqlChartStore
from cyanvas.services.discovery_cache import DiscoveryCache

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sonolus", tags=["sonolus"])


def _strip_prefix(name: str, prefix: str) -> str:
    return name[len(prefix):] if name.startswith(prefix) else name


def _parse_background_name(name: str) -> tuple[str, BackgroundVersion]:
    if not name.startswith(BACKGROUND_PREFIX):
        raise ChartNotFoundError(name)
    chart_name, _, version = name[len(BACKGROUND_PREFIX):].rpartition("-")
    try:
        return chart_name, BackgroundVersion(version)
    except ValueError:
        raise ChartNotFoundError(name)


@router.get("/levels/random", response_model=ItemList)
async def random_levels(
    count: int = Query(20, ge=1, le=100),
    genres: list[Genre] | None = Query(None),
    background_version: BackgroundVersion = Query(BackgroundVersion.V3),
    discovery: DiscoveryCache = Depends(get_discovery),
    store: SqlChartStore = Depends(get_chart_store),
    context: WireContext = Depends(get_wire_context),
):
    """Random public root charts, optionally restricted to genres."""
    ids = await discovery.random_chart_ids(count, genres)
    charts = await store.find_many(ids)
    return ItemList(
        items=[
            to_wire(c, context, background_version=background_version)
            for c in charts
        ],
        total=await discovery.count_charts(genres),
    )


@router.get("/levels/{name}", response_model=ItemDetails)
async def get_level(
    name: str,
    background_version: BackgroundVersion = Query(BackgroundVersion.V3),
    store: SqlChartStore = Depends(get_chart_store),
    context: WireContext = Depends(get_wire_context),
):
    chart = await store.find_by_name(_strip_prefix(name, LEVEL_PREFIX))
    return ItemDetails(
        item=to_wire(chart, context, background_version=background_version),
        description=chart.description or "",
    )


@router.get("/backgrounds/{name}", response_model=ItemDetails)
async def get_background(
    name: str,
    store: SqlChartStore = Depends(get_chart_store),
    context: WireContext = Depends(get_wire_context),
):
    chart_name, version = _parse_background_name(name)
    chart = await store.find_by_name(chart_name)
    return ItemDetails(
        item=to_wire_background(
            chart, resolve_resources(chart.file_resources), context, version,
        ),
    )
