"""Chart Routes — application view of a single chart.

Invariants:
    - Unknown chart names produce the CHART_NOT_FOUND envelope (404)
    - Viewer identity is resolved upstream; without it liked is always False
"""

import logging

from fastapi import APIRouter, Depends, Query

from cyanvas.api.dependencies import get_chart_store
from cyanvas.core.view_serializer import MAX_VARIANT_DEPTH, to_view
from cyanvas.services.chart_store import SqlChartStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/charts", tags=["charts"])


@router.get("/{name}")
async def get_chart(
    name: str,
    with_variants: bool = Query(True),
    with_resources: bool = Query(True),
    store: SqlChartStore = Depends(get_chart_store),
):
    """Chart view with one level of variants embedded by default."""
    chart = await store.find_by_name(name)
    return to_view(
        chart,
        with_resources=with_resources,
        variant_depth=MAX_VARIANT_DEPTH if with_variants else 0,
    )
