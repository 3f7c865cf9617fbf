"""Shared FastAPI dependencies — wires stores, cache and wire context per request."""

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cyanvas.config import Settings, get_settings
from cyanvas.core.domain_types import Locale
from cyanvas.core.wire_serializer import WireContext
from cyanvas.infrastructure.asset_registry import StaticAssetRegistry, get_asset_registry
from cyanvas.infrastructure.cache import MemoryCache, get_cache
from cyanvas.infrastructure.database import get_db
from cyanvas.services.chart_store import SqlChartStore
from cyanvas.services.discovery_cache import DiscoveryCache


def get_chart_store(db: AsyncSession = Depends(get_db)) -> SqlChartStore:
    return SqlChartStore(db)


def get_discovery(
    store: SqlChartStore = Depends(get_chart_store),
    cache: MemoryCache = Depends(get_cache),
    settings: Settings = Depends(get_settings),
) -> DiscoveryCache:
    return DiscoveryCache(store, cache, settings)


def get_wire_context(
    localization: Locale | None = Query(None),
    settings: Settings = Depends(get_settings),
    assets: StaticAssetRegistry = Depends(get_asset_registry),
) -> WireContext:
    """Per-request wire context; the Sonolus client sends ?localization=."""
    return WireContext(
        source=settings.final_host,
        assets=assets,
        locale=localization or settings.default_locale,
    )
