"""Chart Store — SQLAlchemy implementation of the ChartStore protocol.

Invariants:
    - Every returned chart has author, co-authors, file resources, likes and
      tags loaded; find_by_id/find_by_name also load one level of variants
      and the parent, so the serializers never trigger lazy IO
    - Unknown identifiers raise ChartNotFoundError
    - list_ids_where/count_where filter only on the ChartCriteria attributes
"""

import logging
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cyanvas.core.domain_types import ChartId
from cyanvas.core.errors import ChartNotFoundError
from cyanvas.core.repository_protocols import ChartCriteria
from cyanvas.models.chart import Chart
from cyanvas.models.co_author import CoAuthor

logger = logging.getLogger(__name__)


def _field_loaders() -> tuple:
    return (
        selectinload(Chart.author),
        selectinload(Chart.co_authors).selectinload(CoAuthor.user),
        selectinload(Chart.file_resources),
        selectinload(Chart.likes),
        selectinload(Chart.tags),
    )


def chart_load_options(with_variants: bool = True) -> list:
    """Eager-load options for serialization; variants embed one level only."""
    options = list(_field_loaders())
    if with_variants:
        options += [
            selectinload(Chart.child_variants).options(*_field_loaders()),
            selectinload(Chart.variant_of).options(*_field_loaders()),
        ]
    return options


def _apply_criteria(query, criteria: ChartCriteria):
    if criteria.genre is not None:
        query = query.where(Chart.genre == criteria.genre.value)
    if criteria.visibility is not None:
        query = query.where(Chart.visibility == criteria.visibility.value)
    if criteria.root_only:
        query = query.where(Chart.variant_id.is_(None))
    return query


class SqlChartStore:
    """Chart lookups against the relational store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, chart_id: ChartId) -> Chart:
        result = await self.db.execute(
            select(Chart).where(Chart.id == chart_id).options(*chart_load_options()),
        )
        chart = result.scalar_one_or_none()
        if chart is None:
            logger.info(f"Chart id {chart_id} not found")
            raise ChartNotFoundError(str(chart_id))
        return chart

    async def find_by_name(self, name: str) -> Chart:
        result = await self.db.execute(
            select(Chart).where(Chart.name == name).options(*chart_load_options()),
        )
        chart = result.scalar_one_or_none()
        if chart is None:
            logger.info("Chart not found", extra={"chart_name": name})
            raise ChartNotFoundError(name)
        return chart

    async def find_many(self, chart_ids: Sequence[ChartId]) -> list[Chart]:
        """Charts for the given ids in input order; ids no longer present are skipped."""
        if not chart_ids:
            return []
        result = await self.db.execute(
            select(Chart)
            .where(Chart.id.in_(list(chart_ids)))
            .options(*chart_load_options(with_variants=False)),
        )
        by_id = {chart.id: chart for chart in result.scalars().all()}
        return [by_id[i] for i in chart_ids if i in by_id]

    async def list_ids_where(self, criteria: ChartCriteria) -> list[ChartId]:
        query = _apply_criteria(select(Chart.id), criteria).order_by(Chart.id)
        result = await self.db.execute(query)
        return [ChartId(i) for i in result.scalars().all()]

    async def count_where(self, criteria: ChartCriteria) -> int:
        query = _apply_criteria(select(func.count(Chart.id)), criteria)
        result = await self.db.execute(query)
        return result.scalar_one()
