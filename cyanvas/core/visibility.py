"""Visibility Policy — gates field and asset exposure by the chart's current state.

Invariants:
    - The chart notation asset is exposed only while the chart is public
    - published_at is surfaced only when public, scheduled_at only when scheduled
    - visibility_tag() always yields exactly one badge
    - Transitions are owned by upload/edit workflows, never by this module
"""

from datetime import datetime

from cyanvas.core.domain_types import Locale, Visibility
from cyanvas.core.language_strings import published_ago, visibility_label
from cyanvas.core.repository_protocols import ChartLike
from cyanvas.core.time_words import distance_of_time


def exposes_chart_asset(visibility: Visibility | str) -> bool:
    return Visibility(visibility) is Visibility.PUBLIC


def published_at_for(chart: ChartLike) -> datetime | None:
    if Visibility(chart.visibility) is not Visibility.PUBLIC:
        return None
    return chart.published_at


def scheduled_at_for(chart: ChartLike) -> datetime | None:
    if Visibility(chart.visibility) is not Visibility.SCHEDULED:
        return None
    return chart.scheduled_at


def visibility_tag(chart: ChartLike, locale: Locale, now: datetime) -> dict[str, str]:
    """Single wire badge describing the chart's visibility.

    Public charts without a published_at (legacy rows) are measured from now,
    which renders as "less than a minute".
    """
    visibility = Visibility(chart.visibility)
    if visibility is Visibility.PUBLIC:
        distance = distance_of_time(chart.published_at or now, now)
        return {"title": published_ago(locale, distance)}
    return {"title": visibility_label(locale, visibility.value)}
