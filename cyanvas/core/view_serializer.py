"""View Serializer — the application/front-end representation of a chart.

Invariants:
    - Output keys are a fixed external contract (camelCase, see VIEW_FIELDS)
    - The chart notation asset is withheld unless the chart is public
    - Variants are embedded at most MAX_VARIANT_DEPTH levels deep; embedded
      charts always carry variants == [] and variantOf is None
    - liked is False whenever no viewer is given
    - Pure: relationships must be loaded beforehand, no IO here
"""

from cyanvas.core.domain_types import ResourceKind
from cyanvas.core.errors import MissingRequiredFieldError
from cyanvas.core.repository_protocols import ChartLike, UserLike
from cyanvas.core.resource_slots import asset_ref, resolve_resources
from cyanvas.core.time_words import to_iso8601
from cyanvas.core.variants import parent, variants
from cyanvas.core.visibility import (
    exposes_chart_asset, published_at_for, scheduled_at_for,
)

MAX_VARIANT_DEPTH = 1

VIEW_FIELDS = (
    "name", "title", "composer", "artist", "author", "authorName",
    "coAuthors", "cover", "bgm", "chart", "data", "variants", "tags",
    "genre", "publishedAt", "updatedAt", "rating", "likes", "liked",
    "description", "visibility", "scheduledAt", "variantOf",
)


def is_liked_by(chart: ChartLike, viewer: UserLike | None) -> bool:
    if viewer is None:
        return False
    return any(like.user_id == viewer.id for like in chart.likes)


def to_view(
    chart: ChartLike,
    viewer: UserLike | None = None,
    *,
    with_resources: bool = True,
    variant_depth: int = 0,
) -> dict:
    """Serialize a chart for the application front-end.

    variant_depth is clamped to [0, MAX_VARIANT_DEPTH]. At depth 1 the public
    children and the parent are embedded, each serialized at depth 0 with no
    viewer and with resources.
    """
    if chart.author is None:
        raise MissingRequiredFieldError("author", chart.name)

    depth = max(0, min(variant_depth, MAX_VARIANT_DEPTH))
    slots = resolve_resources(chart.file_resources) if with_resources else {}

    chart_asset = None
    if exposes_chart_asset(chart.visibility):
        chart_asset = asset_ref(slots.get(ResourceKind.CHART))

    embedded_variants: list[dict] = []
    variant_of = None
    if depth > 0:
        embedded_variants = [
            to_view(v, variant_depth=depth - 1)
            for v in variants(chart)
        ]
        parent_chart = parent(chart)
        if parent_chart is not None:
            variant_of = to_view(parent_chart, variant_depth=depth - 1)

    return {
        "name": chart.name,
        "title": chart.title,
        "composer": chart.composer,
        "artist": chart.artist,
        "author": chart.author.to_author_view(),
        "authorName": chart.author_name,
        "coAuthors": [c.user.to_author_view() for c in chart.co_authors],
        "cover": asset_ref(slots.get(ResourceKind.COVER)),
        "bgm": asset_ref(slots.get(ResourceKind.BGM)),
        "chart": chart_asset,
        "data": asset_ref(slots.get(ResourceKind.DATA)),
        "variants": embedded_variants,
        "tags": [tag.name for tag in chart.tags],
        "genre": chart.genre,
        "publishedAt": to_iso8601(published_at_for(chart)),
        "updatedAt": to_iso8601(chart.updated_at),
        "rating": chart.rating,
        "likes": len(chart.likes),
        "liked": is_liked_by(chart, viewer),
        "description": chart.description,
        "visibility": chart.visibility,
        "scheduledAt": to_iso8601(scheduled_at_for(chart)),
        "variantOf": variant_of,
    }
