"""Wire Serializer — Sonolus level and background items for the game client.

Invariants:
    - Output keys are a fixed external contract (LEVEL_FIELDS, BACKGROUND_FIELDS)
    - Every asset field is always present: missing cover/bgm/preview become
      {"hash": "", "url": ""}; missing data/background images point at the
      generate-asset endpoint so the client can fetch them lazily
    - tags carries exactly one visibility badge and no genre badge for "others"
    - Deployment host, locale and clock come from WireContext, never from globals

Design Decisions:
    - Background is always custom-derived (useDefault False); skin, effect and
      particle always use the engine defaults
    - Tablet background slots are resolvable but not wired in here
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from urllib.parse import urlencode

from cyanvas.core.domain_types import BackgroundVersion, Genre, Locale, ResourceKind
from cyanvas.core.errors import MissingRequiredFieldError
from cyanvas.core.language_strings import background_title, genre_label
from cyanvas.core.repository_protocols import AssetRegistry, ChartLike
from cyanvas.core.resource_slots import (
    ResourceSlots, asset_ref_or_placeholder, resolve_resources,
)
from cyanvas.core.visibility import visibility_tag

LEVEL_PREFIX = "chcy-"
BACKGROUND_PREFIX = "chcy-bg-"
LEVEL_ITEM_VERSION = 1
BACKGROUND_ITEM_VERSION = 2
ENGINE_NAME = "pjsekai-extended"
BACKGROUND_DATA_PATH = "backgrounds/data.json.gz"
BACKGROUND_CONFIGURATION_PATH = "backgrounds/configuration.json.gz"
GENERATE_ASSET_PATH = "/sonolus/generate-asset"

LEVEL_FIELDS = (
    "name", "title", "artists", "author", "source", "tags", "cover", "bgm",
    "preview", "data", "rating", "version", "useSkin", "useBackground",
    "useEffect", "useParticle", "engine",
)
BACKGROUND_FIELDS = (
    "name", "version", "tags", "source", "title", "subtitle", "author",
    "thumbnail", "data", "image", "configuration",
)


@dataclass
class WireContext:
    """Explicit configuration for one wire serialization."""
    source: str | None
    assets: AssetRegistry
    locale: Locale = Locale.EN
    now: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def generate_asset_url(chart_name: str, kind: ResourceKind | str) -> str:
    """On-demand materialization endpoint for a missing asset."""
    query = urlencode({"chart": chart_name, "type": ResourceKind(kind).value})
    return f"{GENERATE_ASSET_PATH}?{query}"


def format_author(chart: ChartLike) -> str:
    """Author label as name#handle; author_name overrides the account name."""
    if chart.author is None:
        raise MissingRequiredFieldError("author", chart.name)
    display_name = chart.author_name or chart.author.name
    return f"{display_name}#{chart.author.display_handle}"


def format_artists(chart: ChartLike) -> str:
    return f"{chart.composer} / {chart.artist or '-'}"


def build_tags(chart: ChartLike, context: WireContext) -> list[dict[str, str]]:
    """Like badge, visibility badge, genre badge (not for others), chart tags."""
    tags = [
        {"title": str(len(chart.likes)), "icon": "heart"},
        visibility_tag(chart, context.locale, context.now),
        Genre(chart.genre) is not Genre.OTHERS
        and {"title": genre_label(context.locale, chart.genre)},
        *({"title": tag.name} for tag in chart.tags),
    ]
    return [tag for tag in tags if tag]


def to_wire(
    chart: ChartLike,
    context: WireContext,
    *,
    background_version: BackgroundVersion = BackgroundVersion.V3,
) -> dict:
    """Serialize a chart as a Sonolus level item."""
    author = format_author(chart)
    slots = resolve_resources(chart.file_resources)
    return {
        "name": f"{LEVEL_PREFIX}{chart.name}",
        "title": chart.title,
        "artists": format_artists(chart),
        "author": author,
        "source": context.source,
        "tags": build_tags(chart, context),
        "cover": asset_ref_or_placeholder(slots[ResourceKind.COVER]),
        "bgm": asset_ref_or_placeholder(slots[ResourceKind.BGM]),
        "preview": asset_ref_or_placeholder(slots[ResourceKind.PREVIEW]),
        "data": asset_ref_or_placeholder(
            slots[ResourceKind.DATA],
            generate_asset_url(chart.name, ResourceKind.DATA),
        ),
        "rating": chart.rating,
        "version": LEVEL_ITEM_VERSION,
        "useSkin": {"useDefault": True},
        "useBackground": {
            "useDefault": False,
            "item": to_wire_background(
                chart, slots, context, version=background_version,
            ),
        },
        "useEffect": {"useDefault": True},
        "useParticle": {"useDefault": True},
        "engine": context.assets.get_item("engine", ENGINE_NAME),
    }


def to_wire_background(
    chart: ChartLike,
    slots: ResourceSlots,
    context: WireContext,
    version: BackgroundVersion = BackgroundVersion.V3,
) -> dict:
    """Serialize the chart's derived background as a Sonolus background item."""
    version = BackgroundVersion(version)
    image_kind = version.resource_kind
    subtitle = chart.composer
    if chart.artist:
        subtitle = f"{subtitle} / {chart.artist}"

    return {
        "name": f"{BACKGROUND_PREFIX}{chart.name}-{version.value}",
        "version": BACKGROUND_ITEM_VERSION,
        "tags": [],
        "source": context.source,
        "title": background_title(context.locale, chart.title, version),
        "subtitle": subtitle,
        "author": format_author(chart),
        "thumbnail": asset_ref_or_placeholder(slots.get(ResourceKind.COVER)),
        "data": context.assets.get_static(BACKGROUND_DATA_PATH),
        "image": asset_ref_or_placeholder(
            slots.get(image_kind),
            generate_asset_url(chart.name, image_kind),
        ),
        "configuration": context.assets.get_static(BACKGROUND_CONFIGURATION_PATH),
    }
