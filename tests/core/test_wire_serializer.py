"""Wire Serializer tests — Sonolus level/background envelopes and fallbacks."""

from datetime import timedelta

import pytest

from cyanvas.core.domain_types import BackgroundVersion, Locale
from cyanvas.core.errors import MissingRequiredFieldError
from cyanvas.core.resource_slots import resolve_resources
from cyanvas.core.wire_serializer import (
    BACKGROUND_FIELDS, LEVEL_FIELDS, WireContext, generate_asset_url,
    to_wire, to_wire_background,
)
from tests.factories import NOW, FakeAssets, make_chart, make_user

EMPTY = {"hash": "", "url": ""}


@pytest.fixture
def assets():
    return FakeAssets()


@pytest.fixture
def context(assets):
    return WireContext(source="cc.example.com", assets=assets, locale=Locale.EN, now=NOW)


def _visibility_tags(tags):
    prefixes = ("Published", "Private", "Scheduled")
    return [t for t in tags if t["title"].startswith(prefixes)]


def test_level_has_exactly_the_contract_fields(context):
    item = to_wire(make_chart(), context)
    assert tuple(item) == LEVEL_FIELDS
    assert tuple(item["useBackground"]["item"]) == BACKGROUND_FIELDS


def test_public_pops_chart_scenario(context):
    chart = make_chart(
        "a1", genre="pops", visibility="public",
        published_at=NOW - timedelta(days=2),
        resources=("cover", "bgm", "data", "background_v3"),
        tags=("fast", "finale"), author=make_user("ann", "Ann"),
    )
    item = to_wire(chart, context)
    assert item["tags"] == [
        {"title": "0", "icon": "heart"},
        {"title": "Published 2 days ago"},
        {"title": "Pops"},
        {"title": "fast"},
        {"title": "finale"},
    ]
    assert item["useBackground"]["item"]["image"] == {
        "hash": "background_v3-sha1",
        "url": "https://cdn.example.com/a1/background_v3",
    }
    assert item["data"]["url"] == "https://cdn.example.com/a1/data"


def test_private_others_chart_without_assets_scenario(context):
    chart = make_chart("b2", genre="others", visibility="private")
    item = to_wire(chart, context)
    assert item["tags"] == [
        {"title": "0", "icon": "heart"},
        {"title": "Private"},
    ]
    assert item["cover"] == EMPTY
    assert item["bgm"] == EMPTY
    assert item["preview"] == EMPTY
    assert item["data"] == {
        "hash": "", "url": "/sonolus/generate-asset?chart=b2&type=data",
    }


@pytest.mark.parametrize("visibility", ["public", "private", "scheduled"])
def test_exactly_one_visibility_tag(context, visibility):
    chart = make_chart(visibility=visibility, scheduled_at=NOW)
    assert len(_visibility_tags(to_wire(chart, context)["tags"])) == 1


@pytest.mark.parametrize("genre", ["vocal_synth", "music_game", "game", "meme", "pops", "instrumental"])
def test_genre_tag_present_for_named_genres(context, genre):
    tags = to_wire(make_chart(genre=genre), context)["tags"]
    assert len(tags) == 3


def test_like_badge_counts_likes(context):
    chart = make_chart(like_user_ids=(1, 2, 3))
    assert to_wire(chart, context)["tags"][0] == {"title": "3", "icon": "heart"}


def test_name_and_fixed_markers(context, assets):
    item = to_wire(make_chart("xyz", rating=42), context)
    assert item["name"] == "chcy-xyz"
    assert item["source"] == "cc.example.com"
    assert item["rating"] == 42
    assert item["version"] == 1
    assert item["useSkin"] == {"useDefault": True}
    assert item["useEffect"] == {"useDefault": True}
    assert item["useParticle"] == {"useDefault": True}
    assert item["useBackground"]["useDefault"] is False
    assert item["engine"] == {"name": "pjsekai-extended", "kind": "engine"}
    assert assets.item_calls == [("engine", "pjsekai-extended")]


def test_artists_default_artist_to_dash(context):
    assert to_wire(make_chart(composer="C", artist="A"), context)["artists"] == "C / A"
    assert to_wire(make_chart(composer="C", artist=""), context)["artists"] == "C / -"
    assert to_wire(make_chart(composer="C", artist=None), context)["artists"] == "C / -"


def test_author_uses_override_name_and_handle(context):
    ann = make_user("ann", "Ann")
    assert to_wire(make_chart(author=ann), context)["author"] == "Ann#ann"
    named = make_chart(author=ann, author_name="Annie")
    assert to_wire(named, context)["author"] == "Annie#ann"
    alt = make_user("sub", "Sub", owner_id=ann.id)
    assert to_wire(make_chart(author=alt), context)["author"] == "Sub#xsub"


def test_present_assets_use_canonical_refs(context):
    chart = make_chart("abc", resources=("cover", "bgm", "preview", "data"))
    item = to_wire(chart, context)
    for key in ("cover", "bgm", "preview", "data"):
        assert item[key] == {
            "hash": f"{key}-sha1", "url": f"https://cdn.example.com/abc/{key}",
        }


def test_missing_author_raises(context):
    chart = make_chart()
    chart.author = None
    with pytest.raises(MissingRequiredFieldError):
        to_wire(chart, context)


def test_localized_tags(assets):
    ja = WireContext(source=None, assets=assets, locale=Locale.JA, now=NOW)
    chart = make_chart(genre="game", visibility="scheduled", scheduled_at=NOW)
    titles = [t["title"] for t in to_wire(chart, ja)["tags"]]
    assert titles == ["0", "予約公開", "ゲーム"]


# ─── Background ──────────────────────────────────────────────────

def test_background_fields(context, assets):
    chart = make_chart("abc", title="Song", composer="C", artist="A", resources=("cover",))
    bg = to_wire_background(chart, resolve_resources(chart.file_resources), context)
    assert bg["name"] == "chcy-bg-abc-v3"
    assert bg["version"] == 2
    assert bg["tags"] == []
    assert bg["source"] == "cc.example.com"
    assert bg["title"] == "Song (Version 3)"
    assert bg["subtitle"] == "C / A"
    assert bg["author"] == to_wire(chart, context)["author"]
    assert bg["thumbnail"]["hash"] == "cover-sha1"
    assert bg["data"] == {
        "hash": "sha1:backgrounds/data.json.gz",
        "url": "/sonolus/assets/backgrounds/data.json.gz",
    }
    assert bg["configuration"]["hash"] == "sha1:backgrounds/configuration.json.gz"


def test_background_subtitle_omits_blank_artist(context):
    chart = make_chart(composer="C", artist="")
    bg = to_wire_background(chart, resolve_resources([]), context)
    assert bg["subtitle"] == "C"


def test_background_placeholders(context):
    chart = make_chart("abc")
    bg = to_wire_background(chart, resolve_resources([]), context, BackgroundVersion.V1)
    assert bg["name"] == "chcy-bg-abc-v1"
    assert bg["thumbnail"] == EMPTY
    assert bg["image"] == {
        "hash": "",
        "url": "/sonolus/generate-asset?chart=abc&type=background_v1",
    }


def test_background_version_selects_matching_slot(context):
    chart = make_chart("abc", resources=("background_v1", "background_v3", "background_tablet_v3"))
    v1 = to_wire(chart, context, background_version=BackgroundVersion.V1)
    assert v1["useBackground"]["item"]["image"]["hash"] == "background_v1-sha1"
    v3 = to_wire(chart, context)
    assert v3["useBackground"]["item"]["image"]["hash"] == "background_v3-sha1"


def test_generate_asset_url_pattern():
    assert generate_asset_url("abc", "data") == "/sonolus/generate-asset?chart=abc&type=data"
