"""Language Strings tests — every table covers every locale."""

from cyanvas.core.domain_types import BackgroundVersion, Genre, Locale
from cyanvas.core.language_strings import (
    background_title, format_time_distance, genre_label,
    published_ago, visibility_label,
)
from cyanvas.core.time_words import TimeDistance


def test_genre_labels_cover_all_locales_and_genres():
    for locale in Locale:
        for genre in Genre:
            assert genre_label(locale, genre)


def test_visibility_labels_cover_non_public_states():
    for locale in Locale:
        assert visibility_label(locale, "private")
        assert visibility_label(locale, "scheduled")


def test_time_distance_singular_and_plural():
    assert format_time_distance(Locale.EN, TimeDistance("x_days", 1)) == "1 day"
    assert format_time_distance(Locale.EN, TimeDistance("x_days", 3)) == "3 days"
    assert format_time_distance(Locale.JA, TimeDistance("about_x_hours", 2)) == "約2時間"


def test_published_ago_wraps_distance():
    text = published_ago(Locale.EN, TimeDistance("about_x_hours", 3))
    assert text == "Published about 3 hours ago"


def test_background_title_includes_name_and_version():
    assert background_title(Locale.EN, "Song", BackgroundVersion.V3) == "Song (Version 3)"
    assert "Song" in background_title(Locale.JA, "Song", BackgroundVersion.V1)
