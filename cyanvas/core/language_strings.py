"""Language Strings — locale-specific text emitted in the Sonolus wire format.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every table covers every Locale member
    - Genre labels cover every Genre member, including OTHERS

Design Decisions:
    - dict[Locale, ...] tables over a gettext catalog: the wire format needs
      a handful of strings and the tables are easy to test exhaustively
"""

from cyanvas.core.domain_types import BackgroundVersion, Genre, Locale
from cyanvas.core.time_words import TimeDistance


# --- Visibility badges --------------------------------------------------------

_PUBLISHED_AT: dict[Locale, str] = {
    Locale.EN: "Published {time} ago",
    Locale.JA: "{time}前に公開",
}

_VISIBILITY_LABELS: dict[Locale, dict[str, str]] = {
    Locale.EN: {"private": "Private", "scheduled": "Scheduled"},
    Locale.JA: {"private": "非公開", "scheduled": "予約公開"},
}


# --- Genres -------------------------------------------------------------------

_GENRE_LABELS: dict[Locale, dict[Genre, str]] = {
    Locale.EN: {
        Genre.VOCAL_SYNTH: "Vocal Synth",
        Genre.MUSIC_GAME: "Music Game",
        Genre.GAME: "Game",
        Genre.MEME: "Meme",
        Genre.POPS: "Pops",
        Genre.INSTRUMENTAL: "Instrumental",
        Genre.OTHERS: "Others",
    },
    Locale.JA: {
        Genre.VOCAL_SYNTH: "ボカロ・合成音声",
        Genre.MUSIC_GAME: "音ゲー",
        Genre.GAME: "ゲーム",
        Genre.MEME: "ネタ",
        Genre.POPS: "J-POP・ポップス",
        Genre.INSTRUMENTAL: "インスト",
        Genre.OTHERS: "その他",
    },
}


# --- Backgrounds --------------------------------------------------------------

_BACKGROUND_TITLE: dict[Locale, str] = {
    Locale.EN: "{name} ({version})",
    Locale.JA: "{name}（{version}）",
}

_BACKGROUND_VERSIONS: dict[Locale, dict[BackgroundVersion, str]] = {
    Locale.EN: {BackgroundVersion.V1: "Version 1", BackgroundVersion.V3: "Version 3"},
    Locale.JA: {BackgroundVersion.V1: "バージョン1", BackgroundVersion.V3: "バージョン3"},
}


# --- Time distances -----------------------------------------------------------

_TIME_UNITS: dict[Locale, dict[str, tuple[str, str]]] = {
    # unit -> (singular, plural)
    Locale.EN: {
        "less_than_x_minutes": ("less than a minute", "less than {count} minutes"),
        "x_minutes": ("1 minute", "{count} minutes"),
        "about_x_hours": ("about 1 hour", "about {count} hours"),
        "x_days": ("1 day", "{count} days"),
        "about_x_months": ("about 1 month", "about {count} months"),
        "x_months": ("1 month", "{count} months"),
        "about_x_years": ("about 1 year", "about {count} years"),
        "over_x_years": ("over 1 year", "over {count} years"),
        "almost_x_years": ("almost 1 year", "almost {count} years"),
    },
    Locale.JA: {
        "less_than_x_minutes": ("1分未満", "{count}分未満"),
        "x_minutes": ("1分", "{count}分"),
        "about_x_hours": ("約1時間", "約{count}時間"),
        "x_days": ("1日", "{count}日"),
        "about_x_months": ("約1ヶ月", "約{count}ヶ月"),
        "x_months": ("1ヶ月", "{count}ヶ月"),
        "about_x_years": ("約1年", "約{count}年"),
        "over_x_years": ("1年以上", "{count}年以上"),
        "almost_x_years": ("1年弱", "{count}年弱"),
    },
}


# --- Public API ---------------------------------------------------------------


def format_time_distance(locale: Locale, distance: TimeDistance) -> str:
    """Render a bucketed distance ("about 3 hours") in the given locale."""
    singular, plural = _TIME_UNITS[locale][distance.unit]
    if distance.count == 1:
        return singular
    return plural.format(count=distance.count)


def published_ago(locale: Locale, distance: TimeDistance) -> str:
    return _PUBLISHED_AT[locale].format(time=format_time_distance(locale, distance))


def visibility_label(locale: Locale, visibility: str) -> str:
    """Label for non-public states; public charts use published_ago()."""
    return _VISIBILITY_LABELS[locale][visibility]


def genre_label(locale: Locale, genre: Genre | str) -> str:
    return _GENRE_LABELS[locale][Genre(genre)]


def background_title(locale: Locale, name: str, version: BackgroundVersion) -> str:
    """Background item title: chart title plus the localized version label."""
    return _BACKGROUND_TITLE[locale].format(
        name=name, version=_BACKGROUND_VERSIONS[locale][version],
    )
