"""Domain Types — enums and identity types shared by the chart core.

Invariants:
    - All valid states encoded as str Enums — no raw string matching
    - Enum values are the exact strings stored in the DB and emitted over the wire
    - ResourceKind has exactly nine members (one per asset slot)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ChartId = NewType("ChartId", int)
UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Visibility(str, Enum):
    """Chart visibility — gates which fields and assets are exposed."""
    PRIVATE = "private"
    PUBLIC = "public"
    SCHEDULED = "scheduled"


class Genre(str, Enum):
    """Discovery categories. OTHERS never gets a genre badge on the wire."""
    VOCAL_SYNTH = "vocal_synth"
    MUSIC_GAME = "music_game"
    GAME = "game"
    MEME = "meme"
    POPS = "pops"
    INSTRUMENTAL = "instrumental"
    OTHERS = "others"


class ChartType(str, Enum):
    """Notation format of the uploaded chart file. Metadata only."""
    SUS = "sus"
    MMWS = "mmws"
    CHS = "chs"
    VUSC = "vusc"
    CCMMWS = "ccmmws"


class ResourceKind(str, Enum):
    """The nine asset slots a chart may fill, at most one asset each."""
    CHART = "chart"
    BGM = "bgm"
    COVER = "cover"
    PREVIEW = "preview"
    DATA = "data"
    BACKGROUND_V1 = "background_v1"
    BACKGROUND_V3 = "background_v3"
    BACKGROUND_TABLET_V1 = "background_tablet_v1"
    BACKGROUND_TABLET_V3 = "background_tablet_v3"


class BackgroundVersion(str, Enum):
    """Background renderer generations served to the game client."""
    V1 = "v1"
    V3 = "v3"

    @property
    def resource_kind(self) -> ResourceKind:
        return ResourceKind(f"background_{self.value}")


class Locale(str, Enum):
    """Supported localizations for wire-facing strings."""
    EN = "en"
    JA = "ja"
