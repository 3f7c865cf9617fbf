"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM models satisfy the *Like
      protocols without inheriting from them
    - Store and cache protocols are async because implementations do IO;
      the serializers that consume loaded charts are plain functions
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Awaitable, Callable, Protocol, Sequence, TypeVar

from cyanvas.core.domain_types import ChartId, Genre, Visibility

T = TypeVar("T")


class UserLike(Protocol):
    """Structural contract for the owning user / co-author."""
    id: int
    handle: str
    name: str

    @property
    def display_handle(self) -> str: ...

    def to_author_view(self) -> dict: ...


class FileResourceLike(Protocol):
    """Structural contract for an attached asset."""
    kind: str
    sha1: str
    url: str

    def to_asset_ref(self) -> dict: ...


class LikeLike(Protocol):
    user_id: int


class TagLike(Protocol):
    name: str


class CoAuthorLike(Protocol):
    user: UserLike


class ChartLike(Protocol):
    """Structural contract for Chart objects passed to the serializers.

    Relationships must already be loaded; serializers never trigger IO.
    """
    id: int
    name: str
    title: str
    composer: str
    artist: str | None
    description: str | None
    rating: int
    genre: str
    visibility: str
    author_name: str | None
    published_at: datetime | None
    scheduled_at: datetime | None
    updated_at: datetime | None
    variant_id: int | None
    author: UserLike | None
    co_authors: Sequence[CoAuthorLike]
    file_resources: Sequence[FileResourceLike]
    likes: Sequence[LikeLike]
    tags: Sequence[TagLike]
    variant_of: "ChartLike | None"
    child_variants: Sequence["ChartLike"]


@dataclass(frozen=True)
class ChartCriteria:
    """Attribute filter understood by every ChartStore.

    None means "do not filter on this attribute".
    """
    genre: Genre | None = None
    visibility: Visibility | None = None
    root_only: bool = False

    @classmethod
    def listed(cls, genre: Genre) -> "ChartCriteria":
        """Public root charts of one genre — the discovery eligibility predicate."""
        return cls(genre=genre, visibility=Visibility.PUBLIC, root_only=True)


class ChartStore(Protocol):
    """Contract for chart lookup — implemented by shell."""
    async def find_by_id(self, chart_id: ChartId) -> ChartLike: ...
    async def find_by_name(self, name: str) -> ChartLike: ...
    async def find_many(self, chart_ids: Sequence[ChartId]) -> list[ChartLike]: ...
    async def list_ids_where(self, criteria: ChartCriteria) -> list[ChartId]: ...
    async def count_where(self, criteria: ChartCriteria) -> int: ...


class CacheStore(Protocol):
    """Contract for the shared cache service — implemented by shell."""
    async def get_or_compute(
        self, key: str, ttl_seconds: float,
        compute: Callable[[], Awaitable[T]],
    ) -> T: ...


class AssetRegistry(Protocol):
    """Contract for pre-packaged engine/background assets."""
    def get_item(self, kind: str, name: str) -> dict[str, Any]: ...
    def get_static(self, path: str) -> dict[str, str]: ...
