"""Service test fixtures — async DB, seeded charts, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db, get_cache and get_asset_registry are overridden on the app;
      the lifespan never runs under ASGITransport
    - Seeded rows are written in one session and read back in another, so
      lookups exercise the store's eager loading rather than the identity map
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import cyanvas.models  # noqa: F401
from cyanvas.db.base import Base
from cyanvas.infrastructure.asset_registry import get_asset_registry
from cyanvas.infrastructure.cache import MemoryCache, get_cache
from cyanvas.infrastructure.database import get_db
from cyanvas.main import app
from cyanvas.models.chart import Chart
from cyanvas.models.co_author import CoAuthor
from cyanvas.models.file_resource import FileResource
from cyanvas.models.like import Like
from cyanvas.models.tag import Tag
from cyanvas.models.user import User
from tests.factories import FakeAssets

PUBLISHED = datetime.now(timezone.utc) - timedelta(days=3)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


def _resource(kind: str, chart_name: str) -> FileResource:
    return FileResource(
        kind=kind, sha1=f"{chart_name}-{kind}",
        url=f"https://cdn.example.com/{chart_name}/{kind}",
    )


@pytest.fixture
async def seed_charts(test_session_factory):
    """Two authors, a public root with variants, and charts across genres.

    Layout:
        root (pops, public, cover/bgm/data/chart/background_v3, 2 tags, 1 like)
          ├── root-v1 (pops, public)
          └── root-v2 (pops, private)
        meme-1, meme-2 (meme, public roots)
        hidden (pops, private root)
        plan (vocal_synth, scheduled root)
    """
    async with test_session_factory() as db:
        ann = User(handle="ann", name="Ann")
        bob = User(handle="bob", name="Bob")
        db.add_all([ann, bob])
        await db.flush()

        root = Chart(
            name="root", title="Root Song", composer="Comp", artist="Singer",
            description="The original", rating=30, genre="pops",
            visibility="public", published_at=PUBLISHED, author=ann,
            file_resources=[
                _resource(k, "root")
                for k in ("cover", "bgm", "data", "chart", "background_v3")
            ],
            tags=[Tag(name="fast"), Tag(name="finale")],
            likes=[Like(user_id=bob.id)],
            co_authors=[CoAuthor(user=bob)],
        )
        db.add(root)
        await db.flush()

        db.add_all([
            Chart(
                name="root-v1", title="Root Easy", composer="Comp", genre="pops",
                visibility="public", published_at=PUBLISHED, author=bob,
                variant_id=root.id,
            ),
            Chart(
                name="root-v2", title="Root Hard", composer="Comp", genre="pops",
                visibility="private", author=ann, variant_id=root.id,
            ),
            Chart(
                name="meme-1", title="Meme One", composer="M", genre="meme",
                visibility="public", published_at=PUBLISHED, author=bob,
            ),
            Chart(
                name="meme-2", title="Meme Two", composer="M", genre="meme",
                visibility="public", published_at=PUBLISHED, author=bob,
            ),
            Chart(
                name="hidden", title="Hidden", composer="H", genre="pops",
                visibility="private", author=ann,
            ),
            Chart(
                name="plan", title="Planned", composer="P", genre="vocal_synth",
                visibility="scheduled",
                scheduled_at=datetime.now(timezone.utc) + timedelta(days=1),
                author=ann,
            ),
        ])
        await db.commit()
        return {"ann": ann.id, "bob": bob.id, "root": root.id}


@pytest.fixture
def memory_cache():
    return MemoryCache()


@pytest.fixture
def fake_assets():
    return FakeAssets()


@pytest.fixture
async def client(test_session_factory, memory_cache, fake_assets):
    """FastAPI test client with DB, cache and asset dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: memory_cache
    app.dependency_overrides[get_asset_registry] = lambda: fake_assets

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
