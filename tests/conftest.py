"""Pytest configuration and fixtures for portfolio search.

Uses portfolio.main:app for HTTP tests. Search tests swap the content
repositories for in-memory fakes through app.dependency_overrides, so no
database is needed outside tests/integration (which uses in-memory SQLite).
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portfolio.api.v1.dependencies import get_search_service
from portfolio.application.dtos.content import ContentRecord
from portfolio.application.use_cases.search import SearchService
from portfolio.core.limiter import limiter
from portfolio.domain.enums import ContentKind
from portfolio.infrastructure.persistence.database import Base
from portfolio.main import app


class FakeContentRepository:
    """In-memory IContentRepository. Returns its records (up to limit) or raises error."""

    def __init__(
        self,
        kind: ContentKind,
        records: Sequence[ContentRecord] = (),
        error: Exception | None = None,
    ) -> None:
        self._kind = kind
        self.records = list(records)
        self.error = error
        self.calls: list[tuple[str, int]] = []

    @property
    def kind(self) -> ContentKind:
        return self._kind

    async def find_matching(self, query: str, limit: int) -> list[ContentRecord]:
        self.calls.append((query, limit))
        if self.error is not None:
            raise self.error
        return self.records[:limit]


class FakeCache:
    """Dict-backed ICacheService."""

    def __init__(self) -> None:
        self.store: dict[str, Any] = {}

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any | None:
        return self.store.get(key)

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        self.store[key] = value
        return True


def make_repositories(
    articles: Sequence[ContentRecord] = (),
    projects: Sequence[ContentRecord] = (),
    case_studies: Sequence[ContentRecord] = (),
    history: Sequence[ContentRecord] = (),
) -> list[FakeContentRepository]:
    """One fake repository per content kind, in ContentKind order."""
    return [
        FakeContentRepository(ContentKind.BLOG, articles),
        FakeContentRepository(ContentKind.PROJECT, projects),
        FakeContentRepository(ContentKind.CASE_STUDY, case_studies),
        FakeContentRepository(ContentKind.EXPERIENCE, history),
    ]


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> Iterator[None]:
    """Each test starts with empty rate-limit counters."""
    limiter.reset()
    yield


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def use_repositories() -> Iterator[Callable[[list[FakeContentRepository]], None]]:
    """Install fake repositories behind GET /api/search for one test."""

    def install(repositories: list[FakeContentRepository]) -> None:
        app.dependency_overrides[get_search_service] = lambda: SearchService(repositories)

    yield install
    app.dependency_overrides.pop(get_search_service, None)


@pytest.fixture
def fake_cache() -> Iterator[FakeCache]:
    """Attach a FakeCache as app.state.cache for one test."""
    cache = FakeCache()
    previous = getattr(app.state, "cache", None)
    app.state.cache = cache
    yield cache
    app.state.cache = previous


@pytest.fixture
async def session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory over a fresh in-memory SQLite database with all content tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, expire_on_commit=False)
    await engine.dispose()
