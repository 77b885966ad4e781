"""Content repository integration tests against in-memory SQLite.

Covers visibility filters, case-insensitive matching across columns,
literal handling of LIKE wildcards, ordering, and the candidate limit.
"""

from datetime import datetime, timedelta, timezone

from portfolio.application.dtos.content import (
    ArticleRecord,
    CaseStudyRecord,
    HistoryRecord,
    PortfolioRecord,
)
from portfolio.application.use_cases.search import SearchService
from portfolio.infrastructure.persistence.models import (
    Article,
    CaseStudy,
    HistoryEntry,
    PortfolioItem,
)
from portfolio.infrastructure.persistence.repositories import (
    ArticleRepository,
    CaseStudyRepository,
    HistoryRepository,
    PortfolioRepository,
)

_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _add(session_factory, *rows) -> None:
    async with session_factory() as session:
        session.add_all(rows)
        await session.commit()


async def test_articles_only_published(session_factory) -> None:
    await _add(
        session_factory,
        Article(title="Python Tips", content="", published=True),
        Article(title="Python Draft", content="", published=False),
    )
    records = await ArticleRepository(session_factory).find_matching("python", 50)
    assert [r.title for r in records] == ["Python Tips"]
    assert isinstance(records[0], ArticleRecord)


async def test_article_matches_any_column_case_insensitive(session_factory) -> None:
    await _add(
        session_factory,
        Article(title="A", content="All about FastAPI", published=True),
        Article(title="B", content="", category="fastapi", published=True),
        Article(title="C", content="", tags="python,FASTAPI", published=True),
        Article(title="D", content="", excerpt="Why FastApi?", published=True),
        Article(title="E", content="Django", published=True),
    )
    records = await ArticleRepository(session_factory).find_matching("FastAPI", 50)
    assert sorted(r.title for r in records) == ["A", "B", "C", "D"]


async def test_like_wildcards_match_literally(session_factory) -> None:
    await _add(
        session_factory,
        Article(title="Save 50% today", content="", published=True),
        Article(title="Save 500 today", content="", published=True),
        Article(title="snake_case names", content="", published=True),
        Article(title="snakeXcase names", content="", published=True),
    )
    repo = ArticleRepository(session_factory)
    assert [r.title for r in await repo.find_matching("50%", 50)] == ["Save 50% today"]
    assert [r.title for r in await repo.find_matching("snake_case", 50)] == ["snake_case names"]


async def test_newest_first_and_limit(session_factory) -> None:
    await _add(
        session_factory,
        *(
            Article(
                title=f"Python {i}",
                content="",
                published=True,
                created_at=_NOW + timedelta(days=i),
            )
            for i in range(5)
        ),
    )
    records = await ArticleRepository(session_factory).find_matching("python", 3)
    assert [r.title for r in records] == ["Python 4", "Python 3", "Python 2"]


async def test_projects_only_active(session_factory) -> None:
    await _add(
        session_factory,
        PortfolioItem(title="Storefront", description="Shop", type="Web", slug="shop"),
        PortfolioItem(title="Old Storefront", description="", is_active=False),
    )
    records = await PortfolioRepository(session_factory).find_matching("storefront", 50)
    assert records == [
        PortfolioRecord(
            id=records[0].id, title="Storefront", description="Shop", slug="shop", type="Web"
        )
    ]


async def test_case_study_matches_challenge_and_solution(session_factory) -> None:
    await _add(
        session_factory,
        CaseStudy(title="One", description="", challenge="Legacy billing"),
        CaseStudy(title="Two", description="", solution="New billing engine"),
        CaseStudy(title="Three", description="billing", is_active=False),
    )
    records = await CaseStudyRepository(session_factory).find_matching("billing", 50)
    assert sorted(r.title for r in records) == ["One", "Two"]
    assert all(isinstance(r, CaseStudyRecord) for r in records)


async def test_history_matches_company_and_position(session_factory) -> None:
    await _add(
        session_factory,
        HistoryEntry(position="Engineer", company="Acme", description="", period="2020"),
        HistoryEntry(position="Acme Consultant", company="Globex", description=""),
        HistoryEntry(position="Intern", company="Acme", description="", is_active=False),
    )
    records = await HistoryRepository(session_factory).find_matching("acme", 50)
    assert sorted(r.position for r in records) == ["Acme Consultant", "Engineer"]
    assert all(isinstance(r, HistoryRecord) for r in records)


async def test_search_service_over_database(session_factory) -> None:
    await _add(
        session_factory,
        Article(
            title="How AI is Transforming Marketing",
            slug="ai-marketing",
            content="Marketing with AI. Smarter marketing. Measurable marketing.",
            category="AI & Marketing",
            published=True,
        ),
        CaseStudy(title="Checkout", description="Covered marketing pages too."),
        HistoryEntry(position="Engineer", company="Acme", description="No match here."),
    )
    service = SearchService(
        [
            ArticleRepository(session_factory),
            PortfolioRepository(session_factory),
            CaseStudyRepository(session_factory),
            HistoryRepository(session_factory),
        ]
    )

    outcome = await service.search("marketing", 20)

    assert [r.item.url_path for r in outcome.results] == [
        "/blog/ai-marketing",
        f"/case-study/{outcome.results[1].item.id}",
    ]
    assert outcome.results[0].relevance_score > 0.5
    assert outcome.total_results == 2
