"""GET /api/search tests. Content repositories are in-memory fakes (see conftest)."""

import logging

from httpx import AsyncClient

from portfolio.application.dtos.content import (
    ArticleRecord,
    CaseStudyRecord,
    HistoryRecord,
    PortfolioRecord,
)
from portfolio.domain.enums import ContentKind
from portfolio.domain.exceptions import SqlNotConfiguredException
from portfolio.infrastructure.cache.keys import search_key
from portfolio.infrastructure.persistence.database import get_session_factory
from portfolio.main import app
from tests.conftest import FakeContentRepository, make_repositories

MARKETING_ARTICLE = ArticleRecord(
    id="a1",
    title="How AI is Transforming Marketing",
    content="Marketing with AI. Smarter marketing. Measurable marketing.",
    slug="ai-marketing",
    category="AI & Marketing",
)


async def test_search_returns_camel_case_results(client: AsyncClient, use_repositories) -> None:
    case_study = CaseStudyRecord(
        id="c1",
        title="Rebuilding the Checkout Flow",
        description="The redesign also covered marketing pages.",
        slug="checkout",
    )
    use_repositories(make_repositories(articles=[MARKETING_ARTICLE], case_studies=[case_study]))

    response = await client.get("/api/search", params={"q": "marketing"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["query"] == "marketing"
    assert data["totalResults"] == 2
    assert [r["id"] for r in data["results"]] == ["a1", "c1"]
    first = data["results"][0]
    assert first == {
        "id": "a1",
        "title": "How AI is Transforming Marketing",
        "content": MARKETING_ARTICLE.content,
        "type": "blog",
        "slug": "ai-marketing",
        "category": "AI & Marketing",
        "excerpt": MARKETING_ARTICLE.content,
        "url": "/blog/ai-marketing",
        "relevanceScore": first["relevanceScore"],
    }
    assert first["relevanceScore"] > 0.5
    assert data["results"][1]["type"] == "case-study"
    assert data["results"][1]["url"] == "/case-study/checkout"
    assert data["suggestions"] == ["marketing", "ai & marketing"]


async def test_search_all_kinds(client: AsyncClient, use_repositories) -> None:
    use_repositories(
        make_repositories(
            articles=[ArticleRecord(id="a1", title="Design notes", content="")],
            projects=[PortfolioRecord(id="p1", title="Design system", description="", type="UI")],
            case_studies=[CaseStudyRecord(id="c1", title="Design sprint", description="")],
            history=[HistoryRecord(id="h1", position="Design Lead", company="Acme", description="")],
        )
    )
    response = await client.get("/api/search", params={"q": "design"})
    data = response.json()
    assert [r["type"] for r in data["results"]] == [kind.value for kind in ContentKind]
    assert data["results"][3]["url"] == "/#experience"
    assert data["results"][3]["title"] == "Design Lead at Acme"
    assert data["suggestions"] == []


async def test_short_query_returns_unsuccessful_200(client: AsyncClient, use_repositories) -> None:
    repositories = make_repositories(articles=[MARKETING_ARTICLE])
    use_repositories(repositories)

    response = await client.get("/api/search", params={"q": "a"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Query must be at least 2 characters long"
    assert data["results"] == []
    assert data["totalResults"] == 0
    assert all(repo.calls == [] for repo in repositories)


async def test_missing_query_is_treated_as_empty(client: AsyncClient, use_repositories) -> None:
    use_repositories(make_repositories())
    response = await client.get("/api/search")
    assert response.status_code == 200
    assert response.json()["success"] is False


async def test_long_query_runs_a_normal_search(client: AsyncClient, use_repositories) -> None:
    use_repositories(make_repositories(articles=[MARKETING_ARTICLE]))
    response = await client.get("/api/search", params={"q": "x" * 600})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["results"] == []


async def test_limit_is_applied(client: AsyncClient, use_repositories) -> None:
    articles = [ArticleRecord(id=f"a{i}", title=f"Python {i}", content="") for i in range(8)]
    use_repositories(make_repositories(articles=articles))

    response = await client.get("/api/search", params={"q": "python", "limit": 5})

    data = response.json()
    assert len(data["results"]) == 5
    assert data["totalResults"] == 8


async def test_limit_above_max_is_clamped(client: AsyncClient, use_repositories) -> None:
    articles = [ArticleRecord(id=f"a{i}", title=f"Python {i}", content="") for i in range(60)]
    repositories = make_repositories(articles=articles)
    use_repositories(repositories)

    response = await client.get("/api/search", params={"q": "python", "limit": 500})

    assert response.status_code == 200
    data = response.json()
    # Candidates are capped per kind at the candidate limit (50) as well.
    assert len(data["results"]) == 50
    assert repositories[0].calls == [("python", 50)]


async def test_limit_below_one_is_rejected(client: AsyncClient, use_repositories) -> None:
    use_repositories(make_repositories())
    response = await client.get("/api/search", params={"q": "python", "limit": 0})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_special_characters_are_safe(client: AsyncClient, use_repositories) -> None:
    use_repositories(
        make_repositories(articles=[ArticleRecord(id="a1", title="Modern C++", content="")])
    )
    response = await client.get("/api/search", params={"q": "c++"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert [r["id"] for r in data["results"]] == ["a1"]


async def test_repository_failure_returns_generic_500(
    client: AsyncClient, use_repositories
) -> None:
    repositories = make_repositories(articles=[MARKETING_ARTICLE])
    repositories[1] = FakeContentRepository(
        ContentKind.PROJECT, error=RuntimeError("password authentication failed")
    )
    use_repositories(repositories)

    response = await client.get("/api/search", params={"q": "marketing"})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Internal server error",
        "results": [],
        "totalResults": 0,
    }


async def test_successful_response_is_cached(
    client: AsyncClient, use_repositories, fake_cache
) -> None:
    repositories = make_repositories(articles=[MARKETING_ARTICLE])
    use_repositories(repositories)

    first = await client.get("/api/search", params={"q": "Marketing"})
    second = await client.get("/api/search", params={"q": "marketing "})

    assert first.status_code == second.status_code == 200
    assert search_key("marketing", 20) in fake_cache.store
    assert repositories[0].calls == [("Marketing", 50)]
    assert second.json()["results"] == first.json()["results"]
    assert first.json()["query"] == "Marketing"
    assert second.json()["query"] == "marketing"


async def test_cache_hit_logs_search_record(
    client: AsyncClient, use_repositories, fake_cache, caplog
) -> None:
    use_repositories(make_repositories(articles=[MARKETING_ARTICLE]))
    await client.get("/api/search", params={"q": "marketing"})

    caplog.clear()
    with caplog.at_level(logging.INFO):
        await client.get("/api/search", params={"q": "MARKETING"})

    records = [r for r in caplog.records if hasattr(r, "search_query")]
    assert len(records) == 1
    assert records[0].search_query == "MARKETING"
    assert records[0].results_count == 1
    assert records[0].total_content_scanned == 0
    assert records[0].cache_hit is True


async def test_short_query_is_not_cached(
    client: AsyncClient, use_repositories, fake_cache
) -> None:
    use_repositories(make_repositories())
    await client.get("/api/search", params={"q": "a"})
    assert fake_cache.store == {}


async def test_search_without_database_returns_503(client: AsyncClient) -> None:
    def _not_configured():
        raise SqlNotConfiguredException()

    app.dependency_overrides[get_session_factory] = _not_configured
    try:
        response = await client.get("/api/search", params={"q": "python"})
    finally:
        app.dependency_overrides.pop(get_session_factory, None)

    assert response.status_code == 503
    assert response.json()["error"] == "SQL_NOT_CONFIGURED"
