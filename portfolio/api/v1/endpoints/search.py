"""Search API: relevance search across blog, projects, case studies, and experience."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from portfolio.api.v1.dependencies import get_search_service
from portfolio.application.interfaces.services import ICacheService
from portfolio.application.use_cases.search import SearchService
from portfolio.core.config import get_settings
from portfolio.core.constants import SEARCH_INTERNAL_ERROR_MESSAGE
from portfolio.core.limiter import limit_search
from portfolio.domain.exceptions import ContentRepositoryException
from portfolio.infrastructure.cache.keys import search_key
from portfolio.schemas.search import SearchErrorResponse, SearchResponse
from portfolio.shared.telemetry.tracing import set_span_error

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_cache(request: Request) -> ICacheService | None:
    cache = getattr(request.app.state, "cache", None)
    if cache is None or not cache.is_available():
        return None
    return cache


def _from_cache(cached: dict, raw_query: str) -> SearchResponse:
    """Rebuild a cached response for this caller's query.

    Keys ignore case and surrounding whitespace, so query is reset to the
    caller's trimmed text. Nothing is scanned on a hit.
    """
    response = SearchResponse.model_validate(cached)
    response.query = raw_query.strip()
    logger.info(
        "Search served from cache: query=%r results=%d",
        response.query,
        len(response.results),
        extra={
            "search_query": response.query,
            "results_count": len(response.results),
            "total_content_scanned": 0,
            "cache_hit": True,
        },
    )
    return response


@router.get(
    "",
    response_model=SearchResponse,
    responses={500: {"description": "A content store failed", "model": SearchErrorResponse}},
)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", description="Search text (at least 2 characters)"),
    limit: int | None = Query(None, ge=1, description="Max results (default 20, capped at 50)"),
) -> SearchResponse | JSONResponse:
    """Search published content and return results ranked by relevance.

    A query that is too short returns 200 with success=false and a message.
    A failing content store returns 500 with a generic message.
    """
    settings = get_settings()
    effective_limit = min(limit or settings.search_default_limit, settings.search_max_limit)

    cache = _get_cache(request)
    cache_key = search_key(q, effective_limit)
    if cache is not None:
        cached = await cache.get(cache_key)
        if cached is not None:
            return _from_cache(cached, q)

    try:
        outcome = await search_svc.search(q, effective_limit)
    except ContentRepositoryException as exc:
        logger.error("Search failed for %d content kind(s): %s", len(exc.failed_kinds), exc.message)
        set_span_error(exc)
        return JSONResponse(
            status_code=500,
            content=SearchErrorResponse(message=SEARCH_INTERNAL_ERROR_MESSAGE).model_dump(
                by_alias=True
            ),
        )

    response = SearchResponse.from_outcome(outcome)
    if cache is not None and outcome.success:
        await cache.set(
            cache_key,
            response.model_dump(mode="json", by_alias=True),
            ttl=settings.cache_ttl_search,
        )
    return response
