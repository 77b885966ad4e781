"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.application.interfaces.repositories import IContentRepository
from portfolio.application.use_cases.search import SearchService
from portfolio.core.config import Settings, get_settings
from portfolio.infrastructure.persistence.database import get_session_factory
from portfolio.infrastructure.persistence.repositories import (
    ArticleRepository,
    CaseStudyRepository,
    HistoryRepository,
    PortfolioRepository,
)


def get_content_repositories(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> list[IContentRepository]:
    """One read-only repository per content kind, each opening its own sessions."""
    return [
        ArticleRepository(session_factory),
        PortfolioRepository(session_factory),
        CaseStudyRepository(session_factory),
        HistoryRepository(session_factory),
    ]


def get_search_service(
    repositories: Annotated[list[IContentRepository], Depends(get_content_repositories)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    """Search use case configured from settings."""
    return SearchService(
        repositories,
        min_query_length=settings.search_min_query_length,
        max_limit=settings.search_max_limit,
        candidate_limit=settings.search_candidate_limit,
        suggestion_threshold=settings.search_suggestion_threshold,
        max_suggestions=settings.search_max_suggestions,
    )
