"""Persistence repositories. Re-exports for dependency injection."""

from portfolio.infrastructure.persistence.repositories.article_repo import ArticleRepository
from portfolio.infrastructure.persistence.repositories.base import ContentRepository
from portfolio.infrastructure.persistence.repositories.case_study_repo import (
    CaseStudyRepository,
)
from portfolio.infrastructure.persistence.repositories.history_repo import HistoryRepository
from portfolio.infrastructure.persistence.repositories.portfolio_repo import (
    PortfolioRepository,
)

__all__ = [
    "ArticleRepository",
    "CaseStudyRepository",
    "ContentRepository",
    "HistoryRepository",
    "PortfolioRepository",
]
