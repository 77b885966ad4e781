"""Persistence models: ORM entities and mixins."""

from portfolio.infrastructure.persistence.models.article import Article
from portfolio.infrastructure.persistence.models.case_study import CaseStudy
from portfolio.infrastructure.persistence.models.history_entry import HistoryEntry
from portfolio.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    ContentModel,
    CuidMixin,
    SlugMixin,
    TimestampMixin,
)
from portfolio.infrastructure.persistence.models.portfolio_item import PortfolioItem

__all__ = [
    "Article",
    "CaseStudy",
    "HistoryEntry",
    "PortfolioItem",
    "ActiveMixin",
    "ContentModel",
    "SlugMixin",
    "CuidMixin",
    "TimestampMixin",
]
