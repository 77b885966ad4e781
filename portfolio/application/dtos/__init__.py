"""Application DTOs (no ORM dependency)."""

from portfolio.application.dtos.content import (
    ArticleRecord,
    CaseStudyRecord,
    ContentRecord,
    HistoryRecord,
    PortfolioRecord,
)
from portfolio.application.dtos.search import (
    ScoredResult,
    SearchableItem,
    SearchOutcome,
)

__all__ = [
    "ArticleRecord",
    "CaseStudyRecord",
    "ContentRecord",
    "HistoryRecord",
    "PortfolioRecord",
    "ScoredResult",
    "SearchableItem",
    "SearchOutcome",
]
