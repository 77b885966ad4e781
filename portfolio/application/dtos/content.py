"""Native content records returned by the content repositories (no ORM dependency).

ContentRecord is a closed union: every consumer matches exhaustively on the
four record types.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleRecord:
    """Published blog article."""

    id: str
    title: str
    content: str
    slug: str | None = None
    excerpt: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class PortfolioRecord:
    """Active portfolio project. type is the project's display category."""

    id: str
    title: str
    description: str
    slug: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class CaseStudyRecord:
    """Active case study."""

    id: str
    title: str
    description: str
    slug: str | None = None
    category: str | None = None
    challenge: str | None = None
    solution: str | None = None


@dataclass(frozen=True)
class HistoryRecord:
    """Active work-history entry."""

    id: str
    position: str
    company: str
    description: str
    period: str | None = None
    type: str | None = None


ContentRecord = ArticleRecord | PortfolioRecord | CaseStudyRecord | HistoryRecord
