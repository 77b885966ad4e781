"""Map native content records into the kind-agnostic SearchableItem shape."""

from typing import assert_never

from portfolio.application.dtos.content import (
    ArticleRecord,
    CaseStudyRecord,
    ContentRecord,
    HistoryRecord,
    PortfolioRecord,
)
from portfolio.application.dtos.search import SearchableItem
from portfolio.core.constants import EXCERPT_LENGTH, EXPERIENCE_CATEGORY, EXPERIENCE_URL
from portfolio.domain.enums import ContentKind
from portfolio.shared.utils.text import truncate


def _join_present(*parts: str | None, sep: str = " ") -> str:
    return sep.join(p for p in parts if p)


def _history_excerpt(record: HistoryRecord) -> str | None:
    return _join_present(record.period, record.type, sep=" • ") or None


def normalize(record: ContentRecord) -> SearchableItem:
    """Return the SearchableItem for record.

    Never raises on missing optional fields: a missing slug falls back to
    the id in URLs, a missing excerpt to the truncated body, and missing
    text to "".
    """
    match record:
        case ArticleRecord():
            body = record.content or ""
            return SearchableItem(
                id=record.id,
                title=record.title or "",
                body=body,
                kind=ContentKind.BLOG,
                url_path=f"/blog/{record.slug or record.id}",
                category=record.category or None,
                slug=record.slug,
                excerpt=record.excerpt or truncate(body, EXCERPT_LENGTH) or None,
            )
        case PortfolioRecord():
            return SearchableItem(
                id=record.id,
                title=record.title or "",
                body=record.description or "",
                kind=ContentKind.PROJECT,
                url_path=f"/project/{record.slug or record.id}",
                category=record.type or None,
                slug=record.slug,
                excerpt=truncate(record.description, EXCERPT_LENGTH) or None,
            )
        case CaseStudyRecord():
            return SearchableItem(
                id=record.id,
                title=record.title or "",
                body=_join_present(record.description, record.challenge, record.solution),
                kind=ContentKind.CASE_STUDY,
                url_path=f"/case-study/{record.slug or record.id}",
                category=record.category or None,
                slug=record.slug,
                excerpt=truncate(record.description, EXCERPT_LENGTH) or None,
            )
        case HistoryRecord():
            return SearchableItem(
                id=record.id,
                title=f"{record.position} at {record.company}",
                body=record.description or "",
                kind=ContentKind.EXPERIENCE,
                url_path=EXPERIENCE_URL,
                category=EXPERIENCE_CATEGORY,
                excerpt=_history_excerpt(record),
            )
        case _:
            assert_never(record)
