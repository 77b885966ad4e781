"""Portfolio repository. Returns PortfolioRecord DTOs for active projects."""

from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.application.dtos.content import PortfolioRecord
from portfolio.domain.enums import ContentKind
from portfolio.infrastructure.persistence.models.portfolio_item import PortfolioItem
from portfolio.infrastructure.persistence.repositories.base import ContentRepository


def _to_record(p: PortfolioItem) -> PortfolioRecord:
    """Map ORM PortfolioItem to PortfolioRecord."""
    return PortfolioRecord(
        id=p.id,
        title=p.title,
        description=p.description or "",
        slug=p.slug,
        type=p.type,
    )


class PortfolioRepository(ContentRepository[PortfolioItem]):
    """Portfolio projects. Only active projects are searchable."""

    kind = ContentKind.PROJECT
    searchable_columns = ("title", "description", "type", "challenge", "solution", "tags")

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, PortfolioItem)

    def _visible(self) -> ColumnElement[bool]:
        return PortfolioItem.is_active.is_(True)

    def _to_record(self, row: PortfolioItem) -> PortfolioRecord:
        return _to_record(row)
