"""Work-history repository. Returns HistoryRecord DTOs for active entries."""

from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.application.dtos.content import HistoryRecord
from portfolio.domain.enums import ContentKind
from portfolio.infrastructure.persistence.models.history_entry import HistoryEntry
from portfolio.infrastructure.persistence.repositories.base import ContentRepository


def _to_record(h: HistoryEntry) -> HistoryRecord:
    """Map ORM HistoryEntry to HistoryRecord."""
    return HistoryRecord(
        id=h.id,
        position=h.position,
        company=h.company,
        description=h.description or "",
        period=h.period,
        type=h.type,
    )


class HistoryRepository(ContentRepository[HistoryEntry]):
    """Work-history entries. Only active entries are searchable."""

    kind = ContentKind.EXPERIENCE
    searchable_columns = ("position", "company", "description", "type", "category")

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, HistoryEntry)

    def _visible(self) -> ColumnElement[bool]:
        return HistoryEntry.is_active.is_(True)

    def _to_record(self, row: HistoryEntry) -> HistoryRecord:
        return _to_record(row)
