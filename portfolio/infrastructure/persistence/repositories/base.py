"""Base content repository: case-insensitive substring search over text columns."""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.application.dtos.content import ContentRecord
from portfolio.domain.enums import ContentKind
from portfolio.infrastructure.persistence.database import Base
from portfolio.shared.utils.text import LIKE_ESCAPE_CHAR, contains_pattern


ModelType = TypeVar("ModelType", bound=Base)


class ContentRepository(Generic[ModelType]):
    """Read-only repository for one searchable content kind.

    Subclasses set kind and searchable_columns and implement _visible and
    _to_record. Each find_matching call opens its own session from the
    factory, so calls on different repositories may run concurrently.
    """

    kind: ContentKind
    searchable_columns: tuple[str, ...] = ()

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model: type[ModelType],
    ) -> None:
        self.session_factory = session_factory
        self.model = model

    def _visible(self) -> ColumnElement[bool]:
        """Filter for rows the public site may show (published / active)."""
        raise NotImplementedError

    def _to_record(self, row: ModelType) -> ContentRecord:
        """Map an ORM row to its application record."""
        raise NotImplementedError

    async def find_matching(self, query: str, limit: int) -> Sequence[ContentRecord]:
        """Return visible rows with query in any searchable column (ILIKE), newest first."""
        model: Any = self.model
        pattern = contains_pattern(query)
        stmt = (
            select(self.model)
            .where(
                self._visible(),
                or_(
                    *(
                        getattr(model, column).ilike(pattern, escape=LIKE_ESCAPE_CHAR)
                        for column in self.searchable_columns
                    )
                ),
            )
            .order_by(model.created_at.desc(), model.id.asc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_record(row) for row in rows]
