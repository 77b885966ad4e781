"""Case study repository. Returns CaseStudyRecord DTOs for active case studies."""

from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.application.dtos.content import CaseStudyRecord
from portfolio.domain.enums import ContentKind
from portfolio.infrastructure.persistence.models.case_study import CaseStudy
from portfolio.infrastructure.persistence.repositories.base import ContentRepository


def _to_record(c: CaseStudy) -> CaseStudyRecord:
    """Map ORM CaseStudy to CaseStudyRecord."""
    return CaseStudyRecord(
        id=c.id,
        title=c.title,
        description=c.description or "",
        slug=c.slug,
        category=c.category,
        challenge=c.challenge,
        solution=c.solution,
    )


class CaseStudyRepository(ContentRepository[CaseStudy]):
    """Case studies. Only active case studies are searchable."""

    kind = ContentKind.CASE_STUDY
    searchable_columns = (
        "title",
        "subtitle",
        "description",
        "category",
        "challenge",
        "solution",
    )

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, CaseStudy)

    def _visible(self) -> ColumnElement[bool]:
        return CaseStudy.is_active.is_(True)

    def _to_record(self, row: CaseStudy) -> CaseStudyRecord:
        return _to_record(row)
