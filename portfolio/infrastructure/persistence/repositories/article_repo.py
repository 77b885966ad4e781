"""Article repository. Returns ArticleRecord DTOs for published posts."""

from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio.application.dtos.content import ArticleRecord
from portfolio.domain.enums import ContentKind
from portfolio.infrastructure.persistence.models.article import Article
from portfolio.infrastructure.persistence.repositories.base import ContentRepository


def _to_record(a: Article) -> ArticleRecord:
    """Map ORM Article to ArticleRecord."""
    return ArticleRecord(
        id=a.id,
        title=a.title,
        content=a.content or "",
        slug=a.slug,
        excerpt=a.excerpt,
        category=a.category,
    )


class ArticleRepository(ContentRepository[Article]):
    """Blog articles. Only published posts are searchable."""

    kind = ContentKind.BLOG
    searchable_columns = ("title", "content", "excerpt", "category", "tags")

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory, Article)

    def _visible(self) -> ColumnElement[bool]:
        return Article.published.is_(True)

    def _to_record(self, row: Article) -> ArticleRecord:
        return _to_record(row)
