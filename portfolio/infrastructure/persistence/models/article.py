"""Article ORM model. Blog post shown under /blog/{slug}."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.infrastructure.persistence.database import Base
from portfolio.infrastructure.persistence.models.mixins import ContentModel, SlugMixin


class Article(ContentModel, SlugMixin, Base):
    """Blog article. Table: blog_post. Only published rows are searchable."""

    __tablename__ = "blog_post"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    tags: Mapped[str | None] = mapped_column(Text, nullable=True)  # comma-separated
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True
    )
