"""PortfolioItem ORM model. Project shown under /project/{slug}."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.infrastructure.persistence.database import Base
from portfolio.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    ContentModel,
    SlugMixin,
)


class PortfolioItem(ContentModel, SlugMixin, ActiveMixin, Base):
    """Portfolio project. Table: project. type doubles as the display category."""

    __tablename__ = "project"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    challenge: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[str | None] = mapped_column(Text, nullable=True)  # comma-separated
