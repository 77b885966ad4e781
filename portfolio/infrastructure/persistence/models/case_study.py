"""CaseStudy ORM model. Case study shown under /case-study/{slug}."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.infrastructure.persistence.database import Base
from portfolio.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    ContentModel,
    SlugMixin,
)


class CaseStudy(ContentModel, SlugMixin, ActiveMixin, Base):
    """Client case study. Table: case_study."""

    __tablename__ = "case_study"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    subtitle: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    challenge: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
