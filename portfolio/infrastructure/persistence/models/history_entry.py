"""HistoryEntry ORM model. Work-history row shown in the homepage experience section."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.infrastructure.persistence.database import Base
from portfolio.infrastructure.persistence.models.mixins import ActiveMixin, ContentModel


class HistoryEntry(ContentModel, ActiveMixin, Base):
    """Work-history entry. Table: experience_entry."""

    __tablename__ = "experience_entry"

    position: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    period: Mapped[str | None] = mapped_column(String(100), nullable=True)
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)  # e.g. Full-time
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
