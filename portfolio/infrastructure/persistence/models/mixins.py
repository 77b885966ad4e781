"""Column mixins shared by the searchable content tables.

ContentModel gives every table a CUID2 primary key and server-side
timestamps (created_at drives the newest-first candidate order).
SlugMixin and ActiveMixin add the public URL slug and the visibility flag
where a table has them.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from portfolio.shared.utils.generators import generate_cuid


class CuidMixin:
    """CUID2 string primary key, generated client-side."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """created_at / updated_at, timezone-aware, set by the database."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class SlugMixin:
    """Unique URL slug; rows without one are linked by id."""

    @declared_attr
    def slug(cls) -> Mapped[str | None]:
        return mapped_column(String(255), nullable=True, unique=True)


class ActiveMixin:
    """Visibility flag for tables the admin can hide without deleting."""

    @declared_attr
    def is_active(cls) -> Mapped[bool]:
        return mapped_column(Boolean, nullable=False, default=True, index=True)


class ContentModel(CuidMixin, TimestampMixin):
    """Base columns of every searchable content table."""

    __abstract__ = True
