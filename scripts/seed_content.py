"""Seed portfolio content from docs/seed-content.json into the database.

Creates the content tables if missing, then inserts articles, projects,
case studies, and experience entries. Rows whose slug (or, for experience,
position + company) already exists are skipped. Cached search responses are
invalidated afterwards when Redis is enabled.

Usage:
    python -m scripts.seed_content [path/to/seed-content.json]

Default path: docs/seed-content.json (relative to project root).
Requires: DATABASE_URL (async driver URL).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.config import get_settings
from portfolio.infrastructure.cache import CacheService, search_pattern
from portfolio.infrastructure.persistence.database import (
    Base,
    dispose_engine,
    get_engine,
    get_session_factory,
)
from portfolio.infrastructure.persistence.models import (
    Article,
    CaseStudy,
    HistoryEntry,
    PortfolioItem,
)
from portfolio.shared.utils import slugify


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def _slug_exists(session: AsyncSession, model: Any, slug: str | None) -> bool:
    if not slug:
        return False
    result = await session.execute(select(model.id).where(model.slug == slug))
    return result.first() is not None


async def _experience_exists(session: AsyncSession, position: str, company: str) -> bool:
    result = await session.execute(
        select(HistoryEntry.id).where(
            HistoryEntry.position == position, HistoryEntry.company == company
        )
    )
    return result.first() is not None


def _with_slug(row: dict[str, Any]) -> dict[str, Any]:
    """Fill a missing slug from the title."""
    if not row.get("slug"):
        return {**row, "slug": slugify(row["title"]) or None}
    return row


async def seed(path: Path) -> dict[str, int]:
    """Insert content from path. Returns the number of rows created per table."""
    data = json.loads(path.read_text(encoding="utf-8"))
    engine = get_engine()
    if engine is None:
        raise SystemExit("DATABASE_URL is not set")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    created = {"articles": 0, "projects": 0, "case_studies": 0, "experience": 0}
    session_factory = get_session_factory()
    async with session_factory() as session:
        for row in map(_with_slug, data.get("articles", [])):
            if await _slug_exists(session, Article, row.get("slug")):
                print(f"  Article {row['slug']} already exists, skip")
                continue
            session.add(Article(**row))
            created["articles"] += 1
            print(f"  Article {row['title']}")

        for row in map(_with_slug, data.get("projects", [])):
            if await _slug_exists(session, PortfolioItem, row.get("slug")):
                print(f"  Project {row['slug']} already exists, skip")
                continue
            session.add(PortfolioItem(**row))
            created["projects"] += 1
            print(f"  Project {row['title']}")

        for row in map(_with_slug, data.get("case_studies", [])):
            if await _slug_exists(session, CaseStudy, row.get("slug")):
                print(f"  Case study {row['slug']} already exists, skip")
                continue
            session.add(CaseStudy(**row))
            created["case_studies"] += 1
            print(f"  Case study {row['title']}")

        for row in data.get("experience", []):
            if await _experience_exists(session, row["position"], row["company"]):
                print(f"  Experience {row['position']} at {row['company']} already exists, skip")
                continue
            session.add(HistoryEntry(**row))
            created["experience"] += 1
            print(f"  Experience {row['position']} at {row['company']}")

        await session.commit()
    return created


async def _invalidate_search_cache() -> None:
    if not get_settings().redis_enabled:
        return
    cache = CacheService()
    await cache.connect()
    try:
        deleted = await cache.delete_pattern(search_pattern())
        print(f"Invalidated {deleted} cached search response(s)")
    finally:
        await cache.disconnect()


async def main(path: Path) -> None:
    try:
        created = await seed(path)
        print("Created:", ", ".join(f"{k}={v}" for k, v in created.items()))
        await _invalidate_search_cache()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    _load_env()
    seed_path = (
        Path(sys.argv[1]) if len(sys.argv) > 1 else _project_root() / "docs" / "seed-content.json"
    )
    asyncio.run(main(seed_path))
