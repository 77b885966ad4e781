"""Tests for alternate query suggestions."""

from portfolio.application.dtos.search import SearchableItem
from portfolio.application.services.suggestion_generator import suggest
from portfolio.domain.enums import ContentKind


def _item(title: str, category: str | None = None) -> SearchableItem:
    return SearchableItem(
        id=title,
        title=title,
        body="",
        kind=ContentKind.BLOG,
        url_path=f"/blog/{title}",
        category=category,
    )


def test_title_tokens_overlapping_query_in_either_direction() -> None:
    pool = [_item("Marketing Automation Tools"), _item("Market Research")]
    assert suggest("automation tools", pool) == ["automation", "tools"]
    # "marketing" equals the query; "market" is contained in it.
    assert suggest("marketing", pool) == ["marketing", "market"]


def test_short_title_tokens_are_ignored() -> None:
    pool = [_item("AI and ML")]
    assert suggest("ai", pool) == []


def test_categories_are_lowercased_and_included() -> None:
    pool = [_item("Unrelated", category="Growth")]
    assert suggest("growth hacking", pool) == ["growth"]


def test_suggestions_are_unique_and_ordered_by_pool() -> None:
    pool = [
        _item("Design Systems", category="Design"),
        _item("design tokens"),
        _item("Designers at Work"),
    ]
    assert suggest("design", pool) == ["design", "designers"]


def test_suggestions_capped() -> None:
    pool = [_item(f"python{i} notes") for i in range(10)]
    result = suggest("python", pool)
    assert result == [f"python{i}" for i in range(5)]
    assert suggest("python", pool, max_suggestions=2) == ["python0", "python1"]


def test_empty_query_or_pool() -> None:
    assert suggest("   ", [_item("Anything")]) == []
    assert suggest("python", []) == []
