"""Tests for cache key builders."""

from portfolio.infrastructure.cache.keys import search_key, search_pattern


def test_search_key_format() -> None:
    key = search_key("python", 20)
    prefix, limit, digest = key.split(":")
    assert prefix == "search"
    assert limit == "20"
    assert len(digest) == 64


def test_search_key_ignores_case_and_surrounding_whitespace() -> None:
    assert search_key("  Python ", 20) == search_key("python", 20)


def test_search_key_differs_by_query_and_limit() -> None:
    assert search_key("python", 20) != search_key("django", 20)
    assert search_key("python", 20) != search_key("python", 5)


def test_search_key_hashes_separator_characters() -> None:
    assert search_key("a:b:c", 20).count(":") == 2


def test_search_pattern_matches_search_keys() -> None:
    assert search_pattern() == "search:*"
    assert search_key("python", 20).startswith(search_pattern()[:-1])
