"""Alternate query terms offered when a search finds few results."""

from collections.abc import Iterable

from portfolio.application.dtos.search import SearchableItem

MIN_SUGGESTION_TOKEN_LENGTH = 4
DEFAULT_MAX_SUGGESTIONS = 5


def _overlaps(term: str, query: str) -> bool:
    return term in query or query in term


def suggest(
    query: str,
    pool: Iterable[SearchableItem],
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """Return up to max_suggestions unique lowercase terms related to query.

    Candidates, in pool order: title tokens longer than three characters and
    categories, each kept only when it is a substring of the query or the
    query is a substring of it. Insertion order is preserved, so the result
    is deterministic for a given pool order.
    """
    query = query.strip().lower()
    if not query:
        return []
    found: dict[str, None] = {}
    for item in pool:
        for token in item.title.lower().split():
            if len(token) >= MIN_SUGGESTION_TOKEN_LENGTH and _overlaps(token, query):
                found.setdefault(token)
        if item.category:
            category = item.category.strip().lower()
            if category and _overlaps(category, query):
                found.setdefault(category)
    return list(found)[:max_suggestions]
