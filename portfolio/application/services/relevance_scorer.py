"""Heuristic relevance scoring for content search.

Score = weighted substring and whole-word matches, normalized into [0, 1]:

    +100  title contains the whole query
    +50   per (query token, title token) pair where one contains the other
    +30   category contains the whole query
    +5    per non-overlapping occurrence of the query in the body
    +10   per whole-word occurrence of each query token in the body

Whole-word matching uses \b boundaries, so a token ending in punctuation
(such as "c++") only scores through the body substring rule.

The raw total is divided by DEFAULT_SCORE_NORMALIZER and capped at 1.0. The
normalizer is a tuning constant; the relative weights are what ranking
depends on (title >> category > body word > body substring).
"""

import re

TITLE_PHRASE_WEIGHT = 100
TITLE_TOKEN_WEIGHT = 50
CATEGORY_PHRASE_WEIGHT = 30
BODY_PHRASE_WEIGHT = 5
BODY_WORD_WEIGHT = 10

DEFAULT_SCORE_NORMALIZER = 200.0


def _word_pattern(token: str) -> re.Pattern[str]:
    """Whole-word pattern for token; regex metacharacters are matched literally."""
    return re.compile(rf"\b{re.escape(token)}\b", re.IGNORECASE)


def raw_score(query: str, title: str, body: str, category: str | None = None) -> int:
    """Return the unnormalized score. query must be non-empty after trimming."""
    query = query.lower()
    title = title.lower()
    body = body.lower()
    query_tokens = query.split()
    title_tokens = title.split()

    total = 0
    if query in title:
        total += TITLE_PHRASE_WEIGHT
    for query_token in query_tokens:
        for title_token in title_tokens:
            if query_token in title_token or title_token in query_token:
                total += TITLE_TOKEN_WEIGHT
    if category and query in category.lower():
        total += CATEGORY_PHRASE_WEIGHT
    total += BODY_PHRASE_WEIGHT * body.count(query)
    for query_token in query_tokens:
        total += BODY_WORD_WEIGHT * len(_word_pattern(query_token).findall(body))
    return total


def score(
    query: str,
    title: str,
    body: str,
    category: str | None = None,
    *,
    normalizer: float = DEFAULT_SCORE_NORMALIZER,
) -> float:
    """Return the relevance of (title, body, category) to query in [0, 1].

    Deterministic: depends only on its arguments.
    """
    return min(raw_score(query, title, body, category) / normalizer, 1.0)
