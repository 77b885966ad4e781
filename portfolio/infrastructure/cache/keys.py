"""Cache key builders. Single place for key format.

Free-text components (search queries) are hashed so keys stay short and
never contain CACHE_KEY_SEP.
"""

import hashlib

from portfolio.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_SEARCH


def _digest(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def search_key(query: str, limit: int) -> str:
    """Cache key for a search response. Query is trimmed and case-folded first."""
    normalized = query.strip().lower()
    return f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}{limit}{CACHE_KEY_SEP}{_digest(normalized)}"


def search_pattern() -> str:
    """SCAN match pattern covering every cached search response."""
    return f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}*"
