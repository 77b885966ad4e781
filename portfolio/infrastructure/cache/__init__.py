"""Cache: Redis service and cache key utilities.

CacheService uses portfolio.core.config; key format is in keys.py.
"""

from portfolio.infrastructure.cache.keys import search_key, search_pattern
from portfolio.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheService",
    "search_key",
    "search_pattern",
]
