"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Counters live in the configured storage
backend (RATE_LIMIT_STORAGE_URI), so several server instances can share one
Redis store instead of each keeping its own in-process map.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from portfolio.core.config import get_settings

_settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=_settings.rate_limit_storage_uri,
    enabled=_settings.rate_limit_enabled,
)

# Single source of truth for rate limit strings and decorators.
SEARCH_LIMIT = _settings.search_rate_limit

limit_search = limiter.limit(SEARCH_LIMIT)
