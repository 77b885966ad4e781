"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure and the fixed strings the
search API returns to clients.
"""

# Cache key prefixes
CACHE_PREFIX_SEARCH = "search"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Search response messages
SEARCH_QUERY_TOO_SHORT_MESSAGE = "Query must be at least {min_length} characters long"
SEARCH_INTERNAL_ERROR_MESSAGE = "Internal server error"

# Excerpt length for items without an explicit excerpt
EXCERPT_LENGTH = 150

# Anchor for work-history entries (no per-entry page)
EXPERIENCE_URL = "/#experience"
EXPERIENCE_CATEGORY = "Experience"
