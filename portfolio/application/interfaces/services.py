"""Service interfaces (ports) for the application layer."""

from typing import Any, Protocol


class ICacheService(Protocol):
    """Protocol for cache backends (e.g. Redis). Values are JSON-serializable."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds. Returns True on success."""
