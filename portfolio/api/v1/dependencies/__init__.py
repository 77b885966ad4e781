"""Presentation-layer dependency injection (composition root).

Routes depend only on these dependencies, not on infrastructure directly.
"""

from portfolio.api.v1.dependencies.search import (
    get_content_repositories,
    get_search_service,
)

__all__ = ["get_content_repositories", "get_search_service"]
