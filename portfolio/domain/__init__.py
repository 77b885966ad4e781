"""Domain layer: enums and exceptions. No infrastructure imports."""

from portfolio.domain.enums import ContentKind
from portfolio.domain.exceptions import (
    ContentRepositoryException,
    PortfolioException,
    SqlNotConfiguredException,
)

__all__ = [
    "ContentKind",
    "ContentRepositoryException",
    "PortfolioException",
    "SqlNotConfiguredException",
]
