"""Pydantic request/response schemas for the API."""

from portfolio.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from portfolio.schemas.search import (
    SearchErrorResponse,
    SearchResponse,
    SearchResultItemResponse,
)

__all__ = [
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchErrorResponse",
    "SearchResponse",
    "SearchResultItemResponse",
]
