"""API v1: routers and dependencies."""

from portfolio.api.v1.router import api_router

__all__ = ["api_router"]
