"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from portfolio.infrastructure or portfolio.api.
"""

from portfolio.application.interfaces.repositories import IContentRepository
from portfolio.application.interfaces.services import ICacheService

__all__ = ["IContentRepository", "ICacheService"]
