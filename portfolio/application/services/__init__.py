"""Application services: relevance scoring, result normalization, suggestions."""

from portfolio.application.services import relevance_scorer
from portfolio.application.services.result_normalizer import normalize
from portfolio.application.services.suggestion_generator import suggest

__all__ = ["normalize", "relevance_scorer", "suggest"]
