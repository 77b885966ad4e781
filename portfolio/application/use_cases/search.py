"""Content search use case: fan out to content repositories, rank, suggest."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from portfolio.application.dtos.search import ScoredResult, SearchableItem, SearchOutcome
from portfolio.application.services import relevance_scorer
from portfolio.application.services.result_normalizer import normalize
from portfolio.application.services.suggestion_generator import (
    DEFAULT_MAX_SUGGESTIONS,
    suggest,
)
from portfolio.core.constants import SEARCH_QUERY_TOO_SHORT_MESSAGE
from portfolio.domain.enums import ContentKind
from portfolio.domain.exceptions import ContentRepositoryException
from portfolio.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from portfolio.application.interfaces.repositories import IContentRepository

logger = logging.getLogger(__name__)

_KIND_ORDER = {kind: index for index, kind in enumerate(ContentKind)}


class SearchService:
    """Relevance search across articles, portfolio items, case studies, and work history.

    Repositories are queried concurrently and always merged in ContentKind
    order (blog, project, case-study, experience), which is the tie-break
    for equal scores. Any repository failure fails the whole search with
    ContentRepositoryException; partial results are never returned.
    """

    def __init__(
        self,
        repositories: Sequence[IContentRepository],
        *,
        min_query_length: int = 2,
        max_limit: int = 50,
        candidate_limit: int = 50,
        suggestion_threshold: int = 3,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        score_normalizer: float = relevance_scorer.DEFAULT_SCORE_NORMALIZER,
    ) -> None:
        self.repositories = sorted(repositories, key=lambda r: _KIND_ORDER[r.kind])
        self.min_query_length = min_query_length
        self.max_limit = max_limit
        self.candidate_limit = candidate_limit
        self.suggestion_threshold = suggestion_threshold
        self.max_suggestions = max_suggestions
        self.score_normalizer = score_normalizer

    @traced("search.content")
    async def search(self, raw_query: str, limit: int = 20) -> SearchOutcome:
        """Search all content kinds for raw_query and return at most limit results.

        A query shorter than min_query_length after trimming returns an
        unsuccessful outcome with a message and touches no repository.
        """
        query = (raw_query or "").strip()
        if len(query) < self.min_query_length:
            return SearchOutcome(
                query=query,
                success=False,
                message=SEARCH_QUERY_TOO_SHORT_MESSAGE.format(
                    min_length=self.min_query_length
                ),
            )
        limit = max(1, min(limit, self.max_limit))

        candidates = await self._fetch_candidates(query)
        ranked = self._rank(query, candidates)
        results = ranked[:limit]
        suggestions = (
            suggest(query, candidates, self.max_suggestions)
            if len(results) < self.suggestion_threshold
            else []
        )

        logger.info(
            "Search completed: query=%r results=%d scanned=%d",
            query,
            len(results),
            len(candidates),
            extra={
                "search_query": query,
                "results_count": len(results),
                "total_content_scanned": len(candidates),
            },
        )
        add_span_attributes(
            search_results_count=len(results),
            search_content_scanned=len(candidates),
        )
        return SearchOutcome(
            query=query,
            results=results,
            total_results=len(ranked),
            suggestions=suggestions,
        )

    async def _fetch_candidates(self, query: str) -> list[SearchableItem]:
        """Query every repository concurrently; normalize in repository order."""
        batches = await asyncio.gather(
            *(repo.find_matching(query, self.candidate_limit) for repo in self.repositories),
            return_exceptions=True,
        )
        errors: dict[str, str] = {}
        candidates: list[SearchableItem] = []
        for repo, batch in zip(self.repositories, batches):
            if isinstance(batch, Exception):
                logger.error(
                    "Content repository '%s' failed during search: %s",
                    repo.kind.value,
                    batch,
                    exc_info=batch,
                )
                errors[repo.kind.value] = str(batch) or type(batch).__name__
                continue
            if isinstance(batch, BaseException):
                raise batch
            candidates.extend(normalize(record) for record in batch)
        if errors:
            raise ContentRepositoryException(errors)
        return candidates

    def _rank(self, query: str, candidates: list[SearchableItem]) -> list[ScoredResult]:
        """Score candidates, drop zero scores, sort descending (stable)."""
        scored: list[ScoredResult] = []
        for item in candidates:
            relevance = relevance_scorer.score(
                query,
                item.title,
                item.body,
                item.category,
                normalizer=self.score_normalizer,
            )
            if relevance > 0:
                scored.append(ScoredResult(item=item, relevance_score=relevance))
        return sorted(scored, key=lambda r: r.relevance_score, reverse=True)
