"""DTOs for content search results (no dependency on ORM)."""

from dataclasses import dataclass, field

from portfolio.domain.enums import ContentKind


@dataclass(frozen=True)
class SearchableItem:
    """Kind-agnostic shape every content record is normalized into before scoring."""

    id: str
    title: str
    body: str
    kind: ContentKind
    url_path: str
    category: str | None = None
    slug: str | None = None
    excerpt: str | None = None


@dataclass(frozen=True)
class ScoredResult:
    """A SearchableItem with its relevance score in [0, 1]."""

    item: SearchableItem
    relevance_score: float


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search request.

    success is False (with message set) only for a query too short to run.
    total_results counts every non-zero match before truncation to the limit.
    """

    query: str
    results: list[ScoredResult] = field(default_factory=list)
    total_results: int = 0
    suggestions: list[str] = field(default_factory=list)
    success: bool = True
    message: str | None = None
