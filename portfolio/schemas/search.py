"""Search API schemas. JSON field names are camelCase for the site's search dialog."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio.application.dtos.search import ScoredResult, SearchOutcome
from portfolio.domain.enums import ContentKind


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResultItemResponse(_CamelModel):
    """Single search hit."""

    id: str
    title: str
    content: str
    type: ContentKind = Field(..., description=" | ".join(ContentKind.values()))
    slug: str | None = None
    category: str | None = None
    excerpt: str | None = None
    url: str
    relevance_score: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_result(cls, result: ScoredResult) -> "SearchResultItemResponse":
        item = result.item
        return cls(
            id=item.id,
            title=item.title,
            content=item.body,
            type=item.kind,
            slug=item.slug,
            category=item.category,
            excerpt=item.excerpt,
            url=item.url_path,
            relevance_score=result.relevance_score,
        )


class SearchResponse(_CamelModel):
    """Search response: ranked results plus suggestions when few results were found.

    success is False with message set when the query was too short to run.
    """

    success: bool = True
    message: str | None = None
    results: list[SearchResultItemResponse] = Field(default_factory=list)
    total_results: int = 0
    query: str = ""
    suggestions: list[str] = Field(default_factory=list)

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        return cls(
            success=outcome.success,
            message=outcome.message,
            results=[SearchResultItemResponse.from_result(r) for r in outcome.results],
            total_results=outcome.total_results,
            query=outcome.query,
            suggestions=list(outcome.suggestions),
        )


class SearchErrorResponse(_CamelModel):
    """Body returned with 500 when a content store fails. Carries no internal detail."""

    success: bool = False
    message: str
    results: list[SearchResultItemResponse] = Field(default_factory=list)
    total_results: int = 0
