"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from portfolio.application.dtos.content import ContentRecord
    from portfolio.domain.enums import ContentKind


class IContentRepository(Protocol):
    """Protocol for a read-only content store queried by search."""

    @property
    def kind(self) -> ContentKind:
        """Content kind this repository returns."""

    async def find_matching(self, query: str, limit: int) -> Sequence[ContentRecord]:
        """Return visible records whose searchable text contains query (case-insensitive).

        At most limit records; newest first.
        """
