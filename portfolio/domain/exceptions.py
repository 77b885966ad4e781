"""Domain exceptions for the portfolio application.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PortfolioException(Exception):
    """Base exception for all portfolio application errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging. Presentation layer maps these to HTTP
    responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ContentRepositoryException(PortfolioException):
    """Raised when one or more content stores fail during a query.

    The whole request fails; no partial result set is returned.
    details["failed_kinds"] lists the content kinds whose query raised and
    details["errors"] maps each kind to the underlying error message (for
    logs only; never sent to clients).
    """

    def __init__(self, errors: dict[str, str]) -> None:
        failed = sorted(errors)
        super().__init__(
            f"Content repository query failed: {', '.join(failed)}",
            "CONTENT_REPOSITORY_ERROR",
            {"failed_kinds": failed, "errors": dict(errors)},
        )

    @property
    def failed_kinds(self) -> list[str]:
        return list(self.details["failed_kinds"])


class SqlNotConfiguredException(PortfolioException):
    """Raised when a database session is requested but no engine could be built."""

    def __init__(self) -> None:
        super().__init__(
            "SQL database is not configured. Set DATABASE_URL to an async driver URL.",
            "SQL_NOT_CONFIGURED",
        )
