"""Domain enumerations for the portfolio application.

Enums represent fixed sets of domain values (e.g. content kind).
"""

from enum import Enum


class ContentKind(str, Enum):
    """Kind of searchable content.

    The value is the public "type" string returned by the search API.
    Member order is the fan-out order used to break ranking ties.
    """

    BLOG = "blog"
    PROJECT = "project"
    CASE_STUDY = "case-study"
    EXPERIENCE = "experience"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid kind values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [kind.value for kind in cls]
