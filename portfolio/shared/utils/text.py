"""Text helpers shared by repositories and search services."""

LIKE_ESCAPE_CHAR = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE wildcards so value matches literally.

    Pair with escape=LIKE_ESCAPE_CHAR in the ILIKE clause.
    """
    return (
        value.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", f"{LIKE_ESCAPE_CHAR}%")
        .replace("_", f"{LIKE_ESCAPE_CHAR}_")
    )


def contains_pattern(value: str) -> str:
    """Return a %value% LIKE pattern with wildcards in value escaped."""
    return f"%{escape_like(value)}%"


def truncate(value: str | None, length: int) -> str:
    """Return the first length characters of value ('' for None)."""
    if not value:
        return ""
    return value[:length]
