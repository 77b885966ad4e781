"""ID and slug generators for content rows."""

import re
import unicodedata

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2) for a content row."""
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(f"Expected str from cuid_generator, got {type(result).__name__}")
    return result


def slugify(title: str) -> str:
    """URL slug for a title: ASCII, lowercase, words joined by hyphens.

    Returns "" when title has no ASCII letters or digits.
    """
    ascii_title = (
        unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_SLUG_CHARS.sub("-", ascii_title.lower()).strip("-")
