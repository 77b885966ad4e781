"""Shared utilities: generators and text helpers."""

from portfolio.shared.utils.generators import generate_cuid, slugify
from portfolio.shared.utils.text import contains_pattern, escape_like, truncate

__all__ = [
    "generate_cuid",
    "slugify",
    "contains_pattern",
    "escape_like",
    "truncate",
]
