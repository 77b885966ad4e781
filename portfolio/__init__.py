"""Portfolio content search service."""
