"""Query ranking used by the picker list."""

from .ranking import (
    CONTIGUOUS_BAND,
    NON_BOUNDARY_PENALTY,
    RECENCY_WEIGHT,
    SCATTERED_BAND,
    RankedEntry,
    filter_items,
    rank,
    relevance_score,
    scattered_match_score,
    strip_separators,
)

__all__ = [
    "CONTIGUOUS_BAND",
    "NON_BOUNDARY_PENALTY",
    "RECENCY_WEIGHT",
    "SCATTERED_BAND",
    "RankedEntry",
    "filter_items",
    "rank",
    "relevance_score",
    "scattered_match_score",
    "strip_separators",
]
