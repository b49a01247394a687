"""Relevance ranking for picker queries.

Scores are banded so that exact substring hits always beat separator-insensitive
hits, which in turn beat scattered subsequence hits. Lower scores rank first.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Characters stripped before the two fuzzy tiers.
_SEPARATOR_RE = re.compile(r"[-_/.\s]")
# Characters that end a word after an exact hit (``:`` counts here but is not stripped).
_BOUNDARY_CHARS = frozenset("-_:/.")

NON_BOUNDARY_PENALTY = 0.5
CONTIGUOUS_BAND = 1000
SCATTERED_BAND = 2000
RECENCY_WEIGHT = 0.01


@dataclass(frozen=True)
class RankedEntry(Generic[T]):
    """One matching item with its recency-adjusted and raw tier scores."""

    item: T
    score: float
    original_index: int
    base_score: float


def strip_separators(text: str) -> str:
    return _SEPARATOR_RE.sub("", text)


def _is_word_boundary(ch: str) -> bool:
    return ch.isspace() or ch in _BOUNDARY_CHARS


def scattered_match_score(text: str, query: str) -> int | None:
    """Greedy in-order character match; returns ``first + spread`` or ``None``."""
    if not query:
        return 0
    first = -1
    last = -1
    query_idx = 0
    for text_idx, ch in enumerate(text):
        if ch != query[query_idx]:
            continue
        if first < 0:
            first = text_idx
        last = text_idx
        query_idx += 1
        if query_idx == len(query):
            return first + (last - first)
    return None


def relevance_score(text: str, query: str) -> float | None:
    """Return the tier score of ``query`` against ``text``, or ``None`` for no match."""
    text_folded = text.lower()
    query_folded = query.lower()

    match_idx = text_folded.find(query_folded)
    if match_idx >= 0:
        after = match_idx + len(query_folded)
        if after < len(text_folded) and not _is_word_boundary(text_folded[after]):
            return match_idx + NON_BOUNDARY_PENALTY
        return float(match_idx)

    text_stripped = strip_separators(text_folded)
    query_stripped = strip_separators(query_folded)

    match_idx = text_stripped.find(query_stripped)
    if match_idx >= 0:
        return float(CONTIGUOUS_BAND + match_idx)

    scattered = scattered_match_score(text_stripped, query_stripped)
    if scattered is not None:
        return float(SCATTERED_BAND + scattered)
    return None


def rank(
    items: Sequence[T],
    query: str,
    get_search_text: Callable[[T], str],
) -> list[RankedEntry[T]]:
    """Score, filter and order ``items`` for ``query``.

    An empty query keeps every item in input order with ``score`` equal to the
    input position. Otherwise items are ordered by tier score, and equal tier
    scores fall back to input position so earlier (more recent) items win.
    """
    if not query:
        return [
            RankedEntry(item=item, score=float(idx), original_index=idx, base_score=float(idx))
            for idx, item in enumerate(items)
        ]

    ranked: list[RankedEntry[T]] = []
    for idx, item in enumerate(items):
        base = relevance_score(get_search_text(item), query)
        if base is None:
            continue
        ranked.append(
            RankedEntry(
                item=item,
                score=base + idx * RECENCY_WEIGHT,
                original_index=idx,
                base_score=base,
            )
        )
    ranked.sort(key=lambda entry: (entry.base_score, entry.original_index))
    return ranked


def filter_items(
    items: Sequence[T],
    query: str,
    get_search_text: Callable[[T], str],
) -> list[T]:
    """Return the ranked items only."""
    if not query:
        return list(items)
    return [entry.item for entry in rank(items, query, get_search_text)]
