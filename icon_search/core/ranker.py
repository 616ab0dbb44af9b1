"""Filtering, ranking and truncation of the icon index."""

from typing import Iterable, List, Optional, Sequence

from ..models.config import SearchConfig
from ..models.index import IndexRow, ScoredResult
from .normalizer import tokenize
from .scorer import score
from .synonyms import expand


def query_terms(query: Optional[str], config: SearchConfig) -> List[str]:
    """
    Resolve the terms a query is scored with, in sorted order.

    Falls back to the plain tokenization when expansion yields nothing.
    """
    terms = expand(query, config.synonyms)
    if not terms:
        return tokenize(query)
    return sorted(terms)


def search(
    index: Sequence[IndexRow],
    config: SearchConfig,
    query: Optional[str],
    category_filter: Optional[Iterable[str]],
    top_k: int,
) -> List[ScoredResult]:
    """
    Rank index rows against a query.

    Args:
        index: Loaded index rows; never modified
        config: Validated search configuration
        query: Raw search query
        category_filter: Categories to keep; empty or ``None`` keeps every row
        top_k: Maximum number of results

    Returns:
        Positively scored rows, highest score first, ties broken by file name
    """
    if top_k <= 0:
        return []

    terms = query_terms(query, config)
    allowed = set(category_filter or ())

    candidates = index
    if allowed:
        candidates = [row for row in index if row.category in allowed]

    scored = []
    for row in candidates:
        value = score(terms, row, config)
        if value > 0:
            scored.append((value, row))

    # Case-insensitive file name order first, raw name to keep ties deterministic
    scored.sort(key=lambda item: (-item[0], item[1].file_name.casefold(), item[1].file_name))

    return [ScoredResult.from_row(row, value) for value, row in scored[:top_k]]


def categories(index: Iterable[IndexRow]) -> List[str]:
    """Distinct category values of the index, sorted ascending."""
    return sorted({row.category for row in index})
