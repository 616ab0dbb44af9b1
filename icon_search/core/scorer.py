"""Relevance scoring of a single index row."""

from typing import Iterable, Sequence

from ..models.config import CategoryBoost, FuzzySettings, SearchConfig
from ..models.index import IndexRow
from .fuzzy_matcher import within_distance


def overlap_count(terms: Iterable[str], tokens: Sequence[str], fuzzy: FuzzySettings) -> int:
    """
    Count query terms matching at least one row token.

    Every term is counted on its own, so a term given twice counts twice.

    Args:
        terms: Query terms
        tokens: Row tokens
        fuzzy: Fuzzy settings; when enabled a term also matches tokens within
            ``max_distance`` edits

    Returns:
        Number of matching terms
    """
    token_set = set(tokens)
    count = 0

    for term in terms:
        if term in token_set:
            count += 1
        elif fuzzy.enabled and any(
            within_distance(term, token, fuzzy.max_distance) for token in token_set
        ):
            count += 1

    return count


def filename_hit(terms: Iterable[str], file_name: str) -> int:
    """Return 1 if any non-empty term occurs in the lowercased file name."""
    lowered = file_name.lower()
    return 1 if any(term and term in lowered for term in terms) else 0


def category_boost(category: str, rules: Iterable[CategoryBoost]) -> float:
    """Sum the weights of every rule whose match text occurs in ``category``."""
    lowered = category.lower()
    total = 0.0

    for rule in rules:
        match = rule.match.lower()
        if match and match in lowered:
            total += rule.weight

    return total


def score(terms: Iterable[str], row: IndexRow, config: SearchConfig) -> float:
    """
    Compute the relevance score of ``row`` for the given query terms.

    Args:
        terms: Expanded query terms
        row: Index row to score
        config: Validated search configuration

    Returns:
        Weighted sum of term overlap, file name hit and category boost
    """
    terms = list(terms)
    weights = config.weights

    overlap = overlap_count(terms, row.tokens, config.fuzzy)
    file_hit = filename_hit(terms, row.file_name)
    boost = category_boost(row.category, config.category_boosts)

    return (
        overlap * weights.overlap
        + file_hit * weights.filename
        + boost * weights.category
    )
