"""Synonym-based query expansion."""

from typing import Iterable, Mapping, Optional, Set

from .normalizer import tokenize


def _add_phrases(terms: Set[str], phrases: Iterable[str]) -> None:
    for phrase in phrases:
        terms.update(tokenize(phrase))


def expand(query: Optional[str], synonyms: Optional[Mapping[str, Iterable[str]]] = None) -> Set[str]:
    """
    Expand a query into the set of terms used for scoring.

    The query tokens are always kept. A synonym entry keyed by the whole
    trimmed query phrase contributes its tokens, and so does every entry keyed
    by one of the query tokens. Only one level is applied: terms added by a
    synonym are not expanded again.

    Args:
        query: Raw search query
        synonyms: Mapping of phrase to alternative phrases

    Returns:
        Deduplicated set of terms
    """
    phrase = (query or "").lower().strip()
    seed = tokenize(phrase)
    terms = set(seed)

    if not synonyms:
        return terms

    if phrase in synonyms:
        _add_phrases(terms, synonyms[phrase])

    for token in seed:
        if token in synonyms:
            _add_phrases(terms, synonyms[token])

    return terms
