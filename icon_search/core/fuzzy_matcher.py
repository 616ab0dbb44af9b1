"""Edit-distance matching for typo-tolerant token comparison."""

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two tokens.

    Insertions, deletions and substitutions each cost 1.

    Args:
        a: First token
        b: Second token

    Returns:
        Number of single-character edits turning ``a`` into ``b``
    """
    return Levenshtein.distance(a, b)


def within_distance(a: str, b: str, max_distance: int) -> bool:
    """Check whether ``a`` is at most ``max_distance`` edits away from ``b``."""
    if max_distance < 0:
        return False
    if a == b:
        return True
    # Cheap bound before running the full comparison
    if abs(len(a) - len(b)) > max_distance:
        return False
    # No two strings are further apart than the longer one's length
    max_distance = min(max_distance, max(len(a), len(b)))

    # With a cutoff, rapidfuzz stops early and returns cutoff + 1 past the bound
    return Levenshtein.distance(a, b, score_cutoff=max_distance) <= max_distance
