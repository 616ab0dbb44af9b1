"""
Icon Search - relevance-ranked text search over a precomputed icon metadata index.

Queries are tokenized, expanded with configured synonyms, and scored against
each icon by token overlap (optionally typo-tolerant), file name hits and
category boosts.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.config import SearchConfig
from .models.index import IndexRow, ScoredResult

__all__ = [
    "SearchEngine",
    "SearchConfig",
    "IndexRow",
    "ScoredResult",
]
