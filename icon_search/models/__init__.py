"""Data models for icon search."""

from .config import CategoryBoost, FuzzySettings, ScoringWeights, SearchConfig
from .index import IndexRow, ScoredResult
from .request import SearchRequest
from .response import ErrorResponse, ExpandResponse, HealthResponse, SearchResponse

__all__ = [
    "CategoryBoost",
    "FuzzySettings",
    "ScoringWeights",
    "SearchConfig",
    "IndexRow",
    "ScoredResult",
    "SearchRequest",
    "SearchResponse",
    "ExpandResponse",
    "ErrorResponse",
    "HealthResponse",
]
