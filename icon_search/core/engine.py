"""Search engine bound to a loaded icon index and configuration."""

import time
from typing import Iterable, List, Optional, Sequence

import structlog

from ..models.config import SearchConfig
from ..models.index import IndexRow
from ..models.response import SearchResponse
from . import ranker

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Runs searches over an immutable index with a fixed configuration."""

    def __init__(self, index: Sequence[IndexRow], config: SearchConfig) -> None:
        """
        Initialize the search engine.

        Args:
            index: Loaded index rows
            config: Validated search configuration
        """
        self._index = tuple(index)
        self._config = config
        self._categories = ranker.categories(self._index)

    @property
    def index(self) -> Sequence[IndexRow]:
        return self._index

    @property
    def config(self) -> SearchConfig:
        return self._config

    def search(
        self,
        query: str,
        top_k: int,
        categories: Optional[Iterable[str]] = None,
    ) -> SearchResponse:
        """
        Search the index and wrap the ranked rows in a response.

        Args:
            query: Raw search query
            top_k: Maximum number of results
            categories: Optional category filter

        Returns:
            SearchResponse with results and timing metadata
        """
        start_time = time.time()
        category_filter = sorted(set(categories or ()))

        results = ranker.search(self._index, self._config, query, category_filter, top_k)
        execution_time = (time.time() - start_time) * 1000

        logger.debug(
            "Search completed",
            query=query,
            categories=category_filter,
            top_k=top_k,
            total_results=len(results),
            execution_time_ms=round(execution_time, 3),
        )

        return SearchResponse(
            query=query,
            terms=self.expand(query),
            categories=category_filter,
            total_results=len(results),
            results=results,
            execution_time_ms=execution_time,
        )

    def expand(self, query: str) -> List[str]:
        """Terms the query is scored with, sorted."""
        return ranker.query_terms(query, self._config)

    def categories(self) -> List[str]:
        """Sorted distinct categories of the loaded index."""
        return list(self._categories)

    def get_stats(self) -> dict:
        """Get index and configuration statistics."""
        return {
            "total_icons": len(self._index),
            "total_categories": len(self._categories),
            "total_synonyms": len(self._config.synonyms),
            "total_category_boosts": len(self._config.category_boosts),
            "fuzzy_enabled": self._config.fuzzy.enabled,
        }
