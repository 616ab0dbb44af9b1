"""Search API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import Settings
from ..core.engine import SearchEngine
from ..models.request import SearchRequest
from ..models.response import ExpandResponse, SearchResponse
from .deps import get_app_settings, get_engine

router = APIRouter(prefix="/api/v1", tags=["search"])


def _resolve_top_k(top_k: Optional[int], settings: Settings) -> int:
    if top_k is None:
        return settings.default_top_k
    return min(top_k, settings.max_top_k)


def _check_query_length(query: str, settings: Settings) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search icons",
    description="Rank icons by token overlap, file name and category relevance"
)
async def search_icons(
    q: str = Query("", description="Free-text search query"),
    category: Optional[List[str]] = Query(
        None,
        description="Restrict results to these categories (repeatable)"
    ),
    top_k: Optional[int] = Query(
        None,
        ge=1,
        description="Maximum number of results to return"
    ),
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> SearchResponse:
    """
    Search the icon index.

    Blank queries are valid and return no results.
    """
    _check_query_length(q, settings)
    category = [name for name in category or () if name and name.strip()]
    return engine.search(q, categories=category, top_k=_resolve_top_k(top_k, settings))


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search icons using a structured request body"
)
async def search_with_body(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> SearchResponse:
    """Search the icon index using a JSON request body."""
    _check_query_length(request.query, settings)
    return engine.search(
        request.query,
        categories=request.categories,
        top_k=_resolve_top_k(request.top_k, settings),
    )


@router.get(
    "/expand",
    response_model=ExpandResponse,
    summary="Expand a query",
    description="Show the terms a query is scored with after synonym expansion"
)
async def expand_query(
    q: str = Query("", description="Free-text search query"),
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> ExpandResponse:
    """Return the expanded terms for a query."""
    _check_query_length(q, settings)
    return ExpandResponse(query=q, terms=engine.expand(q))


@router.get(
    "/categories",
    response_model=List[str],
    summary="List categories",
    description="Get the distinct icon categories, sorted, for building filter controls"
)
async def list_categories(engine: SearchEngine = Depends(get_engine)) -> List[str]:
    """Get all icon categories."""
    return engine.categories()
