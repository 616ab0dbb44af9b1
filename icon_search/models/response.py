"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .index import ScoredResult


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    terms: List[str] = Field(..., description="Expanded query terms used for scoring")
    categories: List[str] = Field(default_factory=list, description="Category filter applied")
    total_results: int = Field(..., description="Number of results returned")
    results: List[ScoredResult] = Field(..., description="Ranked results")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ExpandResponse(BaseModel):
    """Response for query expansion lookups."""

    query: str = Field(..., description="Original search query")
    terms: List[str] = Field(..., description="Expanded terms, sorted")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    total_icons: int = Field(..., description="Rows in the loaded index")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
