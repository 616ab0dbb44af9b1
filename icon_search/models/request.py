"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field("", description="Free-text search query")
    categories: List[str] = Field(
        default_factory=list, description="Restrict results to these categories"
    )
    top_k: Optional[int] = Field(
        None, ge=1, description="Maximum number of results to return"
    )

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: List[str]) -> List[str]:
        """Drop blank category names."""
        return [category for category in v if category and category.strip()]
