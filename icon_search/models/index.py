"""Icon index row models."""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IndexRow(BaseModel):
    """One icon entry from the precomputed metadata index."""

    # Upstream loaders may attach extra metadata; it is kept and passed through.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str = Field(default="", description="Icon identifier")
    file_name: str = Field(default="", alias="fileName", description="SVG file name")
    category: str = Field(default="", description="Icon category")
    tokens: Tuple[str, ...] = Field(default=(), description="Pre-tokenized search terms")
    full_path: str = Field(default="", alias="fullPath", description="Path to the SVG file")

    @field_validator("id", "file_name", "category", "full_path", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("tokens", mode="before")
    @classmethod
    def coerce_tokens(cls, v: Any) -> Tuple[str, ...]:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(t for t in v if isinstance(t, str))


class ScoredResult(IndexRow):
    """An index row with its relevance score attached."""

    score: float = Field(..., description="Relevance score, rounded to 3 decimals")

    @classmethod
    def from_row(cls, row: IndexRow, score: float) -> "ScoredResult":
        """Copy ``row`` into a new result; the source row is left untouched."""
        return cls.model_validate({**row.model_dump(), "score": round(score, 3)})
