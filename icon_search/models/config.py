"""Search configuration schema and numeric coercion helpers."""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def parse_float(value: Any, default: float) -> float:
    """
    Parse a configured number, falling back to ``default`` when it cannot be read.

    Booleans are not numbers here, and neither are NaN or infinities.

    Args:
        value: Raw value from the config document
        default: Value returned when ``value`` is not a usable number

    Returns:
        Parsed float or ``default``
    """
    if isinstance(value, bool):
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    if parsed != parsed or parsed in (float("inf"), float("-inf")):
        return default
    return parsed


def parse_int(value: Any, default: int) -> int:
    """Parse a configured integer; fractional values are truncated."""
    parsed = parse_float(value, float("nan"))
    if parsed != parsed:
        return default
    return int(parsed)


def parse_flag(value: Any) -> bool:
    """Read a loosely typed on/off switch."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ScoringWeights(BaseModel):
    """Multipliers applied to each scoring signal."""

    model_config = ConfigDict(frozen=True)

    overlap: float = Field(default=2.0, description="Weight per matching query term")
    filename: float = Field(default=1.0, description="Weight of a file name substring hit")
    category: float = Field(default=1.0, description="Weight of the summed category boosts")

    @field_validator("overlap", "filename", "category", mode="before")
    @classmethod
    def coerce_weight(cls, v: Any, info: ValidationInfo) -> float:
        # null means "not configured"; anything else unreadable contributes nothing
        if v is None:
            return cls.model_fields[info.field_name].default
        return parse_float(v, 0.0)


class CategoryBoost(BaseModel):
    """Adds ``weight`` when ``match`` occurs in a row's category (case-insensitive)."""

    model_config = ConfigDict(frozen=True)

    match: str = ""
    weight: float = 0.0

    @field_validator("match", mode="before")
    @classmethod
    def coerce_match(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("weight", mode="before")
    @classmethod
    def coerce_weight(cls, v: Any) -> float:
        return parse_float(v, 0.0)


class FuzzySettings(BaseModel):
    """Optional edit-distance matching of query terms against row tokens."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    enabled: bool = False
    max_distance: int = Field(default=1, alias="maxDistance")

    @field_validator("enabled", mode="before")
    @classmethod
    def coerce_enabled(cls, v: Any) -> bool:
        return parse_flag(v)

    @field_validator("max_distance", mode="before")
    @classmethod
    def coerce_max_distance(cls, v: Any) -> int:
        return parse_int(v, 1)


class SearchConfig(BaseModel):
    """
    Scoring configuration for a search call.

    Every field is optional and falls back to the documented defaults, so
    ``SearchConfig()`` is the default configuration. Instances are frozen and
    validated once at load time; scoring never re-checks them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    category_boosts: Tuple[CategoryBoost, ...] = Field(default=(), alias="categoryBoosts")
    synonyms: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    fuzzy: FuzzySettings = Field(default_factory=FuzzySettings)

    @field_validator("weights", "fuzzy", mode="before")
    @classmethod
    def coerce_section(cls, v: Any) -> Any:
        if v is None or not isinstance(v, (dict, BaseModel)):
            return {}
        return v

    @field_validator("category_boosts", mode="before")
    @classmethod
    def coerce_boosts(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(rule for rule in v if isinstance(rule, (dict, CategoryBoost)))

    @field_validator("synonyms", mode="before")
    @classmethod
    def coerce_synonyms(cls, v: Any) -> Dict[str, Tuple[str, ...]]:
        if not isinstance(v, dict):
            return {}

        synonyms = {}
        for phrase, alternatives in v.items():
            if not isinstance(phrase, str):
                continue
            if isinstance(alternatives, str):
                alternatives = [alternatives]
            if not isinstance(alternatives, (list, tuple)):
                continue
            synonyms[phrase] = tuple(a for a in alternatives if isinstance(a, str))
        return synonyms
