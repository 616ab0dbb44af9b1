"""Loading of the icon index and search configuration from JSON files."""

import json
import os
from typing import Any, Tuple

import structlog
from pydantic import ValidationError

from .models.config import SearchConfig
from .models.index import IndexRow

logger = structlog.get_logger(__name__)


class DataLoadError(Exception):
    """Raised when the index or search configuration cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataLoadError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e


def load_index(path: str) -> Tuple[IndexRow, ...]:
    """
    Load the icon index.

    Args:
        path: Path to a JSON array of index rows

    Returns:
        Tuple of validated rows in file order

    Raises:
        DataLoadError: If the file is unreadable or not a JSON array of objects
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise DataLoadError(path, "expected a JSON array of index rows")

    rows = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise DataLoadError(path, f"row {position} is not an object")
        rows.append(IndexRow.model_validate(item))

    logger.info("Icon index loaded", path=path, total_icons=len(rows))
    return tuple(rows)


def load_search_config(path: str) -> SearchConfig:
    """
    Load the search configuration, merged over the defaults.

    A missing file yields the default configuration.

    Raises:
        DataLoadError: If the file exists but cannot be parsed
    """
    if not os.path.exists(path):
        logger.warning("Search config not found, using defaults", path=path)
        return SearchConfig()

    data = _read_json(path)
    if not isinstance(data, dict):
        raise DataLoadError(path, "expected a JSON object")

    try:
        config = SearchConfig.model_validate(data)
    except ValidationError as e:
        raise DataLoadError(path, f"invalid search config ({e.error_count()} errors)") from e

    logger.info(
        "Search config loaded",
        path=path,
        synonyms=len(config.synonyms),
        category_boosts=len(config.category_boosts),
        fuzzy_enabled=config.fuzzy.enabled,
    )
    return config


def load_data(index_path: str, config_path: str) -> Tuple[Tuple[IndexRow, ...], SearchConfig]:
    """Load the index and the search configuration together."""
    return load_index(index_path), load_search_config(config_path)
