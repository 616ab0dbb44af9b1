"""Shared fixtures for icon search tests."""

import pytest

from icon_search.models.config import SearchConfig
from icon_search.models.index import IndexRow


@pytest.fixture
def default_config():
    """Default search configuration."""
    return SearchConfig()


@pytest.fixture
def home_index():
    """The two-row index from the documented end-to-end example."""
    return (
        IndexRow.model_validate(
            {"id": "a", "fileName": "home-icon.svg", "category": "ui", "tokens": ["home", "icon"]}
        ),
        IndexRow.model_validate(
            {"id": "b", "fileName": "house.svg", "category": "ui", "tokens": ["house"]}
        ),
    )
