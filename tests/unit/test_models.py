"""Unit tests for configuration and index row models."""

import pytest
from pydantic import ValidationError

from icon_search.models.config import (
    SearchConfig,
    parse_flag,
    parse_float,
    parse_int,
)
from icon_search.models.index import IndexRow, ScoredResult


class TestParseHelpers:
    """Test cases for numeric coercion helpers."""

    @pytest.mark.parametrize(
        "value, default, expected",
        [
            (2, 0.0, 2.0),
            ("2.5", 0.0, 2.5),
            ("-1", 0.0, -1.0),
            ("abc", 0.0, 0.0),
            (None, 5.0, 5.0),
            ([], 1.0, 1.0),
            (True, 1.0, 1.0),
            ("nan", 0.0, 0.0),
            ("inf", 0.0, 0.0),
        ],
    )
    def test_parse_float(self, value, default, expected):
        assert parse_float(value, default) == expected

    def test_parse_int(self):
        assert parse_int("2", 1) == 2
        assert parse_int(2.7, 1) == 2
        assert parse_int("far", 1) == 1
        assert parse_int(None, 1) == 1

    def test_parse_flag(self):
        assert parse_flag("true") is True
        assert parse_flag(" Yes ") is True
        assert parse_flag("false") is False
        assert parse_flag(1) is True
        assert parse_flag(None) is False


class TestSearchConfig:
    """Test cases for the SearchConfig schema."""

    def test_defaults(self):
        config = SearchConfig()

        assert config.weights.overlap == 2.0
        assert config.weights.filename == 1.0
        assert config.weights.category == 1.0
        assert config.category_boosts == ()
        assert config.synonyms == {}
        assert config.fuzzy.enabled is False
        assert config.fuzzy.max_distance == 1

    def test_partial_weights_merge_with_defaults(self):
        config = SearchConfig.model_validate({"weights": {"overlap": "3.5"}})

        assert config.weights.overlap == 3.5
        assert config.weights.filename == 1.0

    def test_null_weight_uses_default(self):
        config = SearchConfig.model_validate({"weights": {"filename": None}})

        assert config.weights.filename == 1.0

    def test_unparsable_weight_is_zero(self):
        config = SearchConfig.model_validate({"weights": {"category": "heavy"}})

        assert config.weights.category == 0.0

    def test_explicit_zero_weight_kept(self):
        config = SearchConfig.model_validate({"weights": {"overlap": 0}})

        assert config.weights.overlap == 0.0

    def test_malformed_sections_fall_back(self):
        config = SearchConfig.model_validate(
            {"weights": "bad", "fuzzy": None, "categoryBoosts": "nope", "synonyms": []}
        )

        assert config == SearchConfig()

    def test_fuzzy_coercion(self):
        config = SearchConfig.model_validate({"fuzzy": {"enabled": "true", "maxDistance": "2"}})
        assert config.fuzzy.enabled is True
        assert config.fuzzy.max_distance == 2

        config = SearchConfig.model_validate({"fuzzy": {"enabled": True, "maxDistance": "far"}})
        assert config.fuzzy.max_distance == 1

    def test_category_boost_rules(self):
        config = SearchConfig.model_validate(
            {
                "categoryBoosts": [
                    {"match": "UI", "weight": "x"},
                    "junk",
                    {"match": 5, "weight": 1},
                ]
            }
        )

        assert len(config.category_boosts) == 2
        assert config.category_boosts[0].match == "UI"
        assert config.category_boosts[0].weight == 0.0
        assert config.category_boosts[1].match == ""

    def test_synonym_coercion(self):
        config = SearchConfig.model_validate(
            {"synonyms": {"a": "b", "c": ["d", 3], 5: ["x"], "e": 7}}
        )

        assert config.synonyms == {"a": ("b",), "c": ("d",)}

    def test_field_names_accepted(self):
        config = SearchConfig(category_boosts=[{"match": "ui", "weight": 1}])

        assert config.category_boosts[0].weight == 1.0

    def test_frozen(self):
        config = SearchConfig()

        with pytest.raises(ValidationError):
            config.weights = None


class TestIndexRow:
    """Test cases for the IndexRow model."""

    def test_aliases(self):
        row = IndexRow.model_validate(
            {"id": "a", "fileName": "a.svg", "category": "ui", "tokens": ["a"], "fullPath": "icons/a.svg"}
        )

        assert row.file_name == "a.svg"
        assert row.full_path == "icons/a.svg"
        assert row.tokens == ("a",)

    def test_missing_fields_default(self):
        row = IndexRow.model_validate({})

        assert row.id == ""
        assert row.file_name == ""
        assert row.category == ""
        assert row.tokens == ()

    def test_coercion(self):
        row = IndexRow.model_validate({"id": 7, "category": None, "tokens": ["a", 3, None, "b"]})

        assert row.id == "7"
        assert row.category == ""
        assert row.tokens == ("a", "b")

    def test_dump_by_alias(self):
        row = IndexRow.model_validate({"id": "a", "fileName": "a.svg"})

        assert row.model_dump(by_alias=True)["fileName"] == "a.svg"

    def test_scored_result_copy(self):
        row = IndexRow.model_validate({"id": "a", "fileName": "a.svg", "tokens": ["a"]})
        result = ScoredResult.from_row(row, 2.34567)

        assert result.score == 2.346
        assert result.file_name == "a.svg"
        assert result.tokens == ("a",)
