"""Unit tests for edit-distance matching."""

import pytest

from icon_search.core.fuzzy_matcher import edit_distance, within_distance


class TestEditDistance:
    """Test cases for edit_distance."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("home", "home", 0),
            ("hom", "home", 1),
            ("homes", "home", 1),
            ("hose", "home", 1),
            ("dtae", "date", 2),
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("", "", 0),
        ],
    )
    def test_distance(self, a, b, expected):
        """Insertions, deletions and substitutions each cost one."""
        assert edit_distance(a, b) == expected

    def test_symmetric(self):
        """Distance does not depend on argument order."""
        assert edit_distance("package", "pakage") == edit_distance("pakage", "package")


class TestWithinDistance:
    """Test cases for within_distance."""

    def test_one_edit(self):
        """Tokens one edit apart match with a bound of one."""
        assert within_distance("hom", "home", 1)
        assert within_distance("hme", "home", 1)
        assert within_distance("hone", "home", 1)

    def test_two_edits(self):
        """Tokens two edits apart do not match with a bound of one."""
        assert not within_distance("hm", "home", 1)
        assert not within_distance("hxmx", "home", 1)
        assert within_distance("hxmx", "home", 2)

    def test_zero_bound(self):
        """A bound of zero only accepts equal tokens."""
        assert within_distance("home", "home", 0)
        assert not within_distance("hose", "home", 0)

    def test_negative_bound(self):
        """A negative bound never matches."""
        assert not within_distance("home", "home", -1)

    def test_length_gap(self):
        """Tokens whose lengths differ by more than the bound never match."""
        assert not within_distance("a", "abcdef", 2)

    def test_huge_bound(self):
        """Bounds far beyond any token length behave like 'any distance'."""
        assert within_distance("hxmx", "home", 10 ** 30)
        assert within_distance("", "home", 2 ** 64)
