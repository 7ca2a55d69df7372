"""
Tests for argument scanning and option resolution.

These tests verify:
    - Occurrence scanning
    - Presence checks
    - Last-wins resolution across spellings
    - Multi-value collection order
"""

from rho.arguments import (
    DIAGRAM,
    STYLE,
    any_occurrence_present,
    occurrences_of,
    resolve_all,
    resolve_single,
)


class TestOccurrences:
    """Test raw occurrence scanning."""

    def test_all_positions_in_order(self):
        """Every matching index is returned, ascending."""
        args = ["rho", "-s", "st1.json", "--style", "st2.json", "-s", "st3.json"]
        assert occurrences_of("-s", args) == [1, 5]

    def test_no_occurrences(self):
        """Missing spelling gives an empty list."""
        assert occurrences_of("-s", ["a", "b", "c"]) == []

    def test_exact_match_only(self):
        """Prefixes and values containing the spelling do not count."""
        assert occurrences_of("-s", ["-st", "x-s", "--s"]) == []


class TestPresence:
    """Test option presence checks."""

    def test_any_spelling_present(self):
        """One matching spelling is enough."""
        assert any_occurrence_present(STYLE, ["rho", "--style", "st.json"])

    def test_absent(self):
        """No spelling in args."""
        assert not any_occurrence_present(STYLE, ["rho", "-d", "diagram.json"])

    def test_flag_as_last_token_is_present(self):
        """Presence does not need a following value."""
        assert any_occurrence_present(DIAGRAM, ["-d"])


class TestResolveSingle:
    """Test last-wins single value resolution."""

    def test_last_occurrence_across_spellings_wins(self):
        """The highest index among all spellings decides."""
        args = ["-d", "a.json", "--diagram", "b.json"]
        assert resolve_single(DIAGRAM, args) == "b.json"

    def test_short_spelling_after_long_wins(self):
        """Spelling order in the set does not matter."""
        args = ["--diagram", "a.json", "-d", "b.json"]
        assert resolve_single(DIAGRAM, args) == "b.json"

    def test_flag_without_value(self):
        """Flag as the final token resolves to None."""
        assert resolve_single(DIAGRAM, ["-d"]) is None

    def test_last_flag_without_value_hides_earlier_value(self):
        """Only the last mention counts, even when it has no value."""
        assert resolve_single(DIAGRAM, ["-d", "d1.json", "--diagram", "d2.json", "-d"]) is None

    def test_missing_option(self):
        """No occurrence resolves to None."""
        assert resolve_single(DIAGRAM, ["rho", "-s", "st.json"]) is None

    def test_args_not_mutated(self):
        """Resolution leaves the argument vector untouched."""
        args = ["-d", "a.json", "-d", "b.json"]
        resolve_single(DIAGRAM, args)
        assert args == ["-d", "a.json", "-d", "b.json"]


class TestResolveAll:
    """Test multi-value collection."""

    def test_collects_every_value(self):
        """Values of both spellings are collected, -s values first."""
        args = ["-s", "st1.json", "--style", "st2.json", "-s", "st3.json"]
        values = resolve_all(STYLE, args)
        assert sorted(values) == ["st1.json", "st2.json", "st3.json"]
        assert values == ["st1.json", "st3.json", "st2.json"]

    def test_grouped_per_spelling(self):
        """Values are grouped by spelling order, not by position."""
        args = ["--style", "a.json", "-s", "b.json", "--style", "c.json"]
        assert resolve_all(STYLE, args) == ["b.json", "a.json", "c.json"]

    def test_single_spelling_keeps_position_order(self):
        """Within one spelling occurrences stay left to right."""
        args = ["-s", "st1.json", "-s", "st2.json", "-s", "st3.json"]
        assert resolve_all(STYLE, args) == ["st1.json", "st2.json", "st3.json"]

    def test_trailing_flag_dropped(self):
        """An occurrence without a value adds nothing."""
        assert resolve_all(STYLE, ["-s", "st1.json", "-s"]) == ["st1.json"]

    def test_empty_value_dropped(self):
        """Empty strings are not returned as paths."""
        assert resolve_all(STYLE, ["-s", "", "-s", "st2.json"]) == ["st2.json"]

    def test_no_occurrences(self):
        """Missing option gives an empty list."""
        assert resolve_all(STYLE, ["a", "b", "c"]) == []
