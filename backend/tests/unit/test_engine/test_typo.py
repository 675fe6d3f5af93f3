"""Unit tests for the typo heuristic.

Tests cover:
- Levenshtein distance
- Length-dependent thresholds
- Code attempts with the wrong digit count
- Placeholder prefix rule
- Input far from every command is not flagged
"""

import pytest

from mansion.engine.typo import is_likely_typo, levenshtein, max_distance


class TestLevenshtein:
    """Tests for levenshtein()."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("", "", 0),
            ("", "look", 4),
            ("look", "", 4),
            ("look", "look", 0),
            ("lok", "look", 1),
            ("kitten", "sitting", 3),
            ("exmine desk", "examine desk", 1),
        ],
    )
    def test_distance(self, a, b, expected) -> None:
        assert levenshtein(a, b) == expected

    def test_symmetric(self) -> None:
        assert levenshtein("search", "sarch") == levenshtein("sarch", "search")


class TestMaxDistance:
    """Tests for max_distance()."""

    @pytest.mark.parametrize(
        "phrase,expected",
        [
            ("look", 1),
            ("help", 1),
            ("enter", 2),
            ("go inside", 2),
            ("take key!", 2),
            ("go outside", 3),
            ("examine desk", 3),
        ],
    )
    def test_thresholds(self, phrase, expected) -> None:
        assert max_distance(phrase) == expected


class TestIsLikelyTypo:
    """Tests for is_likely_typo()."""

    def test_misspelled_examine(self) -> None:
        assert is_likely_typo("exmine desk")

    def test_short_command_one_edit(self) -> None:
        assert is_likely_typo("lok")
        assert is_likely_typo("hep")

    def test_transposition_counts_twice(self) -> None:
        """Swapped letters are two edits, too many for a 4-letter command."""
        assert not is_likely_typo("hlep")

    def test_short_command_two_edits_rejected(self) -> None:
        """'look' tolerates one edit only."""
        assert not is_likely_typo("lxxk")

    def test_medium_command_two_edits(self) -> None:
        assert is_likely_typo("sarch")
        assert is_likely_typo("opn drwer")

    def test_long_command_three_edits(self) -> None:
        assert is_likely_typo("exmne dsk")

    @pytest.mark.parametrize("text", ["enter code 431", "use code 1", "enter code 43125"])
    def test_wrong_digit_count(self, text) -> None:
        assert is_likely_typo(text)

    def test_code_prefix_flags(self) -> None:
        """Anything starting with a code phrase prefix is worth a look."""
        assert is_likely_typo("enter code four three one two")
        assert is_likely_typo("use code please")

    def test_case_and_whitespace_ignored(self) -> None:
        assert is_likely_typo("  EXMINE   Desk ")

    @pytest.mark.parametrize("text", ["", "   ", "xyzzy", "dance", "what is the meaning of life"])
    def test_not_typos(self, text) -> None:
        assert not is_likely_typo(text)
