"""Tests for diff module."""

import pytest

from dictation_checker.diff import (
    DiffType,
    TokenDiff,
    compute_token_diff,
    format_diff_ansi,
    format_diff_html,
    get_diff_stats,
)


class TestComputeTokenDiff:
    """Test positional token diff."""

    def test_all_match(self):
        """Test identical sequences produce only matches."""
        diff = compute_token_diff(("a", "b"), ("a", "b"))
        assert diff == (
            TokenDiff("a", "a", True, DiffType.MATCH),
            TokenDiff("b", "b", True, DiffType.MATCH),
        )

    def test_substitution(self):
        """Test differing tokens at the same position."""
        diff = compute_token_diff(("fox", "jumps"), ("fox", "jump"))
        assert diff[1] == TokenDiff("jumps", "jump", False, DiffType.SUBSTITUTION)

    def test_insertion(self):
        """Test extra attempt tokens become insertions."""
        diff = compute_token_diff(("a",), ("a", "b", "c"))
        assert diff[1:] == (
            TokenDiff("", "b", False, DiffType.INSERTION),
            TokenDiff("", "c", False, DiffType.INSERTION),
        )

    def test_deletion(self):
        """Test missing attempt tokens become deletions."""
        diff = compute_token_diff(("a", "b"), ("a",))
        assert diff[1] == TokenDiff("b", "", False, DiffType.DELETION)

    def test_missing_word_cascades(self):
        """Test a dropped word shifts every later position."""
        diff = compute_token_diff(("the", "big", "red", "dog"), ("the", "red", "dog"))
        assert [d.type for d in diff] == [
            DiffType.MATCH,
            DiffType.SUBSTITUTION,
            DiffType.SUBSTITUTION,
            DiffType.DELETION,
        ]

    def test_both_empty(self):
        """Test empty inputs produce an empty diff."""
        assert compute_token_diff((), ()) == ()

    @pytest.mark.parametrize("original,attempt", [
        ((), ("x",)),
        (("x",), ()),
        (("a", "b", "c"), ("a",)),
        (("a",), ("b", "c", "d", "e")),
        (("a", "b"), ("a", "b")),
    ])
    def test_length_is_max_of_inputs(self, original, attempt):
        """Test the diff always covers the longer sequence."""
        assert len(compute_token_diff(original, attempt)) == max(len(original), len(attempt))

    def test_only_matches_are_correct(self):
        """Test is_correct is set exactly for match entries."""
        diff = compute_token_diff(("a", "b", "c"), ("a", "x", "c", "d"))
        for entry in diff:
            assert entry.is_correct == (entry.type is DiffType.MATCH)

    def test_to_dict(self):
        """Test serialization uses consumer-facing keys."""
        entry = TokenDiff("b", "", False, DiffType.DELETION)
        assert entry.to_dict() == {
            "original": "b",
            "attempt": "",
            "isCorrect": False,
            "type": "deletion",
        }


class TestDiffFormatting:
    """Test diff formatting functionality."""

    diff_entries = (
        TokenDiff("the", "the", True, DiffType.MATCH),
        TokenDiff("fox", "box", False, DiffType.SUBSTITUTION),
        TokenDiff("ran", "", False, DiffType.DELETION),
    )

    def test_format_diff_html(self):
        """Test HTML formatting of every diff type."""
        entries = self.diff_entries + (TokenDiff("", "away", False, DiffType.INSERTION),)
        html = format_diff_html(entries)
        assert html == (
            'the <del class="wrong">box</del><ins class="expected">fox</ins> '
            '<ins class="missing">ran</ins> <del class="extra">away</del>'
        )

    def test_format_diff_html_escaping(self):
        """Test HTML escaping in diff formatting."""
        html = format_diff_html([TokenDiff("a&b", "<b>", False, DiffType.SUBSTITUTION)])
        assert "&lt;b&gt;" in html
        assert "a&amp;b" in html

    def test_format_diff_ansi_with_color(self):
        """Test ANSI formatting with color."""
        ansi = format_diff_ansi(self.diff_entries, use_color=True)
        assert "\033[31m" in ansi
        assert "\033[33m" in ansi
        assert "\033[0m" in ansi

    def test_format_diff_ansi_no_color(self):
        """Test ANSI formatting without color."""
        ansi = format_diff_ansi(self.diff_entries, use_color=False)
        assert "\033[" not in ansi
        assert ansi == "the box->fox [ran]"

    def test_format_empty(self):
        """Test formatting an empty diff."""
        assert format_diff_html([]) == ""
        assert format_diff_ansi([], use_color=True) == ""


class TestDiffStats:
    """Test diff statistics functionality."""

    def test_stats_counts(self):
        """Test per-type counts and match percentage."""
        diff = compute_token_diff(("a", "b", "c"), ("a", "x", "c", "d"))
        assert get_diff_stats(diff) == {
            "total_positions": 4,
            "matches": 2,
            "substitutions": 1,
            "insertions": 1,
            "deletions": 0,
            "match_percentage": 50.0,
        }

    def test_stats_empty(self):
        """Test stats of an empty diff."""
        stats = get_diff_stats(())
        assert stats["total_positions"] == 0
        assert stats["match_percentage"] == 0
