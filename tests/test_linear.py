"""Tests for the brute-force matcher."""

from seqfind import linear_search


class TestLinearSearch:
    def test_match_at_start(self):
        assert linear_search("abc", "abcdef") == 0

    def test_match_in_middle(self):
        assert linear_search("cd", "abcdef") == 2

    def test_no_match(self):
        assert linear_search("xyz", "abcdef") is None

    def test_first_of_several(self):
        assert linear_search("ab", "xxabxxab") == 2

    def test_overlapping_candidates(self):
        assert linear_search("aab", "aaaab") == 2

    def test_generic_elements(self):
        assert linear_search((2, 3), [1, 2, 3, 2, 3]) == 1
        assert linear_search(["b"], ("a", "b")) == 1


class TestLinearBoundaries:
    def test_empty_pattern_matches_at_zero(self):
        assert linear_search("", "abc") == 0

    def test_empty_pattern_empty_text(self):
        assert linear_search("", "") == 0

    def test_pattern_longer_than_text(self):
        assert linear_search("abcd", "abc") is None

    def test_nonempty_pattern_empty_text(self):
        assert linear_search("a", "") is None

    def test_suffix_match(self):
        assert linear_search("def", "abcdef") == 3

    def test_partial_match_at_tail(self):
        """A prefix of the pattern at the end of the text is not a match."""
        assert linear_search("efg", "abcdef") is None

    def test_pattern_equals_text(self):
        assert linear_search("abc", "abc") == 0
