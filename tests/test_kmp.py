"""Tests for the border table and KMP matcher."""

import pytest

from seqfind import TableMismatchError, border_table, kmp_search


def longest_proper_border(prefix: str) -> int:
    for length in range(len(prefix) - 1, 0, -1):
        if prefix[:length] == prefix[-length:]:
            return length
    return 0


class TestBorderTable:
    def test_aabaa(self):
        assert border_table("aabaa") == (0, 0, 1, 0, 1, 2)

    def test_empty_pattern(self):
        assert border_table("") == ()

    def test_single_element(self):
        assert border_table("a") == (0, 0)

    def test_no_repeats(self):
        assert border_table("abcd") == (0, 0, 0, 0, 0)

    def test_all_same(self):
        assert border_table("aaaa") == (0, 0, 1, 2, 3)

    def test_follows_border_chain(self):
        # "aabaaa": the last 'a' fails to extend border "aa" to "aab",
        # falls back to border "a" and extends it to "aa"
        assert border_table("aabaaa") == (0, 0, 1, 0, 1, 2, 2)

    @pytest.mark.parametrize(
        "pattern", ["abab", "abacabab", "aaabaaaab", "abcabcabd", "ababaca"]
    )
    def test_entries_are_longest_proper_borders(self, pattern):
        borders = border_table(pattern)
        assert len(borders) == len(pattern) + 1
        for i in range(len(pattern) + 1):
            assert borders[i] == longest_proper_border(pattern[:i])

    def test_generic_elements(self):
        assert border_table([1, 2, 1, 2, 1]) == (0, 0, 0, 1, 2, 3)


class TestKmpSearch:
    def test_match_with_table(self):
        borders = border_table("dead")
        assert kmp_search("dead", "the dog is very dead then", borders) == 16

    def test_builds_table_when_omitted(self):
        assert kmp_search("then", "the dog is very dead then") == 21

    def test_reuses_border_after_partial_match(self):
        assert kmp_search("abab", "abaabab") == 3

    def test_table_reused_across_texts(self):
        borders = border_table("aab")
        assert kmp_search("aab", "aaab", borders) == 1
        assert kmp_search("aab", "abaab", borders) == 2
        assert kmp_search("aab", "abab", borders) is None

    def test_first_of_several(self):
        assert kmp_search("aa", "baaaa") == 1

    def test_generic_elements(self):
        assert kmp_search((1, 2), [0, 1, 1, 2]) == 2


class TestKmpBoundaries:
    def test_empty_pattern(self):
        assert kmp_search("", "abc") == 0
        assert kmp_search("", "") == 0

    def test_pattern_longer_than_text(self):
        assert kmp_search("abcd", "abc") is None

    def test_suffix_match(self):
        assert kmp_search("cab", "abcab") == 2

    def test_partial_match_at_tail(self):
        assert kmp_search("abx", "zzzab") is None

    def test_wrong_table_length(self):
        with pytest.raises(TableMismatchError) as exc_info:
            kmp_search("abc", "xabc", (0, 0, 0))
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            kmp_search("", "abc", (0,))
