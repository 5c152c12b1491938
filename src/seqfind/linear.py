"""Brute-force substring search.

Used as the correctness baseline for the table-driven matchers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def linear_search(pattern: Sequence[T], text: Sequence[T]) -> int | None:
    """Return the first index where pattern occurs in text, or None.

    Candidate starts run from 0 to ``n - m`` inclusive, so a window never
    extends past the end of the text. An empty pattern matches at 0.
    """
    n = len(text)
    m = len(pattern)

    for start in range(n - m + 1):
        j = 0
        while j < m:
            if text[start + j] != pattern[j]:
                break
            j += 1
        if j == m:
            return start

    return None
