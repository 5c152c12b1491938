"""Knuth-Morris-Pratt search.

The border table is indexed by prefix length: ``borders[i]`` is the length
of the longest proper border of ``pattern[:i]``. After matching ``p``
elements and hitting a mismatch, the first ``borders[p]`` of them are known
to match again at the shifted alignment, so they are not re-compared.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from seqfind.errors import TableMismatchError

T = TypeVar("T")


def border_table(pattern: Sequence[T]) -> tuple[int, ...]:
    """Compute the KMP failure function for pattern.

    Returns ``m + 1`` entries for a pattern of length ``m``, or an empty
    tuple when the pattern is empty. Entries 0 and 1 are always 0.

    Example:
        >>> border_table("aabaa")
        (0, 0, 1, 0, 1, 2)
    """
    m = len(pattern)
    if m == 0:
        return ()

    borders = [0] * (m + 1)
    for i in range(2, m + 1):
        b = borders[i - 1]
        # walk the border chain until the next element extends a border
        while pattern[b] != pattern[i - 1] and b != 0:
            b = borders[b]
        if pattern[b] == pattern[i - 1]:
            borders[i] = b + 1
        else:
            borders[i] = 0

    return tuple(borders)


def check_border_table(
    pattern: Sequence[T], borders: Sequence[int]
) -> None:
    """Raise TableMismatchError if borders cannot belong to pattern."""
    m = len(pattern)
    expected = m + 1 if m else 0
    if len(borders) != expected:
        raise TableMismatchError("border", expected, len(borders))


def kmp_search(
    pattern: Sequence[T],
    text: Sequence[T],
    borders: Sequence[int] | None = None,
) -> int | None:
    """Return the first index where pattern occurs in text, or None.

    Args:
        pattern: Sequence to look for.
        text: Sequence to search.
        borders: Table from ``border_table(pattern)``. Built on the fly when
            omitted; pass it in to reuse it across many texts.

    Raises:
        TableMismatchError: borders has the wrong length for pattern.
    """
    if borders is None:
        borders = border_table(pattern)
    else:
        check_border_table(pattern, borders)

    n = len(text)
    m = len(pattern)
    if m == 0:
        return 0

    t = 0  # candidate start in text
    p = 0  # elements of pattern matched at t
    while t + p < n:
        if text[t + p] == pattern[p]:
            p += 1
            if p == m:
                return t
        elif p == 0:
            t += 1
        else:
            t += p - borders[p]
            p = borders[p]

    return None
