"""Boyer-Moore-Horspool search over bytes.

The bad-character table has one slot per byte value. For a byte at pattern
position ``i`` it stores ``m - 1 - i``, the distance from that byte to the
end of the pattern; later positions overwrite earlier ones, so each slot
reflects the byte's rightmost occurrence. Bytes absent from the pattern
store ``m``.

Indices are byte offsets. Searching the UTF-8 encoding of a ``str`` gives
offsets that differ from the character offsets of the other matchers once
the text contains multi-byte characters.
"""

from __future__ import annotations

from collections.abc import Buffer, Sequence

from seqfind.config import ALPHABET_SIZE
from seqfind.errors import BytesRequiredError, TableMismatchError

ByteSequence = bytes | bytearray | memoryview


def as_byte_sequence(value: object, what: str = "value") -> ByteSequence:
    """Return value as an indexable sequence of ints in 0..255.

    bytes and bytearray pass through. Other buffer-protocol objects are
    wrapped in a byte-format memoryview without copying.

    Raises:
        BytesRequiredError: value does not support the buffer protocol.
    """
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        if value.format == "B" and value.ndim == 1:
            return value
        return value.cast("B")
    if isinstance(value, Buffer):
        return memoryview(value).cast("B")
    raise BytesRequiredError(what, value)


def bad_character_table(pattern: Buffer) -> tuple[int, ...]:
    """Build the 256-entry shift table for pattern.

    Example:
        >>> table = bad_character_table(b"abca")
        >>> table[ord("a")], table[ord("c")], table[ord("b")], table[0]
        (0, 1, 2, 4)
    """
    pat = as_byte_sequence(pattern, "pattern")
    m = len(pat)

    table = [m] * ALPHABET_SIZE
    for i, byte in enumerate(pat):
        table[byte] = m - 1 - i

    return tuple(table)


def check_bad_character_table(table: Sequence[int]) -> None:
    """Raise TableMismatchError if table is not one slot per byte value."""
    if len(table) != ALPHABET_SIZE:
        raise TableMismatchError("bad-character", ALPHABET_SIZE, len(table))


def bmh_search(
    pattern: Buffer,
    text: Buffer,
    table: Sequence[int] | None = None,
) -> int | None:
    """Return the first byte offset where pattern occurs in text, or None.

    An empty pattern never matches.

    Args:
        pattern: Bytes-like pattern.
        text: Bytes-like text.
        table: Table from ``bad_character_table(pattern)``. Built on the fly
            when omitted.

    Raises:
        BytesRequiredError: pattern or text is not bytes-like.
        TableMismatchError: table does not have 256 entries.
    """
    pat = as_byte_sequence(pattern, "pattern")
    txt = as_byte_sequence(text, "text")
    if table is None:
        table = bad_character_table(pat)
    else:
        check_bad_character_table(table)

    n = len(txt)
    m = len(pat)
    if m == 0:
        return None

    t = 0
    while t + m <= n:
        p = m - 1
        while txt[t + p] == pat[p]:
            if p == 0:
                return t
            p -= 1
        # table entries count from the pattern end; re-anchor them at the
        # mismatch position and always move at least one byte
        t += max(1, table[txt[t + p]] - (m - 1 - p))

    return None
