"""Exceptions raised on API misuse.

Search outcomes never raise: a miss is ``None``. These cover inputs that
a matcher cannot work with at all.
"""


class SeqfindError(Exception):
    """Base class for all seqfind errors."""


class BytesRequiredError(SeqfindError, TypeError):
    """A byte-only algorithm was given a non bytes-like sequence."""

    def __init__(self, what: str, value: object) -> None:
        self.what = what
        super().__init__(
            f"{what} must be bytes-like for BMH, got {type(value).__name__}"
        )


class TableMismatchError(SeqfindError, ValueError):
    """A precomputed table does not fit the pattern it is used with."""

    def __init__(self, table: str, expected: int, actual: int) -> None:
        self.table = table
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{table} table has {actual} entries, expected {expected}"
        )


class UnknownAlgorithmError(SeqfindError, ValueError):
    """An algorithm name is not one of the supported matchers."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"unknown search algorithm: {name!r}")
