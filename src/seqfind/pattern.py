"""Reusable pattern handle with lazily built search tables."""

from __future__ import annotations

import threading
from collections.abc import Buffer, Iterable, Sequence
from enum import Enum
from typing import Any

from seqfind.bmh import bad_character_table, bmh_search
from seqfind.config import default_algorithm, eager_tables_default
from seqfind.errors import BytesRequiredError, UnknownAlgorithmError
from seqfind.kmp import border_table, kmp_search
from seqfind.linear import linear_search
from seqfind.logging_config import get_logger

logger = get_logger(__name__)


class Algorithm(str, Enum):
    """Search algorithms a Pattern can run."""

    LINEAR = "linear"
    KMP = "kmp"
    BMH = "bmh"

    @classmethod
    def parse(cls, value: Algorithm | str | None) -> Algorithm:
        """Resolve a name (or None for the configured default)."""
        if value is None:
            value = default_algorithm()
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownAlgorithmError(value) from None


def _freeze(pattern: Iterable[Any]) -> Sequence[Any]:
    if isinstance(pattern, (str, bytes, tuple)):
        return pattern
    if isinstance(pattern, (bytearray, memoryview)):
        return bytes(pattern)
    return tuple(pattern)


class Pattern:
    """A search pattern that caches its KMP and BMH tables.

    Tables depend only on the pattern, so each is built at most once and
    then reused for every text searched. First use is guarded by a lock so
    a handle can be shared between threads; after that the tables are
    read-only.

    Args:
        pattern: Any sequence of comparable elements. Mutable inputs are
            copied (bytearray and memoryview to bytes, others to tuple).
        eager: Build every applicable table now instead of on first use.
            None defers to SEQFIND_EAGER_TABLES.
    """

    def __init__(
        self, pattern: Iterable[Any], *, eager: bool | None = None
    ) -> None:
        self._pattern = _freeze(pattern)
        self._borders: tuple[int, ...] | None = None
        self._bad_characters: tuple[int, ...] | None = None
        self._lock = threading.Lock()

        if eager is None:
            eager = eager_tables_default()
        if eager:
            self._ensure_borders()
            if self.is_bytes:
                self._ensure_bad_characters()

    @property
    def pattern(self) -> Sequence[Any]:
        return self._pattern

    @property
    def is_bytes(self) -> bool:
        """Whether the pattern can be searched with BMH."""
        return isinstance(self._pattern, bytes)

    @property
    def borders(self) -> tuple[int, ...]:
        """Border table, built on first access."""
        return self._ensure_borders()

    @property
    def bad_characters(self) -> tuple[int, ...]:
        """Bad-character table, built on first access.

        Raises:
            BytesRequiredError: the pattern is not bytes.
        """
        return self._ensure_bad_characters()

    def _ensure_borders(self) -> tuple[int, ...]:
        borders = self._borders
        if borders is not None:
            return borders
        with self._lock:
            if self._borders is None:
                self._borders = border_table(self._pattern)
                logger.debug(
                    "built border table",
                    algorithm=Algorithm.KMP.value,
                    pattern_length=len(self._pattern),
                )
            return self._borders

    def _ensure_bad_characters(self) -> tuple[int, ...]:
        table = self._bad_characters
        if table is not None:
            return table
        if not self.is_bytes:
            raise BytesRequiredError("pattern", self._pattern)
        with self._lock:
            if self._bad_characters is None:
                self._bad_characters = bad_character_table(self._pattern)
                logger.debug(
                    "built bad-character table",
                    algorithm=Algorithm.BMH.value,
                    pattern_length=len(self._pattern),
                )
            return self._bad_characters

    def linear(self, text: Sequence[Any]) -> int | None:
        """Brute-force search for the first occurrence in text."""
        return linear_search(self._pattern, text)

    def kmp(self, text: Sequence[Any]) -> int | None:
        """KMP search for the first occurrence in text."""
        return kmp_search(self._pattern, text, self._ensure_borders())

    def bmh(self, text: Buffer) -> int | None:
        """BMH search for the first byte offset in text.

        Raises:
            BytesRequiredError: the pattern or text is not bytes-like.
        """
        table = self._ensure_bad_characters()
        return bmh_search(self._pattern, text, table)

    def find(
        self, text: Any, algorithm: Algorithm | str | None = None
    ) -> int | None:
        """Search text with the named algorithm (default from config)."""
        algo = Algorithm.parse(algorithm)
        if algo is Algorithm.LINEAR:
            return self.linear(text)
        if algo is Algorithm.KMP:
            return self.kmp(text)
        return self.bmh(text)

    def __len__(self) -> int:
        return len(self._pattern)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __repr__(self) -> str:
        return f"Pattern({self._pattern!r})"


def find(
    pattern: Iterable[Any],
    text: Any,
    algorithm: Algorithm | str | None = None,
) -> int | None:
    """One-shot search; use Pattern directly to reuse tables."""
    return Pattern(pattern, eager=False).find(text, algorithm)
