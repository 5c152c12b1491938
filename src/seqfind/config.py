"""Configuration constants and environment lookups."""

from __future__ import annotations

import os

from seqfind.errors import UnknownAlgorithmError

# BMH works on 8-bit bytes only
ALPHABET_SIZE = 256

# Environment variable names
ENV_DEBUG = "SEQFIND_DEBUG"
ENV_EAGER_TABLES = "SEQFIND_EAGER_TABLES"
ENV_DEFAULT_ALGORITHM = "SEQFIND_DEFAULT_ALGORITHM"

ALGORITHMS = ("linear", "kmp", "bmh")
FALLBACK_ALGORITHM = "kmp"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def debug_enabled() -> bool:
    """Whether SEQFIND_DEBUG asks for debug logging."""
    return _env_flag(ENV_DEBUG)


def eager_tables_default() -> bool:
    """Whether Pattern handles build their tables at construction."""
    return _env_flag(ENV_EAGER_TABLES)


def default_algorithm() -> str:
    """Algorithm used by ``find`` when none is given.

    Read on every call so tests and long-lived processes see updates.
    """
    name = os.environ.get(ENV_DEFAULT_ALGORITHM, "").strip().lower()
    if not name:
        return FALLBACK_ALGORITHM
    if name not in ALGORITHMS:
        raise UnknownAlgorithmError(name)
    return name
