from seqfind.bmh import bad_character_table, bmh_search
from seqfind.errors import (
    BytesRequiredError,
    SeqfindError,
    TableMismatchError,
    UnknownAlgorithmError,
)
from seqfind.kmp import border_table, kmp_search
from seqfind.linear import linear_search
from seqfind.pattern import Algorithm, Pattern, find

__all__ = [
    "Algorithm",
    "BytesRequiredError",
    "Pattern",
    "SeqfindError",
    "TableMismatchError",
    "UnknownAlgorithmError",
    "bad_character_table",
    "bmh_search",
    "border_table",
    "find",
    "kmp_search",
    "linear_search",
]
