"""Enums for fuzzycache API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available scoring algorithms.

    Each value names a ``rapidfuzz.fuzz`` scorer. All of them return a
    similarity on a 0-100 scale, so ``Options.threshold`` is expressed on
    that scale too. String values are accepted wherever an Algorithm is.

    Example:
        >>> from fuzzycache import Algorithm, FuzzyIndex
        >>> index = FuzzyIndex(
        ...     ["apple", "apply", "banana"],
        ...     algorithm=Algorithm.TOKEN_SORT_RATIO,
        ... )
    """

    WRATIO = "wratio"
    """Weighted ratio, picks the best of the ratio family (default)"""

    RATIO = "ratio"
    """Normalized Indel similarity"""

    QRATIO = "qratio"
    """Quick ratio, ratio with preprocessing shortcuts"""

    PARTIAL_RATIO = "partial_ratio"
    """Best ratio of the shorter string against substrings of the longer one"""

    TOKEN_SORT_RATIO = "token_sort_ratio"
    """Ratio after sorting the words of both strings"""

    TOKEN_SET_RATIO = "token_set_ratio"
    """Ratio over the intersection and remainders of the word sets"""


__all__ = ["Algorithm"]
