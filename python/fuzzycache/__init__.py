"""
fuzzycache - fuzzy string search with a self-repairing result cache

An in-memory index over a mutable list of strings. Results are cached per
query, and adding or removing a candidate patches every cached result list
in rank order instead of re-running the search.

Example usage:
    >>> import fuzzycache as fc

    >>> index = fc.FuzzyIndex(["bonjour", "bonsoir"])
    >>> index.search("bonjou")
    ['bonjour']

    # Mutations keep cached rankings current
    >>> index.add("bonjour!")
    >>> index.search("bonjou")
    ['bonjour', 'bonjour!']
    >>> index.remove("bonjour")
    >>> index.search("bonjou")
    ['bonjour!']

    # Drop all cached rankings
    >>> index.reset()
"""

from importlib.metadata import version as _get_version

from fuzzycache.enums import Algorithm
from fuzzycache.exceptions import AlgorithmError, FuzzyCacheError, ValidationError
from fuzzycache.index import CacheEntry, FuzzyIndex
from fuzzycache.ranking import Options, ScoredMatch, rank_all, rank_one

__version__ = _get_version("fuzzycache")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyCacheError",
    "ValidationError",
    "AlgorithmError",
    # Data model
    "Options",
    "ScoredMatch",
    "CacheEntry",
    # Enums
    "Algorithm",
    # Ranking
    "rank_all",
    "rank_one",
    # Index
    "FuzzyIndex",
]
