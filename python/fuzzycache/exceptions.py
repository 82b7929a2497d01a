"""Exception hierarchy for fuzzycache.

The index itself raises nothing; these come from the ranking layer and
propagate unchanged through ``FuzzyIndex.search`` and ``FuzzyIndex.add``.
"""


class FuzzyCacheError(Exception):
    """Base class for all fuzzycache errors."""


class ValidationError(FuzzyCacheError, ValueError):
    """Raised when a ranking option has an invalid value or type."""


class AlgorithmError(FuzzyCacheError, ValueError):
    """Raised when an unknown scoring algorithm is requested."""


__all__ = ["FuzzyCacheError", "ValidationError", "AlgorithmError"]
