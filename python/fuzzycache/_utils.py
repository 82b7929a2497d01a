"""Internal utilities for fuzzycache."""

from typing import Callable, Union

from rapidfuzz import fuzz

from fuzzycache.enums import Algorithm
from fuzzycache.exceptions import AlgorithmError

# Algorithm name (lowercase) -> rapidfuzz scorer
SCORERS = {
    Algorithm.WRATIO.value: fuzz.WRatio,
    Algorithm.RATIO.value: fuzz.ratio,
    Algorithm.QRATIO.value: fuzz.QRatio,
    Algorithm.PARTIAL_RATIO.value: fuzz.partial_ratio,
    Algorithm.TOKEN_SORT_RATIO.value: fuzz.token_sort_ratio,
    Algorithm.TOKEN_SET_RATIO.value: fuzz.token_set_ratio,
}

VALID_ALGORITHMS = frozenset(SCORERS)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.TOKEN_SET_RATIO)
        'token_set_ratio'
        >>> normalize_algorithm("WRatio")
        'wratio'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def get_scorer(algorithm: Union[str, Algorithm]) -> Callable[..., float]:
    """Return the rapidfuzz scorer for an algorithm name or enum."""
    return SCORERS[normalize_algorithm(algorithm)]


__all__ = ["normalize_algorithm", "get_scorer", "VALID_ALGORITHMS"]
