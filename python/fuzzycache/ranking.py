"""Ranking layer for fuzzycache.

Thin wrappers around rapidfuzz that score a query against either a whole
candidate list (``rank_all``) or a single candidate (``rank_one``). Both
functions apply the same preprocessing and the same "no match" rule, so a
candidate scores identically whichever path produced it.

A candidate is a match only when every character of the processed query
appears, in order, in the processed candidate. Anything else is "no match",
regardless of the similarity score rapidfuzz would assign.

Example usage:
    >>> from fuzzycache.ranking import Options, rank_all, rank_one

    >>> [m.target for m in rank_all("bonjou", ["bonjour", "bonsoir"], Options())]
    ['bonjour']

    >>> rank_one("bonjou", "bonsoir") is None
    True
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterable

from rapidfuzz import process
from rapidfuzz.utils import default_process

from fuzzycache._utils import get_scorer
from fuzzycache.enums import Algorithm
from fuzzycache.exceptions import ValidationError

__all__ = ["Options", "ScoredMatch", "rank_all", "rank_one"]


@dataclass(frozen=True)
class Options:
    """Ranking configuration.

    Attributes:
        threshold: Exclusive lower bound. A match scoring at or below it is
            treated as no match. Defaults to negative infinity (no filtering).
        algorithm: rapidfuzz scorer used for every comparison.
    """

    threshold: float = -math.inf
    algorithm: str | Algorithm = Algorithm.WRATIO


@dataclass(frozen=True)
class ScoredMatch:
    """A candidate together with its score against one query. Higher is better."""

    target: str
    score: float


def _is_subsequence(needle: str, haystack: str) -> bool:
    chars = iter(haystack)
    return all(ch in chars for ch in needle)


def _check_threshold(threshold: object) -> float:
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise ValidationError(
            f"threshold must be a real number, got {type(threshold).__name__}"
        )
    return threshold


def rank_all(
    query: str,
    candidates: Iterable[str],
    options: Options | None = None,
) -> list[ScoredMatch]:
    """Score a query against every candidate and rank the matches.

    Args:
        query: The query string.
        candidates: Candidate strings, in insertion order.
        options: Threshold and algorithm. Defaults to ``Options()``.

    Returns:
        ScoredMatch objects sorted by score descending. Candidates with equal
        scores keep their relative order from ``candidates``. Matches scoring
        at or below ``options.threshold`` are excluded. An empty query (after
        preprocessing) matches nothing.

    Raises:
        ValidationError: If ``options.threshold`` is not a real number.
        AlgorithmError: If ``options.algorithm`` is not a known scorer.
    """
    if options is None:
        options = Options()
    threshold = _check_threshold(options.threshold)
    scorer = get_scorer(options.algorithm)

    processed_query = default_process(query)
    if not processed_query:
        return []

    matches = []
    for choice, score, _ in process.extract_iter(
        query, candidates, scorer=scorer, processor=default_process
    ):
        if score <= threshold:
            continue
        if _is_subsequence(processed_query, default_process(choice)):
            matches.append(ScoredMatch(choice, score))

    # list.sort is stable, ties stay in candidate order
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


def rank_one(
    query: str,
    target: str,
    algorithm: str | Algorithm = Algorithm.WRATIO,
) -> ScoredMatch | None:
    """Score a query against a single candidate.

    Returns:
        The ScoredMatch, or None when the candidate does not match at all.
        No threshold is applied here.
    """
    scorer = get_scorer(algorithm)
    processed_query = default_process(query)
    processed_target = default_process(target)
    if not processed_query or not _is_subsequence(processed_query, processed_target):
        return None
    return ScoredMatch(target, scorer(processed_query, processed_target))
