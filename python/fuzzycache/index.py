"""FuzzyIndex: a fuzzy search index with a self-repairing query cache.

This module provides an index over a mutable list of strings. Every query
result is cached, and when the list changes the cached results are patched
in place instead of being recomputed, so repeated queries stay cheap even
while candidates are being added and removed.

Warning:
    This class is NOT thread-safe. The candidate list and the cache form a
    single consistency unit: guard every add/remove/reset with exclusive
    access if an instance is shared between threads.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Union

import polars as pl
import structlog

from fuzzycache.enums import Algorithm
from fuzzycache.ranking import Options, ScoredMatch, rank_all, rank_one

logger = structlog.get_logger(__name__)


@dataclass
class CacheEntry:
    """Cached ranking for one query.

    ``fuzzy`` holds the scored matches in rank order and ``results`` the bare
    candidate strings. The two lists are always the same length and
    ``results[i] == fuzzy[i].target``; only ``insert`` and ``pop`` touch them.
    """

    fuzzy: List[ScoredMatch] = field(default_factory=list)
    results: List[str] = field(default_factory=list)

    @classmethod
    def from_matches(cls, matches: List[ScoredMatch]) -> "CacheEntry":
        return cls(fuzzy=list(matches), results=[m.target for m in matches])

    def insertion_index(self, score: float) -> int:
        """Position for a new match: after every entry scoring at least ``score``."""
        index = 0
        while index < len(self.fuzzy) and self.fuzzy[index].score >= score:
            index += 1
        return index

    def insert(self, index: int, match: ScoredMatch) -> None:
        self.fuzzy.insert(index, match)
        self.results.insert(index, match.target)

    def pop(self, index: int) -> ScoredMatch:
        self.results.pop(index)
        return self.fuzzy.pop(index)

    def __len__(self) -> int:
        return len(self.results)


class FuzzyIndex:
    """
    A fuzzy search index whose cached results survive list mutation.

    The first search for a query ranks the whole candidate list and caches
    the outcome. Later ``add`` and ``remove`` calls score only the affected
    candidate against each cached query and splice it into (or out of) the
    cached ranking, so a cached query never triggers a second full ranking
    until ``reset`` is called.

    A candidate added while it does not pass the threshold for a cached query
    is never retroactively inserted into that query's results; call
    ``reset`` to force a full re-rank.

    Warning:
        This class is NOT thread-safe. Create separate instances per thread,
        or serialize all mutations externally.

    Example:
        >>> from fuzzycache import FuzzyIndex
        >>>
        >>> index = FuzzyIndex(["bonjour", "bonsoir"])
        >>> index.search("bonjou")
        ['bonjour']
        >>> index.add("bonjourno")  # cached "bonjou" is patched, not re-ranked
        >>> index.remove("bonjour")
        >>> index.search("bonjou")
        ['bonjourno']
    """

    def __init__(
        self,
        items: Optional[Iterable[str]] = None,
        options: Optional[Options] = None,
        *,
        threshold: Optional[float] = None,
        algorithm: Optional[Union[str, Algorithm]] = None,
    ):
        """
        Create a FuzzyIndex from a list of strings.

        Args:
            items: Initial candidates. The index keeps its own copy.
            options: Ranking options (threshold and algorithm).
            threshold: Shortcut overriding ``options.threshold``
            algorithm: Shortcut overriding ``options.algorithm``
        """
        options = options if options is not None else Options()
        if threshold is not None:
            options = replace(options, threshold=threshold)
        if algorithm is not None:
            options = replace(options, algorithm=algorithm)

        self._items: List[str] = list(items) if items is not None else []
        self._options = options
        self._cache: Dict[str, CacheEntry] = {}

    @classmethod
    def from_series(
        cls,
        series: "pl.Series",
        options: Optional[Options] = None,
        **kwargs,
    ) -> "FuzzyIndex":
        """
        Create a FuzzyIndex from a Polars Series.

        Args:
            series: Polars Series of strings to index. Nulls become ""
            options: Ranking options
            **kwargs: ``threshold`` / ``algorithm`` shortcuts

        Returns:
            FuzzyIndex instance

        Example:
            >>> names = pl.Series(["Apple", "Microsoft", "Google"])
            >>> index = FuzzyIndex.from_series(names, threshold=50)
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, options, **kwargs)

    @classmethod
    def from_dataframe(
        cls,
        df: "pl.DataFrame",
        column: str,
        options: Optional[Options] = None,
        **kwargs,
    ) -> "FuzzyIndex":
        """Create a FuzzyIndex from a DataFrame column."""
        return cls.from_series(df[column], options, **kwargs)

    @property
    def options(self) -> Options:
        return self._options

    def _entry(self, query: str) -> CacheEntry:
        # Membership test, an empty cached ranking is still a hit
        if query in self._cache:
            return self._cache[query]

        entry = CacheEntry.from_matches(rank_all(query, self._items, self._options))
        self._cache[query] = entry
        logger.debug("Cache miss", query=query, matches=len(entry))
        return entry

    def search(self, query: str = "") -> List[str]:
        """
        Return the candidates matching ``query``, best first.

        The first call for a query ranks the whole list; later calls are served
        from the cache, which ``add``/``remove`` keep up to date.

        Args:
            query: Query string to search for

        Returns:
            Matching candidates in rank order (empty list when nothing matches)
        """
        return list(self._entry(query).results)

    def search_scored(self, query: str = "") -> List[ScoredMatch]:
        """Like ``search`` but return the ScoredMatch objects."""
        return list(self._entry(query).fuzzy)

    def batch_search(self, queries: Iterable[str]) -> List[List[str]]:
        """Search for multiple queries, returning one result list per query."""
        return [self.search(q) for q in queries]

    def search_series(
        self,
        queries: "pl.Series",
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings. Null queries are skipped
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched candidate
            - rank: Position of the match in the query's results (0 = best)
            - score: Similarity score
        """
        rows = []

        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            for rank, match in enumerate(self._entry(str(query)).fuzzy):
                row = {
                    "query_idx": query_idx,
                    "match": match.target,
                    "rank": rank,
                    "score": float(match.score),
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        columns = ["query_idx", "query", "match", "rank", "score"]
        if not include_query:
            columns.remove("query")

        if not rows:
            schema = {
                "query_idx": pl.Int64,
                "query": pl.Utf8,
                "match": pl.Utf8,
                "rank": pl.Int64,
                "score": pl.Float64,
            }
            return pl.DataFrame(schema={name: schema[name] for name in columns})

        return pl.DataFrame(rows).select(columns)

    def add(self, target: str) -> None:
        """
        Append a candidate and splice it into every cached ranking it matches.

        For each cached query the new candidate is scored on its own. If it does
        not match, or scores at or below the threshold, that cached ranking is
        left as it is. Otherwise it is inserted after every cached match with an
        equal or better score.
        """
        self._items.append(target)

        patched = 0
        for query, entry in self._cache.items():
            match = rank_one(query, target, self._options.algorithm)
            if match is None or match.score <= self._options.threshold:
                continue
            entry.insert(entry.insertion_index(match.score), match)
            patched += 1

        logger.debug("Candidate added", target=target, patched=patched)

    def add_all(self, targets: Iterable[str]) -> None:
        """Add several candidates, in order."""
        for target in targets:
            self.add(target)

    def remove(self, target: str) -> None:
        """
        Remove the first occurrence of a candidate and drop it from the cache.

        Each cached ranking containing ``target`` loses its first occurrence of
        it. Removing a candidate that is not indexed does nothing.
        """
        try:
            self._items.remove(target)
        except ValueError:
            return

        patched = 0
        for entry in self._cache.values():
            if target in entry.results:
                entry.pop(entry.results.index(target))
                patched += 1

        logger.debug("Candidate removed", target=target, patched=patched)

    def reset(self) -> None:
        """Drop every cached ranking. Candidates and options are kept."""
        logger.info("Query cache cleared", cached=len(self._cache))
        self._cache = {}

    def is_cached(self, query: str) -> bool:
        return query in self._cache

    def cached_queries(self) -> List[str]:
        """Return the cached queries in the order they were first searched."""
        return list(self._cache)

    def get_items(self) -> List[str]:
        """Return the list of indexed items."""
        return self._items.copy()

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._items)

    def __contains__(self, target: object) -> bool:
        return target in self._items

    def __repr__(self) -> str:
        algorithm = self._options.algorithm
        if isinstance(algorithm, Algorithm):
            algorithm = algorithm.value
        return (
            f"FuzzyIndex(algorithm={algorithm!r}, size={len(self._items)}, "
            f"cached={len(self._cache)})"
        )
