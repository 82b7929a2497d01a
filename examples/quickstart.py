# %% [markdown]
# # fuzzycache: Quickstart
#
# **Search once, stay fresh** - A fuzzy index whose cached results follow
# every change to the candidate list.
#
# ---
#
# ## The Problem
#
# Autocomplete boxes search the same few prefixes over and over, while the
# list behind them keeps changing. Re-ranking the whole list on every
# keystroke is wasteful; caching the results goes stale as soon as an item
# is added or removed.
#
# `FuzzyIndex` caches each query's ranking and patches it in place when the
# list changes.

# %%
import polars as pl

import fuzzycache as fc

# %% [markdown]
# ## Part 1: Search and cache

# %%
greetings = fc.FuzzyIndex(["bonjour", "bonsoir", "bonne nuit"])

print(greetings.search("bonjou"))  # ranks the whole list, caches the result
print(greetings.search("bonjou"))  # served from the cache
print(f"Cached queries: {greetings.cached_queries()}")

# %% [markdown]
# ## Part 2: Mutations repair the cache
#
# Adding a candidate scores it against each cached query only, and splices it
# into the cached ranking at the right position.

# %%
greetings.add("bonjourno")
greetings.add("bonjou")  # exact match, goes straight to the top
for match in greetings.search_scored("bonjou"):
    print(f"  [{match.score:5.1f}] {match.target}")

greetings.remove("bonjour")
print(greetings.search("bonjou"))

# %% [markdown]
# ## Part 3: Thresholds and algorithms
#
# Matches scoring at or below `threshold` are dropped. Scores are on the
# 0-100 scale of the chosen rapidfuzz scorer.

# %%
products = fc.FuzzyIndex(
    ["MacBook Pro 14-inch", "MacBook Pro 16-inch", "MacBook Air M3", "iPhone 15 Pro"],
    threshold=60,
    algorithm=fc.Algorithm.TOKEN_SET_RATIO,
)
print(products.search("macbook pro"))

# Candidates that miss the threshold are never spliced in later.
# reset() forces a full re-rank on the next search.
products.reset()

# %% [markdown]
# ## Part 4: Polars

# %%
catalog = pl.DataFrame({"name": ["Apple Inc", "Microsoft Corp", "Google LLC", "Apple Records"]})
index = fc.FuzzyIndex.from_dataframe(catalog, "name")

print(index.search_series(pl.Series(["apple", "micro", None, "xyz"])))
