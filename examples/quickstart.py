# %% [markdown]
# # textsim quickstart
#
# Scoring, near-match checks and fuzzy search in a few lines.
#
# | Part | Topic |
# |------|-------|
# | 1 | Similarity metrics |
# | 2 | SimilarityIndex |
# | 3 | Picking a best match |
# | 4 | Fuzzy search in text |
# | 5 | Polars |

# %%
import polars as pl

import textsim as ts

# %% [markdown]
# ## Part 1: Similarity metrics
#
# Four algorithms, all scoring in [0, 1]. Bigram overlap (Dice) is the default.

# %%
pairs = [("apple", "apples"), ("hello", "hallo"), ("MARTHA", "MARHTA"), ("apple", "orange")]

for a, b in pairs:
    row = "  ".join(f"{algo.value}={ts.score(a, b, algo):.3f}" for algo in ts.Algorithm)
    print(f"{a!r:>10} vs {b!r:<10} {row}")

# Raw edit distance is also available
print(ts.levenshtein("kitten", "sitting"))  # 3

# %% [markdown]
# ## Part 2: SimilarityIndex
#
# Build once, query many times. The index is read-only, so one instance can
# serve many threads.

# %%
index = ts.SimilarityIndex(["apple", "banana", "grape"])

print(index.contains_similar("apples", threshold=0.8))  # True
print(index.contains_similar("orange", threshold=0.9))  # False

for match in sorted(index.rank_against("grapes"), key=lambda m: m.score, reverse=True):
    print(f"  [{match.score:.0%}] {match.text}")

# %% [markdown]
# ## Part 3: Picking a best match
#
# `best_match` works on an explicit list and reports the full ranking.

# %%
result = ts.best_match("apple", ["apples", "banana", "grape"])
print(result.best, result.best_index)

print(ts.best_match("apple", []))  # BestMatch(ranking=[], best=None, best_index=-1)

# %% [markdown]
# ## Part 4: Fuzzy search in text

# %%
print(ts.fuzzy_match("Hello, wrld!", "world", max_edit_distance=2))  # ['wrld']

sentence = "The quick brown fox jumps over the lazy dog"
print(ts.proximity_check(sentence, "fox", "dog", 5))  # True
print(ts.proximity_check(sentence, "fox", "dog", 2))  # False

print(ts.highlight("Hello, world!", "world"))

# %% [markdown]
# ## Part 5: Polars
#
# Importing textsim registers a `.textsim` expression namespace.

# %%
df = pl.DataFrame({"raw": ["apples", "bananna", "grapes", "kiwi"]})
print(
    df.with_columns(
        fruit=pl.col("raw").textsim.best_match(["apple", "banana", "grape"], min_similarity=0.5),
        score=pl.col("raw").textsim.similarity("apple"),
    )
)

queries = pl.Series(["appel", "grap"])
print(index.search_series(queries, min_similarity=0.3))
