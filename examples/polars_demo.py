# %% [markdown]
# # fuzzt Polars Integration Demo
#
# | Level | Module | Input | Use Case |
# |-------|--------|-------|----------|
# | Core | `fuzzt.*` | 2 strings | Single comparison |
# | Batch | `fuzzt.batch.*` | Python lists | List-based matching |
# | Series | `fuzzt.polars_ext.*` | pl.Series | Column-level ops |
# | Expression | `.fuzzt.*` | pl.Expr | Expression chains |

# %%
import polars as pl

import fuzzt
from fuzzt import batch
from fuzzt.polars_ext import match_series, top_n_series

# %% [markdown]
# ### Batch functions

# %%
products = ["iPhone 15 Pro", "Galaxy S24", "Pixel 8", "iPhone 15"]
for m in batch.best_matches(products, "iphone 15", metric="jaro_winkler", limit=2):
    print(f"  [{m.score:.3f}] {m.text}")

matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
for row in matrix:
    print("  " + "  ".join(f"{score:.2f}" for score in row))

# %% [markdown]
# ### Series functions

# %%
queries = pl.Series(["appel", "banan", "chery"])
targets = pl.Series(["apple", "banana", "cherry", "date"])

print(match_series(queries, targets, min_similarity=0.85))
print(top_n_series(queries, targets, limit=2))

# %% [markdown]
# ### Expression namespace
#
# Importing fuzzt registers `.fuzzt` on every Polars expression.

# %%
df = pl.DataFrame(
    {
        "name": ["John Smith", "Jon Smith", "Jane Doe", "Johnny Smith"],
        "alias": ["J. Smith", "Jon Smith", "Jane D.", "John Smith"],
    }
)

print(
    df.with_columns(
        score=pl.col("name").fuzzt.similarity("John Smith"),
        alias_score=pl.col("name").fuzzt.similarity(pl.col("alias")),
        dist=pl.col("name").fuzzt.distance("John Smith"),
        close=pl.col("name").fuzzt.is_similar("John Smith", min_similarity=0.9),
    )
)

# %%
categories = ["Electronics", "Clothing", "Food & Beverage"]
raw = pl.DataFrame({"raw_category": ["electronis", "clothng", "food", None]})
print(
    raw.with_columns(
        category=pl.col("raw_category").fuzzt.best_match(
            categories, processor=fuzzt.LowerAlphaNumStringProcessor()
        )
    )
)
