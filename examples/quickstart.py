# %% [markdown]
# # fuzzt: A Quick Tour
#
# Compare strings with edit distances and similarities, then rank candidates
# against a query.
#
# ```
# "kitten"   vs  "sitting"
# "martha"   vs  "marhta"
# "brazil"   vs  "BRA ZIL"
# ```
#
# | Part | Topic |
# |------|-------|
# | 1 | Edit distances |
# | 2 | Similarities in [0, 1] |
# | 3 | Ranking with get_top_n |
# | 4 | Generic sequences |
# | 5 | Feature toggles |

# %%
import fuzzt

# %% [markdown]
# ---
# ## Part 1: Edit distances
#
# Levenshtein counts insertions, deletions and substitutions. OSA also
# counts a swap of two neighbours as one edit, as long as no substring is
# edited twice. Damerau-Levenshtein drops that restriction.

# %%
print(f"levenshtein('kitten', 'sitting')      = {fuzzt.levenshtein('kitten', 'sitting')}")
print(f"osa_distance('ab', 'bca')             = {fuzzt.osa_distance('ab', 'bca')}")
print(f"damerau_levenshtein('ab', 'bca')      = {fuzzt.damerau_levenshtein('ab', 'bca')}")
print(f"hamming('hamming', 'hammers')         = {fuzzt.hamming('hamming', 'hammers')}")

# %% [markdown]
# Hamming needs equal lengths.

# %%
try:
    fuzzt.hamming("ham", "hamming")
except fuzzt.LengthMismatchError as exc:
    print(f"LengthMismatchError: {exc}")

# %% [markdown]
# ---
# ## Part 2: Similarities

# %%
pairs = [("martha", "marhta"), ("dwayne", "duane"), ("night", "nacht"), ("test", "tent")]
metrics = [
    fuzzt.normalized_levenshtein,
    fuzzt.normalized_damerau_levenshtein,
    fuzzt.jaro,
    fuzzt.jaro_winkler,
    fuzzt.sorensen_dice,
    fuzzt.sequence_matcher,
]

header = f"{'pair':<20}" + "".join(f"{m.__name__[:14]:>16}" for m in metrics)
print(header)
for a, b in pairs:
    row = f"{a + ' / ' + b:<20}" + "".join(f"{m(a, b):>16.3f}" for m in metrics)
    print(row)

# %% [markdown]
# ---
# ## Part 3: Ranking
#
# `get_top_n` scores every choice, drops those below `cutoff`, sorts the rest
# best first and keeps at most `limit`. Equal scores keep their input order.

# %%
choices = ["trazil", "BRA ZIL", "brazil", "spain", "braziu"]

print(fuzzt.get_top_n("brazil", choices, cutoff=0.7, limit=3))
print(fuzzt.get_top_n("brazil", choices, cutoff=0.7, limit=2, metric="jaro_winkler"))
print(
    fuzzt.get_top_n(
        "brazil",
        choices,
        cutoff=0.7,
        limit=2,
        processor=fuzzt.LowerAlphaNumStringProcessor(),
    )
)

# %% [markdown]
# `extract` returns the scores and original positions as well.

# %%
for candidate in fuzzt.extract("apple", ["apply", "apples", "ape", "applet"], cutoff=0.5):
    print(f"  [{candidate.score:.2f}] #{candidate.id} {candidate.text}")

# %% [markdown]
# ---
# ## Part 4: Generic sequences
#
# The `generic_*` functions accept any sequence whose elements compare with
# `==`. Here, words instead of characters.

# %%
a = "the quick brown fox".split()
b = "the brown quick fox".split()
print(f"generic_levenshtein  = {fuzzt.generic_levenshtein(a, b)}")
print(f"generic_osa_distance = {fuzzt.generic_osa_distance(a, b)}")
print(f"generic_jaro         = {fuzzt.generic_jaro(a, b):.3f}")

# %% [markdown]
# ---
# ## Part 5: Feature toggles
#
# Metric families can be switched off with `FUZZT_FEATURES` or
# `fuzzt.config.configure`. The default ranking metric falls back to the
# next enabled family.

# %%
fuzzt.config.configure(["jaro", "gestalt"])
print("Available:", [m.value for m in fuzzt.available_metrics()])
print(fuzzt.get_top_n("martha", ["xyz", "marhta"], limit=1))
try:
    fuzzt.get_metric("levenshtein")
except fuzzt.AlgorithmError as exc:
    print(f"AlgorithmError: {exc}")
fuzzt.config.reset()
