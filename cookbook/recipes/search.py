from __future__ import annotations

import numpy as np

from .data_store import RecipeStore
from .models import Recipe


def _any_contains(values: list[str], query: str) -> bool:
    return any(query in value for value in values)


def filter_recipes(query: str | None, store: RecipeStore) -> list[Recipe]:
    """
    Return the recipes matching ``query``, sorted by name.

    A recipe matches when the query is a substring of its name, description,
    any tag or any ingredient (all compared lowercased). An empty query
    matches everything. Equal names keep their store order.
    """
    query = (query or "").lower()
    df = store.frame
    if df.empty:
        return []

    mask = (
        df["name_lower"].str.contains(query, regex=False)
        | df["description_lower"].str.contains(query, regex=False)
        | df["tags_lower"].apply(_any_contains, query=query).astype(bool)
        | df["ingredients_lower"].apply(_any_contains, query=query).astype(bool)
    )

    # Stable sort on raw names compares code points, not locale collation
    matched = df.loc[mask].sort_values("name", kind="stable")
    return [store[int(i)] for i in matched.index]


def pick_random_recipe(
    store: RecipeStore,
    rng: np.random.Generator | None = None,
) -> Recipe | None:
    """Pick one recipe uniformly at random, or ``None`` for an empty store."""
    if not len(store):
        return None
    rng = rng or np.random.default_rng()
    return store[int(rng.integers(len(store)))]

