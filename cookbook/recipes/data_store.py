from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

import pandas as pd
from pydantic import ValidationError

from ..config import DEFAULT_CONFIG
from .models import Recipe

logger = logging.getLogger(__name__)

_store: RecipeStore | None = None


class RecipeDataError(ValueError):
    """The recipe data file is not a list of valid recipe records."""


def _build_frame(records: tuple[Recipe, ...]) -> pd.DataFrame:
    # Lowercase every searchable field once for case-insensitive matching
    return pd.DataFrame(
        {
            "name": [r.name for r in records],
            "name_lower": [r.name.lower() for r in records],
            "description_lower": [r.description.lower() for r in records],
            "tags_lower": [[t.lower() for t in r.tags] for r in records],
            "ingredients_lower": [[i.lower() for i in r.recipe_ingredient] for r in records],
        },
        index=pd.RangeIndex(len(records)),
    )


class RecipeStore:
    """Read-only, ordered collection of recipes plus a lowercased lookup frame."""

    def __init__(self, records: Iterable[Recipe]) -> None:
        self._records: tuple[Recipe, ...] = tuple(records)
        self._frame = _build_frame(self._records)

    @classmethod
    def from_dicts(cls, rows: Iterable[dict[str, Any]]) -> RecipeStore:
        recipes: list[Recipe] = []
        for index, row in enumerate(rows):
            try:
                recipes.append(Recipe.model_validate(row))
            except ValidationError as exc:
                raise RecipeDataError(f"Invalid recipe at index {index}: {exc}") from exc
        return cls(recipes)

    @property
    def records(self) -> tuple[Recipe, ...]:
        return self._records

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Recipe:
        return self._records[index]


def load_recipes(path: Path) -> RecipeStore:
    """Read a JSON array of recipe objects into a ``RecipeStore``."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise RecipeDataError(f"{path} must contain a JSON array of recipes")
    store = RecipeStore.from_dicts(raw)
    logger.info("Loaded %d recipes from %s", len(store), path)
    if not len(store):
        logger.warning("Recipe store at %s is empty", path)
    return store


def get_store() -> RecipeStore:
    """Return the shared recipe store, loading it on first call."""
    global _store
    if _store is None:
        _store = load_recipes(DEFAULT_CONFIG.recipes_path)
    return _store
