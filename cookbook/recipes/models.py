from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_RATING = 5.0


def clamp_rating(value: float) -> float:
    """Clamp a rating into [0, 5]; NaN counts as unrated."""
    if math.isnan(value):
        return 0.0
    return max(0.0, min(MAX_RATING, value))


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    image: str = ""
    tags: tuple[str, ...] = ()
    recipe_ingredient: tuple[str, ...] = Field(default=(), alias="recipeIngredient")
    rating: float = 0.0

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("description", "image", mode="before")
    @classmethod
    def _none_to_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", "recipe_ingredient", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("rating", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("rating")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_rating(value)


class SearchResponse(BaseModel):
    query: str
    total: int
    recipes: list[Recipe]
    html: str


class RandomRecipeResponse(BaseModel):
    recipe: Recipe | None = None
    html: str
