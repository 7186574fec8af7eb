from __future__ import annotations

from html import escape
from typing import Iterable, Protocol

from ..recipes.models import MAX_RATING, Recipe, clamp_rating

STAR_COUNT = int(MAX_RATING)
FILLED_STAR = '<span aria-hidden="true" class="icon-star">⭐</span>'
EMPTY_STAR = '<span aria-hidden="true" class="icon-star-empty">☆</span>'


class RenderTargetError(RuntimeError):
    """Rendering was attempted without a container to write into."""


class RenderTarget(Protocol):
    def set_inner_html(self, markup: str) -> None: ...


def tags_template(tags: Iterable[str]) -> str:
    return "".join(f"<li>{escape(tag)}</li>" for tag in tags)


def rating_template(rating: float) -> str:
    """Five star glyphs; fractional ratings round down."""
    rating = clamp_rating(float(rating))
    stars = "".join(
        FILLED_STAR if i <= rating else EMPTY_STAR for i in range(1, STAR_COUNT + 1)
    )
    return (
        f'<span class="rating" role="img" '
        f'aria-label="Rating: {rating:g} out of {STAR_COUNT} stars">'
        f"{stars}</span>"
    )


def recipe_template(recipe: Recipe) -> str:
    name = escape(recipe.name)
    return (
        '<figure class="recipe">'
        f'<img src="{escape(recipe.image)}" alt="Image of {name}" />'
        "<figcaption>"
        f'<ul class="recipe__tags">{tags_template(recipe.tags)}</ul>'
        f'<h2><a href="#">{name}</a></h2>'
        f'<p class="recipe__ratings">{rating_template(recipe.rating)}</p>'
        f'<p class="recipe__description">{escape(recipe.description)}</p>'
        "</figcaption>"
        "</figure>"
    )


def recipes_template(recipes: Iterable[Recipe]) -> str:
    return "".join(recipe_template(recipe) for recipe in recipes)


def render_recipes(recipes: Iterable[Recipe], container: RenderTarget | None) -> str:
    """Replace the container's whole content with one card per recipe."""
    if container is None:
        raise RenderTargetError("No container element to render recipes into")
    markup = recipes_template(recipes)
    container.set_inner_html(markup)
    return markup
