from __future__ import annotations

import logging
import time
from enum import Enum

import numpy as np

from .analytics.store import record_initial_pick, record_search
from .config import DEFAULT_CONFIG, CookbookConfig
from .recipes.data_store import RecipeStore
from .recipes.models import Recipe
from .recipes.search import filter_recipes, pick_random_recipe
from .rendering.page import Event, PageDocument
from .rendering.templates import render_recipes

logger = logging.getLogger(__name__)

LOAD_EVENT = "DOMContentLoaded"
SUBMIT_EVENT = "submit"

# Used by every controller that is not handed its own generator
DEFAULT_RNG = np.random.default_rng(DEFAULT_CONFIG.random_seed)


class ControllerState(str, Enum):
    uninitialized = "uninitialized"
    initialized = "initialized"


class ControllerStateError(RuntimeError):
    """A search was submitted before the page finished initializing."""


class PageController:
    """Wires page load and search-form submission to the filter and renderer."""

    def __init__(
        self,
        store: RecipeStore,
        document: PageDocument,
        config: CookbookConfig = DEFAULT_CONFIG,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.store = store
        self.document = document
        self.config = config
        self.rng = rng if rng is not None else DEFAULT_RNG
        self.state = ControllerState.uninitialized
        self.results: list[Recipe] = []

    def attach(self) -> None:
        # Look the elements up now so a broken page fails before any event fires
        form = self.document.get_element_by_id(self.config.search_form_id)
        self.document.get_element_by_id(self.config.search_input_id)
        self.document.get_element_by_id(self.config.container_id)

        self.document.add_event_listener(LOAD_EVENT, self.init)
        form.add_event_listener(SUBMIT_EVENT, self.search_handler)

    def _render(self, recipes: list[Recipe]) -> None:
        container = self.document.get_element_by_id(self.config.container_id)
        render_recipes(recipes, container)
        self.results = recipes

    def init(self, event: Event | None = None) -> None:
        if self.state is ControllerState.initialized:
            logger.debug("Page already initialized, ignoring %s", LOAD_EVENT)
            return

        recipe = pick_random_recipe(self.store, self.rng)
        if recipe is None:
            logger.warning("Recipe store is empty, nothing to show on load")
            self._render([])
        else:
            self._render([recipe])
            record_initial_pick(recipe.name)
        self.state = ControllerState.initialized

    def search_handler(self, event: Event) -> list[Recipe]:
        event.prevent_default()
        if self.state is not ControllerState.initialized:
            raise ControllerStateError("Search submitted before the page was initialized")

        start_time = time.time()
        search_input = self.document.get_element_by_id(self.config.search_input_id)
        query = search_input.value.lower()
        results = filter_recipes(query, self.store)
        self._render(results)

        record_search(query, len(results), start_time, source="page")
        return results
