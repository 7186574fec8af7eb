from __future__ import annotations

from dataclasses import replace
from unittest.mock import patch

import numpy as np
import pytest

from cookbook.analytics.store import INITIAL_PICK, SEARCH, clear_events, get_events
from cookbook.config import DEFAULT_CONFIG
from cookbook.controller import (
    DEFAULT_RNG,
    LOAD_EVENT,
    SUBMIT_EVENT,
    ControllerState,
    ControllerStateError,
    PageController,
)
from cookbook.recipes.data_store import RecipeStore
from cookbook.rendering.page import ElementNotFoundError, Event, PageDocument

TEMPLATE = '<input value="$search_value"><main id="recipes">$recipes_html</main>'


def _store() -> RecipeStore:
    return RecipeStore.from_dicts([
        {"name": "Bean Soup", "tags": ["soup"], "recipeIngredient": ["beans"],
         "rating": 3, "description": "Hearty."},
        {"name": "Apple Pie", "tags": ["dessert"], "recipeIngredient": ["apple", "sugar"],
         "rating": 4.5, "description": "Sweet."},
    ])


def _page(store: RecipeStore | None = None) -> tuple[PageDocument, PageController]:
    document = PageDocument(TEMPLATE)
    controller = PageController(store if store is not None else _store(), document, rng=np.random.default_rng(0))
    controller.attach()
    return document, controller


def _container(document: PageDocument):
    return document.get_element_by_id(DEFAULT_CONFIG.container_id)


def _submit(document: PageDocument, value: str) -> Event:
    document.get_element_by_id(DEFAULT_CONFIG.search_input_id).value = value
    event = Event(SUBMIT_EVENT)
    document.get_element_by_id(DEFAULT_CONFIG.search_form_id).dispatch_event(event)
    return event


def test_starts_uninitialized_with_empty_container():
    document, controller = _page()
    assert controller.state is ControllerState.uninitialized
    assert _container(document).inner_html == ""


def test_load_event_renders_one_random_recipe():
    clear_events()
    document, controller = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    assert controller.state is ControllerState.initialized
    assert len(controller.results) == 1
    assert _container(document).inner_html.count('<figure class="recipe">') == 1
    picks = get_events(INITIAL_PICK)
    assert picks[-1]["recipe"] == controller.results[0].name


def test_init_fires_only_once():
    document, controller = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    first = _container(document).inner_html
    with patch("cookbook.controller.pick_random_recipe") as mock_pick:
        document.dispatch_event(Event(LOAD_EVENT))
        mock_pick.assert_not_called()
    assert _container(document).inner_html == first


def test_search_prevents_default_and_renders_matches():
    document, controller = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    event = _submit(document, "BEAN")
    assert event.default_prevented
    assert [r.name for r in controller.results] == ["Bean Soup"]
    html = _container(document).inner_html
    assert "Bean Soup" in html
    assert "Apple Pie" not in html


def test_empty_search_renders_all_sorted():
    document, controller = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    _submit(document, "")
    assert [r.name for r in controller.results] == ["Apple Pie", "Bean Soup"]
    html = _container(document).inner_html
    assert html.index("Apple Pie") < html.index("Bean Soup")


def test_search_without_matches_empties_container():
    document, controller = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    _submit(document, "lasagna")
    assert controller.results == []
    assert _container(document).inner_html == ""
    assert controller.state is ControllerState.initialized


def test_search_records_event():
    clear_events()
    document, _ = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    _submit(document, "Apple")
    searches = get_events(SEARCH)
    assert len(searches) == 1
    assert searches[0]["query"] == "apple"
    assert searches[0]["results_returned"] == 1
    assert searches[0]["source"] == "page"


def test_search_before_init_raises():
    document, _ = _page()
    with pytest.raises(ControllerStateError):
        _submit(document, "bean")


def test_empty_store_renders_nothing_on_load():
    document, controller = _page(RecipeStore([]))
    document.dispatch_event(Event(LOAD_EVENT))
    assert controller.state is ControllerState.initialized
    assert _container(document).inner_html == ""


def test_every_recipe_reachable_on_load():
    store = _store()
    rng = np.random.default_rng(3)
    seen = set()
    for _ in range(200):
        document = PageDocument(TEMPLATE)
        controller = PageController(store, document, rng=rng)
        controller.attach()
        document.dispatch_event(Event(LOAD_EVENT))
        seen.add(controller.results[0].name)
    assert seen == {"Apple Pie", "Bean Soup"}


def test_to_html_includes_rendered_content_and_escaped_query():
    document, _ = _page()
    document.dispatch_event(Event(LOAD_EVENT))
    _submit(document, '"><script>')
    html = document.to_html()
    assert 'value="&quot;&gt;&lt;script&gt;"' in html
    assert "<script>" not in html


def test_unknown_element_raises():
    document = PageDocument(TEMPLATE)
    with pytest.raises(ElementNotFoundError):
        document.get_element_by_id("missing")


def test_attach_fails_fast_without_form():
    document = PageDocument(TEMPLATE)
    config = replace(DEFAULT_CONFIG, search_form_id="other-form")
    controller = PageController(_store(), document, config=config)
    with pytest.raises(ElementNotFoundError):
        controller.attach()


def test_controllers_share_one_generator_by_default():
    first = PageController(_store(), PageDocument(TEMPLATE))
    second = PageController(_store(), PageDocument(TEMPLATE))
    assert first.rng is DEFAULT_RNG
    assert second.rng is DEFAULT_RNG


def test_seeded_default_generator_still_reaches_every_recipe():
    with patch("cookbook.controller.DEFAULT_RNG", np.random.default_rng(11)):
        seen = set()
        for _ in range(200):
            document = PageDocument(TEMPLATE)
            controller = PageController(_store(), document)
            controller.attach()
            document.dispatch_event(Event(LOAD_EVENT))
            seen.add(controller.results[0].name)
    assert seen == {"Apple Pie", "Bean Soup"}
