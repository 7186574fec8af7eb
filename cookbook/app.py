from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_search
from .config import DEFAULT_CONFIG
from .controller import DEFAULT_RNG, LOAD_EVENT, SUBMIT_EVENT, PageController
from .recipes.data_store import get_store
from .recipes.models import RandomRecipeResponse, Recipe, SearchResponse
from .recipes.search import filter_recipes, pick_random_recipe
from .rendering.page import Event, PageDocument
from .rendering.templates import recipes_template

logging.basicConfig(level=DEFAULT_CONFIG.log_level)
logging.getLogger("cookbook").setLevel(DEFAULT_CONFIG.log_level)

app = FastAPI(title="Cookbook", version="1.0.0")

_page_template: str | None = None


def _new_page() -> PageDocument:
    global _page_template
    if _page_template is None:
        _page_template = DEFAULT_CONFIG.page_template_path.read_text(encoding="utf-8")
    return PageDocument(_page_template, DEFAULT_CONFIG)


def _load_page() -> tuple[PageDocument, PageController]:
    """Build a page and run its load event, as a browser would on navigation."""
    document = _new_page()
    controller = PageController(get_store(), document, DEFAULT_CONFIG, rng=DEFAULT_RNG)
    controller.attach()
    document.dispatch_event(Event(LOAD_EVENT))
    return document, controller


# ── Pages ────────────────────────────────────────────────────────────────


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    document, _ = _load_page()
    return document.to_html()


@app.get("/search", response_class=HTMLResponse)
def search_page(q: str = Query(default="", max_length=200)) -> str:
    document, _ = _load_page()
    document.get_element_by_id(DEFAULT_CONFIG.search_input_id).value = q
    form = document.get_element_by_id(DEFAULT_CONFIG.search_form_id)
    form.dispatch_event(Event(SUBMIT_EVENT))
    return document.to_html()


# ── JSON API ─────────────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "recipes": len(get_store())}


@app.get("/api/recipes", response_model=list[Recipe])
def list_recipes() -> list[Recipe]:
    return list(get_store())


@app.get("/api/recipes/search", response_model=SearchResponse)
def search_recipes(q: str = Query(default="", max_length=200)) -> SearchResponse:
    start_time = time.time()
    query = q.lower()
    results = filter_recipes(query, get_store())
    html = recipes_template(results)

    record_search(query, len(results), start_time, source="api")
    return SearchResponse(query=query, total=len(results), recipes=results, html=html)


@app.get("/api/recipes/random", response_model=RandomRecipeResponse)
def random_recipe() -> RandomRecipeResponse:
    recipe = pick_random_recipe(get_store(), DEFAULT_RNG)
    if recipe is None:
        return RandomRecipeResponse(recipe=None, html="")
    return RandomRecipeResponse(recipe=recipe, html=recipes_template([recipe]))


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


app.mount("/static", StaticFiles(directory=str(DEFAULT_CONFIG.static_dir)), name="static")
