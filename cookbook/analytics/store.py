from __future__ import annotations

import time
from typing import Any

INITIAL_PICK = "initial_pick"
SEARCH = "search"

_events: list[dict[str, Any]] = []


def record_initial_pick(recipe_name: str) -> None:
    _events.append({"type": INITIAL_PICK, "timestamp": time.time(), "recipe": recipe_name})


def record_search(query: str, results_returned: int, started_at: float, source: str) -> None:
    """Log one search; ``started_at`` is the ``time.time()`` taken before filtering."""
    _events.append({
        "type": SEARCH,
        "timestamp": time.time(),
        "query": query,
        "results_returned": results_returned,
        "response_time_ms": round((time.time() - started_at) * 1000, 1),
        "source": source,
    })


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    if event_type is None:
        return _events
    return [e for e in _events if e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
