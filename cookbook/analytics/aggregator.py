from __future__ import annotations

from collections import Counter
from typing import Any

from .store import INITIAL_PICK, SEARCH


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == SEARCH]
    picks = [e for e in events if e["type"] == INITIAL_PICK]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Result counts
    returned = [s.get("results_returned", 0) for s in searches]
    zero_results = sum(1 for r in returned if r == 0)
    avg_results = round(sum(returned) / total, 1) if total else 0.0

    # Top queries; the empty query is the "show everything" search
    query_counter: Counter[str] = Counter()
    for s in searches:
        query_counter[s.get("query", "")] += 1
    top_queries = [{"query": q, "count": c} for q, c in query_counter.most_common(10)]

    # Which recipes the landing page opened with
    pick_counter: Counter[str] = Counter()
    for p in picks:
        pick_counter[p.get("recipe", "unknown")] += 1
    top_initial_picks = [{"name": n, "count": c} for n, c in pick_counter.most_common(10)]

    source_usage = dict(Counter(s.get("source", "unknown") for s in searches))

    return {
        "total_searches": total,
        "total_initial_picks": len(picks),
        "avg_response_time_ms": avg_time,
        "avg_results_per_search": avg_results,
        "zero_result_rate": round(zero_results / total * 100, 1) if total else 0.0,
        "top_queries": top_queries,
        "top_initial_picks": top_initial_picks,
        "source_usage": source_usage,
    }
