"""
Recipe data and search.

Responsibilities:
- Load the bundled recipe records into an immutable, ordered store.
- Normalise malformed records (missing lists, out-of-range ratings).
- Filter the store by a case-insensitive substring query, sorted by name.
- Pick a random recipe for the landing page.
"""
