"""
Search analytics.

Responsibilities:
- Keep an in-memory log of landing-page picks and recipe searches.
- Summarise the log into query, result-count and timing statistics.
"""
