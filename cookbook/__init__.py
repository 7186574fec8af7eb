"""
Cookbook web application.

Serves a page of recipe cards: one random recipe on load, and the
name-sorted matches for a text query on search.
"""
