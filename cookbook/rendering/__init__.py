"""
HTML rendering.

Responsibilities:
- Turn recipes into escaped card markup (tags, star rating, description).
- Model the page as a document of elements that can be rendered into and
  that dispatch load and submit events.
"""
