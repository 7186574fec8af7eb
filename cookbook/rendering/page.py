"""
In-process page document.

A ``PageDocument`` stands in for the browser DOM: it owns the elements the
page controller reads from and renders into, dispatches lifecycle and form
events to registered listeners, and serialises itself back to HTML.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from string import Template
from typing import Any, Callable

from ..config import DEFAULT_CONFIG, CookbookConfig

Listener = Callable[["Event"], Any]


class ElementNotFoundError(LookupError):
    """No element with the requested id exists on the page."""


@dataclass
class Event:
    type: str
    target: Any = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class EventTarget:
    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def dispatch_event(self, event: Event) -> bool:
        """Run listeners in registration order; False if the default was prevented."""
        if event.target is None:
            event.target = self
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)
        return not event.default_prevented


class Element(EventTarget):
    def __init__(self, element_id: str, inner_html: str = "", value: str = "") -> None:
        super().__init__()
        self.id = element_id
        self.inner_html = inner_html
        self.value = value

    def __repr__(self) -> str:
        return f"Element(id={self.id!r})"

    def set_inner_html(self, markup: str) -> None:
        self.inner_html = markup


class PageDocument(EventTarget):
    def __init__(self, template: str, config: CookbookConfig = DEFAULT_CONFIG) -> None:
        super().__init__()
        self._template = Template(template)
        self._config = config
        self._elements = {
            element_id: Element(element_id)
            for element_id in (
                config.container_id,
                config.search_input_id,
                config.search_form_id,
            )
        }

    def get_element_by_id(self, element_id: str) -> Element:
        try:
            return self._elements[element_id]
        except KeyError:
            raise ElementNotFoundError(f"No element with id '{element_id}'") from None

    def to_html(self) -> str:
        container = self.get_element_by_id(self._config.container_id)
        search_input = self.get_element_by_id(self._config.search_input_id)
        return self._template.substitute(
            recipes_html=container.inner_html,
            search_value=html.escape(search_input.value, quote=True),
        )
