"""Template wrapper around a page."""

from __future__ import annotations

from typing import Any

from ..uri.format_uri import format_uri
from .Page import Page


class PaginationData:
    """Exposes a page to templates.

    Header values are reachable as items or attributes (``page.order``,
    ``page["order"]``); the wrapped page is available through
    underlying_page().
    """

    def __init__(self, page: Page):
        self._page = page

    def __repr__(self) -> str:
        return f"PaginationData({self._page!r})"

    def underlying_page(self) -> Page:
        return self._page

    @property
    def url(self) -> str:
        return format_uri(self._page.site.config, self._page.uri)

    @property
    def slug(self) -> str:
        return self._page.uri

    @property
    def title(self) -> str:
        return self._page.title

    def __getitem__(self, name: str) -> Any:
        value = self._page.config_value(name)
        if value is None:
            raise KeyError(name)
        return value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        value = self._page.config_value(name)
        if value is None:
            raise AttributeError(name)
        return value
