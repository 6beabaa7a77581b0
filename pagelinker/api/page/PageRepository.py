"""Page repository."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ...utils.logger import get_logger
from ..config.normalize_path import normalize_path
from .Page import Page

if TYPE_CHECKING:
    from ..site.Site import Site

logger = get_logger("page")


class PageRepository:
    """Caches page objects so each page file is built once per site."""

    def __init__(self, site: Site):
        self.site = site
        self._pages: dict[tuple[str, Path], Page] = {}

    def __len__(self) -> int:
        return len(self._pages)

    def get_or_create_page(self, uri: str, path: str | Path) -> Page:
        """Return the page for (uri, path), creating it on first request.

        Args:
            uri: Canonical page URI
            path: Path of the page file

        Returns:
            The same Page object for every call with the same pair
        """
        key = (uri, normalize_path(path))
        page = self._pages.get(key)
        if page is None:
            logger.debug("Creating page %r for %s", uri, key[1])
            page = Page(self.site, uri, key[1])
            self._pages[key] = page
        return page

    def add_page(self, page: Page) -> None:
        """Register an existing page object (e.g. the page being rendered)."""
        self._pages[(page.uri, page.path)] = page

    def clear(self) -> None:
        self._pages.clear()
