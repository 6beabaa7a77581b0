"""Page resolver for link lists."""

from __future__ import annotations

from pathlib import Path

from ..config.normalize_path import normalize_path
from ..page.Page import Page
from ..uri.build_uri import build_uri
from ..uri.relative_path import relative_path


class PageResolver:
    """Turns page files into page objects on behalf of a link list.

    The page being rendered is handed back as-is when its own file is
    resolved. Asking the repository for it instead could hand out a fresh
    object and reset the page number of a page that is halfway through
    rendering one of its sub-pages.
    """

    def __init__(self, root_page: Page):
        """Initialize the resolver.

        Args:
            root_page: Page the link list is built for
        """
        self.root_page = root_page
        self.site = root_page.site

    def resolve(self, path: str | Path) -> Page:
        """Return the page object for a page file.

        Args:
            path: Path of a file under the site's pages directory

        Returns:
            The root page itself when path is its file, else the repository page

        Raises:
            ValueError: If path is not under the pages directory
        """
        full_path = normalize_path(path)
        if full_path == self.root_page.path:
            return self.root_page

        uri = build_uri(relative_path(self.site.pages_dir, full_path))
        return self.site.page_repository.get_or_create_page(uri, full_path)
