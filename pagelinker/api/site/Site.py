"""Site public API."""

from pathlib import Path

from ..config.normalize_path import normalize_path
from ..config.SiteConfig import SiteConfig
from ..page.Page import Page
from ..page.PageRepository import PageRepository
from ..uri.build_uri import build_uri
from ..uri.relative_path import relative_path


class Site:
    """A content tree of page files plus the configuration used to link them.

    Owns the page repository, so pages requested through the same site are
    shared between link lists and renders.
    """

    def __init__(self, config: SiteConfig):
        self.config = config
        self.pages_dir = normalize_path(config.pages_dir)
        self.page_repository = PageRepository(self)

    def __repr__(self) -> str:
        return f"Site(pages_dir='{self.pages_dir}')"

    def get_page(self, path: str | Path) -> Page:
        """Return the page object for a file under the pages directory.

        Raises:
            ValueError: If path is not under the pages directory
        """
        full_path = normalize_path(path)
        uri = build_uri(relative_path(self.pages_dir, full_path))
        return self.page_repository.get_or_create_page(uri, full_path)
