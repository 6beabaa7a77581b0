"""Template variables of a page."""

from typing import Any

from ..link.LinkCollection import LinkCollection
from ..page.Page import Page
from ..page.PaginationData import PaginationData


def get_page_data(page: Page) -> dict[str, Any]:
    """Build the variables a page's template is rendered with.

    Args:
        page: Page being rendered

    Returns:
        Dict with ``page`` (the page wrapper), ``site`` (site settings) and
        ``link`` (a new link list of the page's directory, built on first use)
    """
    return {
        "page": PaginationData(page),
        "site": page.site.config.model_dump(),
        "link": LinkCollection(page),
    }
