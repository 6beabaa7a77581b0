"""Render a page's content."""

from ...utils.logger import get_logger
from ..page.Page import Page
from ._create_environment import _create_environment
from .get_page_data import get_page_data

logger = get_logger("render")


def render_page(page: Page) -> str:
    """Render the content of a page as a Jinja2 template.

    The page is registered with its site's repository first, so link lists
    built during the render hand out this same page object for its file.

    Args:
        page: Page to render

    Returns:
        Rendered text

    Raises:
        LinkError: If a link list used by the template cannot be built
        jinja2.TemplateError: If the content is not a valid template
    """
    page.site.page_repository.add_page(page)
    logger.debug("Rendering page %r", page.uri)
    template = _create_environment().from_string(page.content)
    return template.render(**get_page_data(page))
