"""Link to a page file."""

from dataclasses import dataclass, field

from ..page.PaginationData import PaginationData


@dataclass(frozen=True)
class PageLink:
    """A page listed in a link list.

    Attributes:
        uri: Formatted URL of the page
        name: Link key of the page file
        is_self: True when this is the page the list is built for
        page: Template wrapper around the page
    """

    uri: str
    name: str
    is_self: bool
    page: PaginationData = field(compare=False)
    is_dir: bool = field(default=False, init=False)
