"""Page model: page files, the page repository, and template wrappers."""

from .Page import Page
from .PageLoadError import PageLoadError
from .PageRepository import PageRepository
from .PaginationData import PaginationData

__all__ = ["Page", "PageLoadError", "PageRepository", "PaginationData"]
