"""Link API module: lists of the pages near a page."""

from .directory_link_key import directory_link_key
from .DirectoryLink import DirectoryLink
from .file_link_key import file_link_key
from .LinkCollection import LinkCollection, LinkEntry
from .LinkError import LinkError
from .LinkNotFound import LinkNotFound
from .PageLink import PageLink
from .PageResolver import PageResolver
from .ReadOnlyViolation import ReadOnlyViolation
from .ResolutionError import ResolutionError
from .SortError import SortError

__all__ = [
    "DirectoryLink",
    "LinkCollection",
    "LinkEntry",
    "LinkError",
    "LinkNotFound",
    "PageLink",
    "PageResolver",
    "ReadOnlyViolation",
    "ResolutionError",
    "SortError",
    "directory_link_key",
    "file_link_key",
]
