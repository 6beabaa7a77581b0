"""Link list of the pages near a page."""

from __future__ import annotations

import os
from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from functools import cmp_to_key
from pathlib import Path
from typing import TYPE_CHECKING, Union

from ...utils.logger import get_logger
from ..config.normalize_path import normalize_path
from ..page.PageLoadError import PageLoadError
from ..page.PaginationData import PaginationData
from ..uri.format_uri import format_uri
from ._CacheState import _CacheState
from ._ClassifiedEntry import _EntryKind
from ._classify_entry import _classify_entry
from ._compare_links import _compare_links
from ._constants import SKIP_NAMES
from .directory_link_key import directory_link_key
from .DirectoryLink import DirectoryLink
from .file_link_key import file_link_key
from .LinkError import LinkError
from .LinkNotFound import LinkNotFound
from .PageLink import PageLink
from .PageResolver import PageResolver
from .ReadOnlyViolation import ReadOnlyViolation
from .ResolutionError import ResolutionError
from .SortError import SortError

if TYPE_CHECKING:
    from ..page.Page import Page

LinkEntry = Union[DirectoryLink, PageLink]

logger = get_logger("link")


class LinkCollection:
    """Read-only list of the pages and sub-directories in one directory.

    Exposed to templates as ``link``. Nothing touches the filesystem until
    the list is first read (length, membership, lookup or iteration); the
    entries are then built once and kept for the lifetime of the object.

    Iterating yields ``(key, entry)`` pairs. Pages are keyed by file name
    without extension (``about.md`` -> ``about``), sub-directories by their
    name plus an underscore (``blog/`` -> ``blog_``).

    Usage in a template:
        {% for key, entry in link.sort_by("order") %}
            <a href="{{ entry.uri }}">{{ entry.page.title }}</a>
        {% endfor %}
    """

    def __init__(self, page: Page, directory: str | Path | None = None):
        """Initialize the link list.

        Args:
            page: Page the list is built for; also the page nested lists link from
            directory: Directory to list; defaults to the directory of page
        """
        self._page = page
        self._site = page.site
        base_dir = normalize_path(directory) if directory is not None else page.path.parent
        self.base_dir = str(base_dir).rstrip("/\\") + os.sep

        self._sort_key: str | None = None
        self._sort_reverse = False

        self._state = _CacheState.UNCOMPUTED
        self._links: dict[str, LinkEntry] = {}
        self._error: LinkError | None = None

    def __repr__(self) -> str:
        return f"LinkCollection(base_dir='{self.base_dir}', state={self._state.value})"

    # Template data members

    @property
    def name(self) -> str:
        """Name of the listed directory, empty for the site's pages directory."""
        if normalize_path(self.base_dir) == self._site.pages_dir:
            return ""
        return Path(self.base_dir).name

    @property
    def is_dir(self) -> bool:
        return True

    @property
    def is_self(self) -> bool:
        return False

    @property
    def is_built(self) -> bool:
        return self._state is _CacheState.COMPUTED

    def sort_by(self, name: str, reverse: bool = False) -> LinkCollection:
        """Order the list by a page header field.

        Only takes effect when called before the list is first read; the
        list is never rebuilt afterwards.

        Args:
            name: Header field to order pages by
            reverse: Reverse the order (directories then come last)

        Returns:
            This link list, for chaining
        """
        if self._state is not _CacheState.UNCOMPUTED:
            logger.debug("Ignoring sort_by(%r) on %s: links already built", name, self.base_dir)
            return self
        self._sort_key = name
        self._sort_reverse = reverse
        return self

    # Read access

    def __len__(self) -> int:
        return len(self._ensure_links())

    def __contains__(self, key: object) -> bool:
        return key in self._ensure_links()

    def __getitem__(self, key: str) -> LinkEntry:
        links = self._ensure_links()
        try:
            return links[key]
        except KeyError:
            raise LinkNotFound(key, self.base_dir) from None

    def __iter__(self) -> Iterator[tuple[str, LinkEntry]]:
        return iter(self._ensure_links().items())

    def keys(self) -> KeysView[str]:
        return self._ensure_links().keys()

    def values(self) -> ValuesView[LinkEntry]:
        return self._ensure_links().values()

    def items(self) -> ItemsView[str, LinkEntry]:
        return self._ensure_links().items()

    def __setitem__(self, key: str, value: object) -> None:
        raise ReadOnlyViolation()

    def __delitem__(self, key: str) -> None:
        raise ReadOnlyViolation()

    # Cache

    def _ensure_links(self) -> dict[str, LinkEntry]:
        if self._state is _CacheState.COMPUTED:
            return self._links
        if self._state is _CacheState.FAILED:
            assert self._error is not None
            raise self._error
        if self._state is _CacheState.BUILDING:
            raise LinkError(
                f"Links from page '{self._page.uri}' in '{self.base_dir}' were read while they were being built"
            )

        self._state = _CacheState.BUILDING
        try:
            links = self._build_links()
        except LinkError as exc:
            self._state = _CacheState.FAILED
            self._error = exc
            raise
        except BaseException:
            self._state = _CacheState.UNCOMPUTED
            raise

        self._links = links
        self._state = _CacheState.COMPUTED
        return links

    def _build_links(self) -> dict[str, LinkEntry]:
        """Walk the directory one level deep and build the entries."""
        logger.debug("Building links for page %r in %s", self._page.uri, self.base_dir)
        resolver = PageResolver(self._page)
        skip_names = SKIP_NAMES | frozenset(self._site.config.skip_names)

        try:
            with os.scandir(self.base_dir) as it:
                entries = list(it)
        except OSError as exc:
            raise LinkError(
                f"Error while building the links from page '{self._page.uri}': "
                f"cannot list '{self.base_dir}': {exc}"
            ) from exc

        links: dict[str, LinkEntry] = {}
        for entry in entries:
            classified = _classify_entry(entry, skip_names)
            if classified.kind is _EntryKind.SKIP:
                continue

            if classified.kind is _EntryKind.DIRECTORY:
                key = directory_link_key(classified.name)
                link: LinkEntry = DirectoryLink(LinkCollection(self._page, classified.path))
            else:
                try:
                    page = resolver.resolve(classified.path)
                except Exception as exc:
                    raise ResolutionError(classified.path, self._page.uri, exc) from exc
                key = file_link_key(classified.name)
                link = PageLink(
                    uri=format_uri(self._site.config, page.uri),
                    name=key,
                    is_self=page is self._page,
                    page=PaginationData(page),
                )

            if key in links:
                logger.warning("Duplicate link key %r in %s, keeping '%s'", key, self.base_dir, classified.path)
            links[key] = link

        if self._sort_key:
            links = self._sort_links(links, self._sort_key)

        logger.debug("Built %d link(s) for %s", len(links), self.base_dir)
        return links

    def _sort_links(self, links: dict[str, LinkEntry], sort_key: str) -> dict[str, LinkEntry]:
        compare = _compare_links(sort_key, self._sort_reverse)
        try:
            ordered = sorted(links.items(), key=cmp_to_key(lambda a, b: compare(a[1], b[1])))
        except PageLoadError as exc:
            raise ResolutionError(exc.path, self._page.uri, exc) from exc
        except (TypeError, ValueError) as exc:
            raise SortError(sort_key, self._page.uri, exc) from exc
        return dict(ordered)
