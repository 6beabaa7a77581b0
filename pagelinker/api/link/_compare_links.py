"""Link ordering by a page header field (private)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .DirectoryLink import DirectoryLink

if TYPE_CHECKING:
    from .LinkCollection import LinkEntry


def _compare_values(value1: Any, value2: Any) -> int:
    if value1 == value2:
        return 0
    return -1 if value1 < value2 else 1


def _compare_links(sort_key: str, reverse: bool = False) -> Callable[[LinkEntry, LinkEntry], int]:
    """Build a cmp-style function ordering links by the page field sort_key.

    Directories come before pages and are ordered by name. Pages are ordered
    by the value of sort_key in their header; pages without it come last.
    reverse flips every one of these rules.

    The returned function raises TypeError when two pages hold values that
    cannot be ordered against each other.
    """
    sign = -1 if reverse else 1

    def compare(link1: LinkEntry, link2: LinkEntry) -> int:
        link1_is_dir = isinstance(link1, DirectoryLink)
        link2_is_dir = isinstance(link2, DirectoryLink)

        if link1_is_dir and link2_is_dir:
            return sign * _compare_values(link1.name, link2.name)
        if link1_is_dir:
            return -sign
        if link2_is_dir:
            return sign

        value1 = link1.page.underlying_page().config_value(sort_key)
        value2 = link2.page.underlying_page().config_value(sort_key)

        if value1 is None and value2 is None:
            return 0
        if value1 is None:
            return sign
        if value2 is None:
            return -sign
        return sign * _compare_values(value1, value2)

    return compare
