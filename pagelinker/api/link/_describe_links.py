"""Plain-data description of a link list (private)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .DirectoryLink import DirectoryLink

if TYPE_CHECKING:
    from .LinkCollection import LinkCollection


def _describe_links(
    links: LinkCollection | DirectoryLink,
    depth: int = 0,
    sort_by: str = "",
    reverse: bool = False,
) -> list[dict[str, Any]]:
    """Describe each entry of a link list as a dict.

    Sub-directories are only walked while depth is positive; deeper
    directories are listed without their entries.
    """
    entries: list[dict[str, Any]] = []
    for key, link in links:
        if isinstance(link, DirectoryLink):
            entry: dict[str, Any] = {
                "key": key,
                "name": link.name,
                "uri": "",
                "is_dir": True,
                "is_self": False,
            }
            if depth > 0:
                if sort_by:
                    link.sort_by(sort_by, reverse)
                entry["entries"] = _describe_links(link, depth - 1, sort_by, reverse)
        else:
            entry = {
                "key": key,
                "name": link.name,
                "uri": link.uri,
                "is_dir": False,
                "is_self": link.is_self,
                "title": link.page.title,
            }
        entries.append(entry)
    return entries
