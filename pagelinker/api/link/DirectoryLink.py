"""Link to a sub-directory."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .LinkCollection import LinkCollection, LinkEntry


@dataclass(frozen=True)
class DirectoryLink:
    """A sub-directory listed in a link list.

    Owns the link list of the sub-directory, which is only walked once it
    is accessed itself. Reads are forwarded to that list, so templates can
    iterate ``entry`` or reach ``entry.some_page`` directly.
    """

    links: LinkCollection

    @property
    def name(self) -> str:
        return self.links.name

    @property
    def is_dir(self) -> bool:
        return True

    @property
    def is_self(self) -> bool:
        return False

    def sort_by(self, name: str, reverse: bool = False) -> LinkCollection:
        return self.links.sort_by(name, reverse)

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[tuple[str, LinkEntry]]:
        return iter(self.links)

    def __contains__(self, key: object) -> bool:
        return key in self.links

    def __getitem__(self, key: str) -> LinkEntry:
        return self.links[key]
