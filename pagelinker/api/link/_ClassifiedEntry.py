"""Classification of one directory entry (private)."""

from dataclasses import dataclass
from enum import Enum


class _EntryKind(Enum):
    SKIP = "skip"
    DIRECTORY = "directory"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class _ClassifiedEntry:
    """What a directory entry contributes to a link list."""

    kind: _EntryKind
    name: str
    path: str
