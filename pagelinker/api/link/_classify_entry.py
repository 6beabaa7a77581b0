"""Directory entry classifier (private)."""

import os
from collections.abc import Collection

from ._ClassifiedEntry import _ClassifiedEntry, _EntryKind
from ._constants import SKIP_NAMES


def _classify_entry(entry: os.DirEntry, skip_names: Collection[str] = SKIP_NAMES) -> _ClassifiedEntry:
    """Decide whether a directory entry is skipped, a sub-directory, or a page candidate.

    Dot-files and names in skip_names are skipped. Directories are never
    checked for an extension. No recursion happens here.
    """
    name = entry.name
    if not name or name.startswith(".") or name in skip_names:
        return _ClassifiedEntry(_EntryKind.SKIP, name, entry.path)
    if entry.is_dir():
        return _ClassifiedEntry(_EntryKind.DIRECTORY, name, entry.path)
    return _ClassifiedEntry(_EntryKind.CANDIDATE, name, entry.path)
