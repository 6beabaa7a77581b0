"""Build state of a link list cache (private)."""

from enum import Enum


class _CacheState(Enum):
    UNCOMPUTED = "uncomputed"
    BUILDING = "building"
    COMPUTED = "computed"
    FAILED = "failed"
