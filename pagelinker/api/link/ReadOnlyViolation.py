"""Read-only link list error."""

from .LinkError import LinkError


class ReadOnlyViolation(LinkError, TypeError):
    """Raised on any attempt to modify a link list."""

    def __init__(self, message: str = "Link list is read-only."):
        super().__init__(message)
