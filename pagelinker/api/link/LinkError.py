"""Base link list error."""


class LinkError(Exception):
    """Raised when a link list cannot be built or used."""
