"""Missing link key error."""

from .LinkError import LinkError


class LinkNotFound(LinkError, KeyError):
    """Raised when a key is not in a link list."""

    def __init__(self, key: str, base_dir: str):
        self.key = key
        self.base_dir = base_dir
        self.message = f"No link named '{key}' in '{base_dir}'"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
