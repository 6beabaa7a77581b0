"""Page load error."""


class PageLoadError(Exception):
    """Raised when a page file cannot be read or its header is invalid."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load page '{path}': {reason}")
