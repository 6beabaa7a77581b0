"""Page resolution error."""

from .LinkError import LinkError


class ResolutionError(LinkError):
    """Raised when a file in a linked directory cannot be turned into a page."""

    def __init__(self, path: str, page_uri: str, cause: BaseException):
        self.path = path
        self.page_uri = page_uri
        self.cause = cause
        super().__init__(f"Error while loading page '{path}' for linking from '{page_uri}': {cause}")
