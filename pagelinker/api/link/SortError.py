"""Link sorting error."""

from .LinkError import LinkError


class SortError(LinkError):
    """Raised when links cannot be ordered by the requested page field."""

    def __init__(self, sort_key: str, page_uri: str, cause: BaseException):
        self.sort_key = sort_key
        self.page_uri = page_uri
        self.cause = cause
        super().__init__(
            f"Error while sorting the links from page '{page_uri}' with the specified setting: {sort_key}: {cause}"
        )
