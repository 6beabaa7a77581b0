"""Build a page URI from a page file's relative path."""

import re

_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+$")
_INDEX_RE = re.compile(r"(^|/)_index$")


def build_uri(relative_path: str) -> str:
    """Build the canonical URI of a page from its path under the pages directory.

    The file extension is dropped and an ``_index`` page stands for its directory:

        >>> build_uri("blog/first-post.md")
        'blog/first-post'
        >>> build_uri("blog/_index.html")
        'blog'
        >>> build_uri("_index.md")
        ''
    """
    uri = relative_path.replace("\\", "/").lstrip("/")
    uri = _EXTENSION_RE.sub("", uri)
    return _INDEX_RE.sub("", uri)
