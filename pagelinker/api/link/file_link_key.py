"""Link key of a page file."""

import re

_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+$")


def file_link_key(filename: str) -> str:
    """Derive the key a page file is listed under.

    One trailing extension is stripped, then every remaining dot becomes
    an underscore so the key works as a template attribute:

        >>> file_link_key("about.md")
        'about'
        >>> file_link_key("release.2.0.html")
        'release_2_0'
    """
    return _EXTENSION_RE.sub("", filename).replace(".", "_")
