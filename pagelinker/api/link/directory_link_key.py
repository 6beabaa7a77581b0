"""Link key of a sub-directory."""

from ._constants import DIRECTORY_KEY_SUFFIX


def directory_link_key(dirname: str) -> str:
    """Derive the key a sub-directory is listed under.

    The trailing underscore keeps ``blog/`` apart from a ``blog.md`` page,
    which is listed as ``blog``.
    """
    return f"{dirname}{DIRECTORY_KEY_SUFFIX}"
