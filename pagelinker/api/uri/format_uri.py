"""Format a page URI for presentation in templates."""

from ..config.SiteConfig import SiteConfig


def format_uri(site_config: SiteConfig, uri: str) -> str:
    """Turn a canonical page URI into the URL templates link to.

    Args:
        site_config: Site configuration (root prefix and URL style)
        uri: Canonical page URI as returned by build_uri

    Returns:
        URL starting with the site root
    """
    if not uri:
        return site_config.root
    if site_config.pretty_urls:
        formatted = f"{site_config.root}{uri}"
        if site_config.trailing_slash:
            formatted += "/"
        return formatted
    return f"{site_config.root}{uri}.html"
