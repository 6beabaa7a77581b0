"""Jinja2 environment for page templates (private)."""

from jinja2 import BaseLoader, Environment


def _create_environment() -> Environment:
    """Create the environment page content is rendered with.

    Undefined values render as empty strings, so a template can probe
    ``link.some_page`` for a page that may not exist.
    """
    return Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, autoescape=False)
