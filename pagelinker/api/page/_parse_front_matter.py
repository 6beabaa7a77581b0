"""Split a page file into its YAML header and its content (private)."""

import re
from typing import Any

import yaml

_HEADER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def _parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Parse the optional ``---`` delimited YAML header of a page.

    Returns:
        Tuple of (config dict, remaining content). Pages without a header
        get an empty config and their full text as content.

    Raises:
        yaml.YAMLError: If the header is not valid YAML
        ValueError: If the header is valid YAML but not a mapping
    """
    match = _HEADER_RE.match(text)
    if not match:
        return {}, text

    config = yaml.safe_load(match.group(1))
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"page header must be a mapping, got {type(config).__name__}")
    return config, text[match.end() :]
