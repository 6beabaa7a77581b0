"""Path and URI helpers for page files."""

from .build_uri import build_uri
from .format_uri import format_uri
from .relative_path import relative_path

__all__ = ["build_uri", "format_uri", "relative_path"]
