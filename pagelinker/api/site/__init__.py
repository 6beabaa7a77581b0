"""Site API module."""

from .Site import Site

__all__ = ["Site"]
