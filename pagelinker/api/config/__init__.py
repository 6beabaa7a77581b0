"""Config API module."""

from .LogConfig import LogConfig
from .PageLinkerConfig import PageLinkerConfig
from .SiteConfig import SiteConfig

__all__ = ["LogConfig", "PageLinkerConfig", "SiteConfig"]
