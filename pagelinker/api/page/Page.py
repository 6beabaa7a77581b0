"""Page handle."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..config.normalize_path import normalize_path
from ._parse_front_matter import _parse_front_matter
from .PageLoadError import PageLoadError

if TYPE_CHECKING:
    from ..site.Site import Site


class Page:
    """A page file of the site, identified by its URI and path.

    The file is read lazily, once, the first time its configuration
    or content is needed.
    """

    def __init__(self, site: Site, uri: str, path: str | Path):
        self.site = site
        self.uri = uri
        self.path = normalize_path(path)
        self._config: dict[str, Any] | None = None
        self._content: str | None = None

    def __repr__(self) -> str:
        return f"Page(uri={self.uri!r}, path='{self.path}')"

    def _ensure_loaded(self) -> None:
        if self._config is not None:
            return
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PageLoadError(str(self.path), str(exc)) from exc
        try:
            config, content = _parse_front_matter(text)
        except (yaml.YAMLError, ValueError) as exc:
            raise PageLoadError(str(self.path), f"invalid header: {exc}") from exc
        self._content = content
        self._config = config

    @property
    def config(self) -> dict[str, Any]:
        """Values from the page header."""
        self._ensure_loaded()
        assert self._config is not None
        return self._config

    @property
    def content(self) -> str:
        """Page text after the header."""
        self._ensure_loaded()
        assert self._content is not None
        return self._content

    @property
    def title(self) -> str:
        title = self.config_value("title")
        return str(title) if title is not None else self.path.stem

    def config_value(self, name: str) -> Any | None:
        """Return a header value, or None when the page does not set it."""
        return self.config.get(name)
