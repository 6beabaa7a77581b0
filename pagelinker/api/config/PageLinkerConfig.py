"""Top-level pagelinker configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .LogConfig import LogConfig
from .SiteConfig import SiteConfig


class PageLinkerConfig(BaseModel):
    """Top-level configuration for pagelinker."""

    model_config = ConfigDict(extra="forbid")

    site: SiteConfig
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get pagelinker home directory based on PAGELINKER_HOME or default to ~/.pagelinker."""
        home_env = os.environ.get("PAGELINKER_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".pagelinker"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the pagelinker home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "PageLinkerConfig":
        """Load and validate config from file.

        Args:
            path: Config file to read; defaults to get_config_path()

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if path is None:
            path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary for display."""
        return {
            "site": self.site.model_dump(),
            "log": self.log.model_dump(),
        }
