"""Site configuration."""

from __future__ import annotations

__all__ = ["SiteConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SiteConfig(BaseModel):
    """Site configuration model.

    Describes where page files live and how page URIs are formatted
    for templates.
    """

    model_config = ConfigDict(extra="forbid")

    pages_dir: str = Field(..., description="Path to the directory holding page files")
    root: str = Field("/", description="URL prefix every formatted page URI starts with")
    pretty_urls: bool = Field(True, description="Format URIs without the .html suffix")
    trailing_slash: bool = Field(False, description="Append '/' to pretty URIs")
    skip_names: list[str] = Field(default_factory=list, description="Extra file names left out of link lists")

    @field_validator("pages_dir")
    @classmethod
    def _normalize_pages_dir(cls, v: str) -> str:
        from .normalize_path import normalize_path

        return str(normalize_path(v))

    @field_validator("root")
    @classmethod
    def _normalize_root(cls, v: str) -> str:
        return v.rstrip("/") + "/"
