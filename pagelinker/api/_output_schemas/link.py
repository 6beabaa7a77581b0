"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkListOutput(BaseOutputSchema):
    """Output schema for link list command.

    Each entry holds key, name, uri, is_dir and is_self; directory entries
    also hold their own entries when listed deep enough.
    """

    page: str = Field(..., description="Path of the page the links are listed for")
    base_dir: str = Field(..., description="Directory the links were listed from, empty on error")
    sort_by: str = Field(..., description="Page field used for ordering, empty string if unsorted")
    reverse: bool = Field(..., description="Whether the order was reversed")
    entries: list[dict[str, Any]] = Field(..., description="Listed links in order")
    count: int = Field(..., description="Number of top-level links")


register_output_schema("link", "list", LinkListOutput)
