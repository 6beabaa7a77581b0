"""Output schemas for render commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RenderRenderOutput(BaseOutputSchema):
    """Output schema for render command."""

    page: str = Field(..., description="Path of the rendered page")
    uri: str = Field(..., description="Canonical URI of the page, empty on error")
    text: str = Field(..., description="Rendered text, empty on error")


register_output_schema("render", "render", RenderRenderOutput)
