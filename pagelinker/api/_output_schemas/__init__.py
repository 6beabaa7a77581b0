"""Output schemas for API commands.

Importing this package registers every command schema.
"""

from . import config, link, render
from ._registry import get_output_schema, register_output_schema

__all__ = ["config", "get_output_schema", "link", "register_output_schema", "render"]
