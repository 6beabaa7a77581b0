"""Render API module."""

from .get_page_data import get_page_data
from .render_page import render_page

__all__ = ["get_page_data", "render_page"]
