"""Tests for PaginationData."""

import pytest

from pagelinker.api.config.SiteConfig import SiteConfig
from pagelinker.api.page.PaginationData import PaginationData
from pagelinker.api.site.Site import Site


def test_page_fields(site, pages_dir, write_page):
    page = site.get_page(write_page(pages_dir / "blog" / "post.md", {"title": "Post", "order": 2}))
    data = PaginationData(page)

    assert data.underlying_page() is page
    assert data.url == "/blog/post"
    assert data.slug == "blog/post"
    assert data.title == "Post"
    assert data.order == 2
    assert data["order"] == 2


def test_missing_values(site, pages_dir, write_page):
    data = PaginationData(site.get_page(write_page(pages_dir / "post.md", {})))

    with pytest.raises(AttributeError):
        data.order
    with pytest.raises(KeyError):
        data["order"]
    with pytest.raises(AttributeError):
        data._private


def test_url_follows_site_config(pages_dir, write_page):
    site = Site(SiteConfig(pages_dir=str(pages_dir), root="/docs", pretty_urls=False))
    data = PaginationData(site.get_page(write_page(pages_dir / "post.md")))

    assert data.url == "/docs/post.html"
