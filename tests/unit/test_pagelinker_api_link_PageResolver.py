"""Tests for PageResolver."""

import pytest

from pagelinker.api.link.PageResolver import PageResolver
from pagelinker.api.page.Page import Page


def test_root_page_is_returned_for_its_own_file(site, pages_dir, write_page):
    path = write_page(pages_dir / "blog" / "_index.md")
    root = Page(site, "blog", path)

    resolver = PageResolver(root)
    assert resolver.resolve(path) is root
    assert resolver.resolve(str(path)) is root
    assert len(site.page_repository) == 0


def test_other_pages_come_from_repository(site, pages_dir, write_page):
    root = site.get_page(write_page(pages_dir / "index.md"))
    other_path = write_page(pages_dir / "blog" / "post.md")

    resolver = PageResolver(root)
    other = resolver.resolve(other_path)
    assert other.uri == "blog/post"
    assert other.path == other_path
    assert resolver.resolve(other_path) is other
    assert other is site.page_repository.get_or_create_page("blog/post", other_path)


def test_path_outside_pages_dir(site, pages_dir, tmp_path, write_page):
    root = site.get_page(write_page(pages_dir / "index.md"))
    with pytest.raises(ValueError, match="is not under"):
        PageResolver(root).resolve(tmp_path / "outside.md")
