"""Tests for link ordering."""

from functools import cmp_to_key

import pytest

from pagelinker.api.link._compare_links import _compare_links
from pagelinker.api.link.DirectoryLink import DirectoryLink
from pagelinker.api.link.LinkCollection import LinkCollection
from pagelinker.api.link.PageLink import PageLink
from pagelinker.api.page.PaginationData import PaginationData


@pytest.fixture
def make_page_link(site, pages_dir, write_page):
    def _make(name: str, header: dict | None = None) -> PageLink:
        page = site.get_page(write_page(pages_dir / f"{name}.md", header or {}))
        return PageLink(uri=f"/{name}", name=name, is_self=False, page=PaginationData(page))

    return _make


@pytest.fixture
def make_dir_link(site, pages_dir, write_page):
    root = site.get_page(write_page(pages_dir / "index.md"))

    def _make(name: str) -> DirectoryLink:
        return DirectoryLink(LinkCollection(root, pages_dir / name))

    return _make


def test_directories_compare_by_name(make_dir_link):
    compare = _compare_links("order")
    assert compare(make_dir_link("alpha"), make_dir_link("beta")) < 0
    assert compare(make_dir_link("beta"), make_dir_link("alpha")) > 0
    assert compare(make_dir_link("alpha"), make_dir_link("alpha")) == 0

    reverse = _compare_links("order", reverse=True)
    assert reverse(make_dir_link("alpha"), make_dir_link("beta")) > 0


def test_directory_before_page(make_dir_link, make_page_link):
    directory = make_dir_link("sub")
    page = make_page_link("page", {"order": -100})

    assert _compare_links("order")(directory, page) < 0
    assert _compare_links("order")(page, directory) > 0
    assert _compare_links("order", reverse=True)(directory, page) > 0
    assert _compare_links("order", reverse=True)(page, directory) < 0


def test_missing_values(make_page_link):
    with_value = make_page_link("with", {"order": 1})
    without_value = make_page_link("without")
    also_without = make_page_link("also")

    assert _compare_links("order")(without_value, also_without) == 0
    assert _compare_links("order")(without_value, with_value) > 0
    assert _compare_links("order")(with_value, without_value) < 0
    assert _compare_links("order", reverse=True)(without_value, with_value) < 0


def test_present_values(make_page_link):
    low = make_page_link("low", {"order": 1})
    high = make_page_link("high", {"order": 5})
    same = make_page_link("same", {"order": 1})

    assert _compare_links("order")(low, high) < 0
    assert _compare_links("order")(high, low) > 0
    assert _compare_links("order")(low, same) == 0
    assert _compare_links("order", reverse=True)(low, high) > 0


def test_string_values(make_page_link):
    links = [
        make_page_link("c", {"title": "Cherry"}),
        make_page_link("a", {"title": "Apple"}),
        make_page_link("b", {"title": "Banana"}),
    ]
    ordered = sorted(links, key=cmp_to_key(_compare_links("title")))
    assert [link.name for link in ordered] == ["a", "b", "c"]


def test_incomparable_values_raise_type_error(make_page_link):
    number = make_page_link("number", {"order": 1})
    text = make_page_link("text", {"order": "one"})

    with pytest.raises(TypeError):
        _compare_links("order")(number, text)
