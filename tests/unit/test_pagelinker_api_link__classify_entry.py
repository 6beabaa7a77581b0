"""Tests for directory entry classification."""

import os

from pagelinker.api.link._classify_entry import _classify_entry
from pagelinker.api.link._ClassifiedEntry import _EntryKind


def _scan(path) -> dict[str, _EntryKind]:
    with os.scandir(path) as it:
        return {entry.name: _classify_entry(entry).kind for entry in it}


def test_classification(tmp_path):
    (tmp_path / "page.md").write_text("x", encoding="utf-8")
    (tmp_path / "no_extension").write_text("x", encoding="utf-8")
    (tmp_path / "Thumbs.db").write_text("x", encoding="utf-8")
    (tmp_path / ".hidden").write_text("x", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "dir.with.dots").mkdir()
    (tmp_path / ".git").mkdir()

    assert _scan(tmp_path) == {
        "page.md": _EntryKind.CANDIDATE,
        "no_extension": _EntryKind.CANDIDATE,
        "Thumbs.db": _EntryKind.SKIP,
        ".hidden": _EntryKind.SKIP,
        "sub": _EntryKind.DIRECTORY,
        "dir.with.dots": _EntryKind.DIRECTORY,
        ".git": _EntryKind.SKIP,
    }


def test_custom_skip_names(tmp_path):
    (tmp_path / "draft.md").write_text("x", encoding="utf-8")

    with os.scandir(tmp_path) as it:
        entry = next(it)
    classified = _classify_entry(entry, {"draft.md"})
    assert classified.kind is _EntryKind.SKIP
    assert classified.name == "draft.md"
    assert classified.path == str(tmp_path / "draft.md")
