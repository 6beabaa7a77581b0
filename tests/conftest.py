"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest
import yaml

from pagelinker.api.config.SiteConfig import SiteConfig
from pagelinker.api.site.Site import Site


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    for name in ("link", "render", "config", "cli"):
        config.addinivalue_line("markers", f"{name}: tests of the {name} commands")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Site Helpers
# =============================================================================


def write_page(path: Path, header: dict | None = None, content: str = "") -> Path:
    """Write a page file, with a YAML header when header is given."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = content
    if header is not None:
        text = f"---\n{yaml.safe_dump(header, sort_keys=False)}---\n{content}"
    path.write_text(text, encoding="utf-8")
    return path


def minimal_config_dict(pages_dir: Path) -> dict:
    """Minimal valid pagelinker configuration dict for testing."""
    return {
        "site": {
            "pages_dir": str(pages_dir),
            "root": "/",
            "pretty_urls": True,
            "trailing_slash": False,
            "skip_names": [],
        },
        "log": {
            "level": "DEBUG",
        },
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Empty pages directory of a test site."""
    path = tmp_path / "pages"
    path.mkdir()
    return path


@pytest.fixture
def site_config(pages_dir: Path) -> SiteConfig:
    return SiteConfig(pages_dir=str(pages_dir))


@pytest.fixture
def site(site_config: SiteConfig) -> Site:
    return Site(site_config)


@pytest.fixture
def pagelinker_home(tmp_path: Path, monkeypatch, pages_dir: Path) -> Path:
    """Set up PAGELINKER_HOME with a minimal config file.

    Returns:
        Path to the pagelinker home directory
    """
    home = tmp_path / ".pagelinker"
    home.mkdir()
    monkeypatch.setenv("PAGELINKER_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(pages_dir)), encoding="utf-8")
    return home


@pytest.fixture(name="write_page")
def write_page_fixture():
    """Pytest fixture returning the write_page helper."""
    return write_page


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    """Pytest fixture returning the run_cmd helper."""
    return run_cmd
