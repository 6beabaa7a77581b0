"""Unit tests for config cmd_show and cmd_version."""

import pytest

from pagelinker.api.config.cmd_show import cmd_show
from pagelinker.api.config.cmd_version import cmd_version

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_list_sections(self, run_cmd, pagelinker_home):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"] == {"sections": ["site", "log"]}
        assert result.output["config_path"] == str(pagelinker_home.resolve() / "config.json")

    def test_section(self, run_cmd, pagelinker_home, pages_dir):
        result = run_cmd(cmd_show, "site")
        assert result.success
        assert result.output["section"] == "site"
        assert result.output["content"]["pages_dir"] == str(pages_dir)

    def test_unknown_section(self, run_cmd, pagelinker_home):
        result = run_cmd(cmd_show, "theme")
        assert not result.success
        assert "Unknown section" in result.output["errors"][0]

    def test_invalid_config_file(self, run_cmd, tmp_path, monkeypatch):
        monkeypatch.setenv("PAGELINKER_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")

        result = run_cmd(cmd_show, "site")
        assert result.success is False
        assert result.output["section"] == "site"
        assert result.output["errors"]


def test_cmd_version(run_cmd):
    result = run_cmd(cmd_version)
    assert result.success
    assert isinstance(result.output["version"], str)
    assert result.output["version"]
