"""Unit tests for CLIDisplay output formats."""

import json

import yaml

from pagelinker.cli.display.CLIDisplay import CLIDisplay


def test_yaml_output_keeps_key_order(capsys):
    CLIDisplay().json_output({"page": "index.md", "count": 2, "entries": []}, format="yaml")
    out = capsys.readouterr().out

    assert yaml.safe_load(out) == {"page": "index.md", "count": 2, "entries": []}
    assert out.index("page") < out.index("count")


def test_json_output(capsys):
    CLIDisplay().json_output({"page": "index.md", "title": "Café"}, format="json")
    out = capsys.readouterr().out

    assert json.loads(out) == {"page": "index.md", "title": "Café"}
    assert "Café" in out


def test_messages_go_to_stderr(capsys):
    display = CLIDisplay()
    display.status("Listing links")
    display.success("Found 2 link(s)")
    display.error("Link list failed", details="cannot list")
    captured = capsys.readouterr()

    assert captured.out == ""
    assert "Listing links" in captured.err
    assert "Found 2 link(s)" in captured.err
    assert "cannot list" in captured.err
