"""Unit tests for htmllinks.links.cmd_scan and cmd_resolve."""

import json

from htmllinks.links.cmd_resolve import cmd_resolve
from htmllinks.links.cmd_scan import cmd_scan


def test_cmd_scan_resolves_against_file_uri(tmp_path, run_cmd):
    page = tmp_path / "site" / "index.html"
    page.parent.mkdir()
    page.write_text('<a href="about.html">About</a>\n<a href="javascript:void(0)">x</a><img src="%">')

    result = run_cmd(cmd_scan, str(page))

    assert result.success
    assert result.output["base_uri"] == page.resolve().as_uri()
    assert result.output["errors"] == []
    links = result.output["links"]
    assert len(links) == 2
    assert links[0]["target"] == (page.parent / "about.html").resolve().as_uri()
    assert links[0]["range"] == {"start": {"line": 0, "character": 9}, "end": {"line": 0, "character": 19}}
    assert links[1]["target"] is None
    assert "1 without target" in result.result


def test_cmd_scan_with_base(tmp_path, run_cmd):
    page = tmp_path / "index.html"
    page.write_text('<a href="/docs/a.html">')

    result = run_cmd(cmd_scan, str(page), base="https://example.com/x/index.html")

    assert result.success
    assert result.output["links"][0]["target"] == "https://example.com/docs/a.html"


def test_cmd_scan_missing_file(tmp_path, run_cmd):
    result = run_cmd(cmd_scan, str(tmp_path / "missing.html"))
    assert not result.success
    assert result.output["links"] == []
    assert "File not found" in result.output["errors"][0]


def test_cmd_scan_uses_configured_attributes(tmp_path, htmllinks_home, run_cmd):
    htmllinks_home.mkdir()
    (htmllinks_home / "config.json").write_text(json.dumps({"links": {"link_attributes": ["data-src"]}}))
    page = tmp_path / "index.html"
    page.write_text('<img src="a.png" data-src="b.png">')

    result = run_cmd(cmd_scan, str(page))

    assert [link["target"] for link in result.output["links"]] == [(tmp_path / "b.png").resolve().as_uri()]


def test_cmd_scan_invalid_config(tmp_path, htmllinks_home, run_cmd):
    htmllinks_home.mkdir()
    (htmllinks_home / "config.json").write_text("{invalid json")
    page = tmp_path / "index.html"
    page.write_text("<p>")

    result = run_cmd(cmd_scan, str(page))

    assert not result.success
    assert "Invalid JSON" in result.output["errors"][0]


def test_cmd_resolve_resolved(run_cmd):
    result = run_cmd(cmd_resolve, "../../c.js", "http://model/x/y/1")
    assert result.success
    assert result.output["status"] == "resolved"
    assert result.output["target"] == "http://model/c.js"


def test_cmd_resolve_filtered(run_cmd):
    result = run_cmd(cmd_resolve, " #top", "http://model/1")
    assert result.output["status"] == "filtered"
    assert result.output["target"] is None
    assert result.result.startswith("Not a link")


def test_cmd_resolve_invalid(run_cmd):
    result = run_cmd(cmd_resolve, "%", "http://model/1")
    assert result.output["status"] == "invalid"
    assert result.output["errors"]
