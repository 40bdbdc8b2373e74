"""Tests for the htmllinks CLI."""

import json

from typer.testing import CliRunner

from htmllinks.cli import main
from htmllinks.cli._create_app import _create_app

runner = CliRunner()


def test_scan_json_output(tmp_path):
    page = tmp_path / "index.html"
    page.write_text('<a href="http://server/foo.html">')

    result = runner.invoke(_create_app(), ["--display", "json", "scan", str(page)])

    assert result.exit_code == 0
    assert '"target": "http://server/foo.html"' in result.stdout


def test_scan_yaml_output(tmp_path):
    page = tmp_path / "index.html"
    page.write_text('<img src="logo.png">')

    result = runner.invoke(_create_app(), ["scan", str(page), "--base", "http://model/x/1"])

    assert result.exit_code == 0
    assert "target: http://model/x/logo.png" in result.stdout


def test_scan_missing_file_exits_nonzero(tmp_path):
    result = runner.invoke(_create_app(), ["scan", str(tmp_path / "nope.html")])
    assert result.exit_code == 1


def test_resolve_command():
    result = runner.invoke(_create_app(), ["-d", "json", "resolve", "//www.microsoft.com/", "--base", "https://x/"])
    assert result.exit_code == 0
    assert '"target": "https://www.microsoft.com/"' in result.stdout


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "resolve", "a", "--base", "http://x/"])
    assert result.exit_code == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("htmllinks ")


def test_main_usage_error():
    assert main(["resolve"]) == 2


def test_main_json_display_writes_parsable_json(capsys):
    assert main(["--display", "json", "resolve", "a.js", "--base", "http://model/x/1"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["target"] == "http://model/x/a.js"
    assert output["status"] == "resolved"


def test_main_yaml_display_is_default(capsys):
    assert main(["resolve", "%", "--base", "http://model/x/1"]) == 0
    out = capsys.readouterr().out
    assert "target: null" in out
    assert not out.lstrip().startswith("{")


def test_main_unknown_option_is_usage_error():
    assert main(["scan", "--no-such-option"]) == 2
