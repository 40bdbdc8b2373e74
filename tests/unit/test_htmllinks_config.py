"""Unit tests for htmllinks.config."""

import json

import pytest
from pydantic import ValidationError

from htmllinks.config import HtmlLinksConfig, LinksConfig, LogConfig, get_home_dir


def test_links_config_defaults():
    cfg = LinksConfig()
    assert cfg.link_attributes == ["href", "src"]
    assert cfg.pseudo_schemes == ["javascript"]
    assert cfg.honor_base_element is True


def test_links_config_normalizes_names():
    cfg = LinksConfig(link_attributes=[" HREF ", "Data-Src"], pseudo_schemes=["VBScript"])
    assert cfg.link_attributes == ["href", "data-src"]
    assert cfg.pseudo_schemes == ["vbscript"]


def test_links_config_rejects_empty_attribute_list():
    with pytest.raises(ValidationError):
        LinksConfig(link_attributes=[])


def test_links_config_rejects_blank_names():
    with pytest.raises(ValidationError, match="non-empty"):
        LinksConfig(link_attributes=["href", "  "])


def test_links_config_forbids_extra_fields():
    with pytest.raises(ValidationError):
        LinksConfig(unknown=True)  # type: ignore


def test_log_config_level():
    assert LogConfig().level == "INFO"
    with pytest.raises(ValidationError):
        LogConfig(level="VERBOSE")  # type: ignore


def test_get_home_dir_uses_environment(htmllinks_home):
    assert get_home_dir() == htmllinks_home.resolve()
    assert get_home_dir("config.json") == htmllinks_home.resolve() / "config.json"


def test_get_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("HTMLLINKS_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".htmllinks"


def test_load_missing_file_gives_defaults():
    assert HtmlLinksConfig.load() == HtmlLinksConfig()


def test_load_from_home(htmllinks_home):
    htmllinks_home.mkdir()
    (htmllinks_home / "config.json").write_text(
        json.dumps({"links": {"link_attributes": ["href"]}, "log": {"level": "DEBUG"}})
    )
    cfg = HtmlLinksConfig.load()
    assert cfg.links.link_attributes == ["href"]
    assert cfg.links.pseudo_schemes == ["javascript"]
    assert cfg.log.level == "DEBUG"


def test_load_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{invalid json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        HtmlLinksConfig.load(path)


def test_load_not_an_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]")
    with pytest.raises(ValueError, match="JSON object"):
        HtmlLinksConfig.load(path)


def test_load_validation_error_names_field(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"links": {"honor_base_element": "sometimes"}}))
    with pytest.raises(ValueError, match=r"Configuration validation error: links\.honor_base_element"):
        HtmlLinksConfig.load(path)


def test_to_dict():
    assert HtmlLinksConfig().to_dict() == {
        "links": {"link_attributes": ["href", "src"], "pseudo_schemes": ["javascript"], "honor_base_element": True},
        "log": {"level": "INFO"},
    }
