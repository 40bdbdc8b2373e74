"""Configuration models."""

from .get_home_dir import get_home_dir
from .HtmlLinksConfig import HtmlLinksConfig
from .LinksConfig import LinksConfig
from .LogConfig import LogConfig

__all__ = ["HtmlLinksConfig", "LinksConfig", "LogConfig", "get_home_dir"]
