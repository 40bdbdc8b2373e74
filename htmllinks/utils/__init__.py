"""Utility functions for htmllinks."""

from .logger import configure_logging, get_logger
from .uri_utils import has_valid_escapes, path_to_uri, remove_dot_segments, resolve_reference, split_uri

__all__ = [
    "configure_logging",
    "get_logger",
    "has_valid_escapes",
    "path_to_uri",
    "remove_dot_segments",
    "resolve_reference",
    "split_uri",
]
