"""htmllinks: hyperlink discovery and resolution for HTML documents."""

from .config import HtmlLinksConfig, LinksConfig
from .document import Position, Range, TextDocument
from .links import (
    DocumentContext,
    DocumentLink,
    LinkResolution,
    ResolutionStatus,
    UriDocumentContext,
    document_context,
    find_document_links,
    resolve_link_target,
)
from .utils.InvalidReferenceError import InvalidReferenceError

__all__ = [
    "DocumentContext",
    "DocumentLink",
    "HtmlLinksConfig",
    "InvalidReferenceError",
    "LinkResolution",
    "LinksConfig",
    "Position",
    "Range",
    "ResolutionStatus",
    "TextDocument",
    "UriDocumentContext",
    "document_context",
    "find_document_links",
    "resolve_link_target",
]
