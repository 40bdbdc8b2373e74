"""Document link discovery."""

from .DocumentContext import DocumentContext, UriDocumentContext, document_context
from .DocumentLink import DocumentLink
from .find_document_links import find_document_links
from .LinkResolution import LinkResolution, ResolutionStatus
from .resolve_link_target import resolve_link_target

__all__ = [
    "DocumentContext",
    "DocumentLink",
    "LinkResolution",
    "ResolutionStatus",
    "UriDocumentContext",
    "document_context",
    "find_document_links",
    "resolve_link_target",
]
