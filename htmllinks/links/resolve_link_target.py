"""Resolve a raw link reference to its target URI."""

import re

from ..config.LinksConfig import LinksConfig
from ..utils.InvalidReferenceError import InvalidReferenceError
from ..utils.logger import get_logger
from ..utils.uri_utils import check_reference, scheme_of
from .DocumentContext import DocumentContext
from .LinkResolution import LinkResolution

logger = get_logger("links")

_LEADING_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
# Two or more scheme characters, so a drive letter ("c://") is not taken for a scheme
_ABSOLUTE_URL = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+://")
_FILE_URI = re.compile(r"^file:", re.IGNORECASE)


def resolve_link_target(
    base_uri: str,
    raw: str,
    context: DocumentContext,
    config: LinksConfig | None = None,
) -> LinkResolution:
    """Resolve raw against base_uri.

    Args:
        base_uri: URI of the referencing document (may be empty)
        raw: Attribute value with quotes already removed
        context: Capability performing the actual base + reference join
        config: Link settings; defaults to LinksConfig()

    Returns:
        RESOLVED with the target URI, FILTERED for references that never
        denote a navigable resource (empty, pseudo-scheme, in-document
        fragment), or INVALID for references that cannot be parsed.
    """
    if config is None:
        config = LinksConfig()

    ref = raw.strip()
    if not ref:
        return LinkResolution.filtered("empty reference")

    scheme = _LEADING_SCHEME.match(ref)
    if scheme and scheme.group(1).lower() in config.pseudo_schemes:
        return LinkResolution.filtered(f"pseudo-scheme {scheme.group(1).lower()}:")

    if ref.startswith("#"):
        return LinkResolution.filtered("in-document fragment")

    # Absolute URLs are kept literally, backslashes in Windows file URIs included
    if _ABSOLUTE_URL.match(ref) or _FILE_URI.match(ref):
        return LinkResolution.resolved(ref)

    if ref.startswith("//"):
        picked = "https" if scheme_of(base_uri).startswith("https") else "http"
        return LinkResolution.resolved(f"{picked}:{ref}")

    try:
        check_reference(ref)
        target = context.resolve_reference(ref, base_uri)
    except ValueError as e:
        logger.debug(f"Invalid link reference {ref!r} in {base_uri!r}: {e}")
        return LinkResolution.invalid(str(e))

    if not target:
        error = InvalidReferenceError(ref, "resolved to an empty target")
        logger.debug(f"Invalid link reference {ref!r} in {base_uri!r}: {error}")
        return LinkResolution.invalid(str(error))
    return LinkResolution.resolved(target)
