"""Find hyperlinks in an HTML document."""

from ..config.LinksConfig import LinksConfig
from ..document.Range import Range
from ..document.TextDocument import TextDocument
from ..scanner import Scanner, TokenType
from ..utils.logger import get_logger
from ..utils.uri_utils import scheme_of
from .DocumentContext import DocumentContext, UriDocumentContext
from .DocumentLink import DocumentLink
from .LinkResolution import ResolutionStatus
from .resolve_link_target import resolve_link_target

logger = get_logger("links")


def _strip_quotes(value: str, start: int, end: int) -> tuple[str, int, int]:
    if value[:1] in ("'", '"'):
        quote = value[0]
        value = value[1:]
        start += 1
        if value.endswith(quote):
            value = value[:-1]
            end -= 1
    return value, start, end


def find_document_links(
    document: TextDocument,
    context: DocumentContext | None = None,
    config: LinksConfig | None = None,
) -> list[DocumentLink]:
    """Return the links of document in document order.

    Every href/src attribute value (names compared case-insensitively) is a
    candidate. Candidates filtered by policy are left out; candidates whose
    reference cannot be parsed are reported with target None.

    Args:
        document: Document to scan
        context: Reference-resolution capability; defaults to UriDocumentContext
        config: Link settings; defaults to LinksConfig()
    """
    if config is None:
        config = LinksConfig()
    if context is None:
        context = UriDocumentContext()

    base_uri = document.uri
    base_seen = False
    links: list[DocumentLink] = []
    scanner = Scanner(document.text)
    tag: str | None = None
    attribute: str | None = None

    token = scanner.scan()
    while token is not TokenType.EOS:
        if token is TokenType.START_TAG:
            tag = scanner.last_tag
            attribute = None
        elif token is TokenType.ATTRIBUTE_NAME:
            attribute = scanner.token_text.lower()
        elif token is TokenType.ATTRIBUTE_VALUE:
            if attribute in config.link_attributes:
                raw, start, end = _strip_quotes(scanner.token_text, scanner.token_offset, scanner.token_end)
                resolution = resolve_link_target(base_uri, raw, context, config)
                if resolution.is_reported:
                    link_range = Range(document.position_at(start), document.position_at(end))
                    links.append(DocumentLink(link_range, resolution.target))
                else:
                    logger.debug(f"Dropped link {raw!r} at offset {start} in {document.uri!r}: {resolution.reason}")

                if (
                    config.honor_base_element
                    and not base_seen
                    and tag == "base"
                    and attribute == "href"
                    and resolution.status is ResolutionStatus.RESOLVED
                    and resolution.target
                    and scheme_of(resolution.target)
                ):
                    base_seen = True
                    base_uri = resolution.target
            attribute = None
        token = scanner.scan()
    return links
