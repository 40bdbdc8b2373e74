"""URI reference parsing and resolution utilities for htmllinks.

Resolution follows RFC 3986 section 5.2 and is purely textual: it works for any
scheme (http, file, or an unregistered one like test://) and never touches
the network or the filesystem.
"""

import re
from pathlib import Path
from typing import NamedTuple

from .InvalidReferenceError import InvalidReferenceError

# RFC 3986 appendix B; unmatched groups are None (undefined), not ""
_URI_PATTERN = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.DOTALL)
_RELATIVE_PATTERN = re.compile(r"^(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.DOTALL)
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_BAD_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")
_DRIVE_PATH_PATTERN = re.compile(r"^[A-Za-z]:[/\\]")


class UriParts(NamedTuple):
    scheme: str | None
    authority: str | None
    path: str
    query: str | None
    fragment: str | None


def split_uri(uri: str) -> UriParts:
    """Split a URI reference into its five RFC 3986 components.

    A leading token that is not a syntactically valid scheme (e.g. "a b:c") is
    kept as part of the path.
    """
    match = _URI_PATTERN.match(uri)
    assert match is not None  # every string matches
    scheme, authority, path, query, fragment = match.groups()
    if scheme is not None and not _SCHEME_PATTERN.match(scheme):
        relative = _RELATIVE_PATTERN.match(uri)
        assert relative is not None
        return UriParts(None, *relative.groups())
    return UriParts(scheme, authority, path, query, fragment)


def join_uri(parts: UriParts) -> str:
    """Recompose a URI from its components (RFC 3986 section 5.3)."""
    result = ""
    if parts.scheme is not None:
        result += parts.scheme + ":"
    if parts.authority is not None:
        result += "//" + parts.authority
    result += parts.path
    if parts.query is not None:
        result += "?" + parts.query
    if parts.fragment is not None:
        result += "#" + parts.fragment
    return result


def remove_dot_segments(path: str) -> str:
    """Remove "." and ".." segments from a path (RFC 3986 section 5.2.4)."""
    output: list[str] = []
    while path:
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../"):
            path = path[3:]
            if output:
                output.pop()
        elif path == "/..":
            path = "/"
            if output:
                output.pop()
        elif path in (".", ".."):
            path = ""
        else:
            start = 1 if path.startswith("/") else 0
            end = path.find("/", start)
            if end == -1:
                end = len(path)
            output.append(path[:end])
            path = path[end:]
    return "".join(output)


def has_valid_escapes(value: str) -> bool:
    """Return True if every '%' in value starts a two-digit hex escape."""
    return _BAD_ESCAPE_PATTERN.search(value) is None


def check_reference(reference: str) -> None:
    """Raise InvalidReferenceError if reference is not a parsable URI reference."""
    if not has_valid_escapes(reference):
        raise InvalidReferenceError(reference, "malformed percent-encoding")
    authority = split_uri(reference).authority
    if authority and authority.count("[") != authority.count("]"):
        raise InvalidReferenceError(reference, "unbalanced brackets in authority")


def _merge(base: UriParts, path: str) -> str:
    if base.authority is not None and not base.path:
        return "/" + path
    return base.path[: base.path.rfind("/") + 1] + path


def resolve_reference(reference: str, base: str) -> str:
    """Resolve reference against base following RFC 3986 section 5.2.2.

    Args:
        reference: URI reference as found in the document (absolute or relative)
        base: URI of the referencing document

    Returns:
        Target URI string. When base has no scheme the reference cannot be made
        absolute and is returned unchanged.

    Raises:
        InvalidReferenceError: If reference is not a parsable URI reference

    Examples:
        >>> resolve_reference("../../c.js", "http://model/x/y/1")
        "http://model/c.js"

        >>> resolve_reference("/class/class.js", "file:///c:/Alex/test.html")
        "file:///class/class.js"
    """
    check_reference(reference)
    b = split_uri(base)
    if b.scheme is None:
        return reference

    # "c:/dir/x" under a file: base is a drive path, not a URI with scheme "c"
    if b.scheme.lower() == "file" and _DRIVE_PATH_PATTERN.match(reference):
        reference = "/" + reference

    r = split_uri(reference)
    if r.scheme is not None:
        target = UriParts(r.scheme, r.authority, remove_dot_segments(r.path), r.query, r.fragment)
    elif r.authority is not None:
        target = UriParts(b.scheme, r.authority, remove_dot_segments(r.path), r.query, r.fragment)
    elif not r.path:
        target = UriParts(b.scheme, b.authority, b.path, r.query if r.query is not None else b.query, r.fragment)
    elif r.path.startswith("/"):
        target = UriParts(b.scheme, b.authority, remove_dot_segments(r.path), r.query, r.fragment)
    else:
        target = UriParts(b.scheme, b.authority, remove_dot_segments(_merge(b, r.path)), r.query, r.fragment)
    return join_uri(target)


def scheme_of(uri: str) -> str:
    """Return the lower-cased scheme of uri, or "" when it has none."""
    scheme = split_uri(uri).scheme
    return scheme.lower() if scheme else ""


def path_to_uri(path: Path) -> str:
    """Convert Path to file:// URI.

    Args:
        path: Path object

    Returns:
        URI string like 'file:///Users/ww5/index.html'
    """
    return path.resolve().as_uri()
