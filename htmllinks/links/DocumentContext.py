"""Reference-resolution capability supplied by the caller."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from ..utils.uri_utils import resolve_reference


@runtime_checkable
class DocumentContext(Protocol):
    """Joins a reference with a base URI.

    Implementations must be pure and synchronous. A reference that cannot be
    parsed should raise ValueError (e.g. InvalidReferenceError); the link
    finder reports such links without a target.
    """

    def resolve_reference(self, ref: str, base: str) -> str: ...


class UriDocumentContext:
    """Default context: generic RFC 3986 resolution, valid for any scheme."""

    def resolve_reference(self, ref: str, base: str) -> str:
        return resolve_reference(ref, base)


class _CallableDocumentContext:
    def __init__(self, func: Callable[[str], str]):
        self._func = func

    def resolve_reference(self, ref: str, base: str) -> str:  # noqa: ARG002
        return self._func(ref)


def document_context(func: Callable[[str], str]) -> DocumentContext:
    """Wrap a one-argument resolver whose base URI is already bound.

    The base argument passed by the link finder is ignored, so a <base href>
    element in the document has no effect on such a context.
    """
    return _CallableDocumentContext(func)
