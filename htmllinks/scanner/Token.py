"""Token record."""

from dataclasses import dataclass

from .TokenType import TokenType


@dataclass(frozen=True)
class Token:
    """A classified span of document text; end is exclusive."""

    type: TokenType
    offset: int
    end: int
    text: str
