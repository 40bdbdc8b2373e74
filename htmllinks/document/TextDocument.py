"""Immutable text document with offset/position mapping."""

from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path

from ..utils.uri_utils import path_to_uri
from .Position import Position


def _compute_line_offsets(text: str) -> list[int]:
    offsets = [0]
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\r":
            if i + 1 < length and text[i + 1] == "\n":
                i += 1
            offsets.append(i + 1)
        elif ch == "\n":
            offsets.append(i + 1)
        i += 1
    return offsets


@dataclass(frozen=True)
class TextDocument:
    """A document identified by its URI.

    The URI may be an empty string; relative references in such a document
    cannot be made absolute.
    """

    uri: str
    text: str
    language_id: str = "html"
    version: int = 0
    _line_offsets: list[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.uri, str):
            raise TypeError("TextDocument uri must be a string")
        if not isinstance(self.text, str):
            raise TypeError("TextDocument text must be a string")
        object.__setattr__(self, "_line_offsets", _compute_line_offsets(self.text))

    @classmethod
    def create(cls, uri: str, language_id: str, version: int, text: str) -> "TextDocument":
        return cls(uri=uri, text=text, language_id=language_id, version=version)

    @classmethod
    def from_path(cls, path: str | Path) -> "TextDocument":
        """Read an HTML file; its file:// URI becomes the document identifier."""
        file_path = Path(path).expanduser()
        text = file_path.read_text(encoding="utf-8")
        return cls(uri=path_to_uri(file_path), text=text)

    @property
    def line_count(self) -> int:
        return len(self._line_offsets)

    def get_text(self) -> str:
        return self.text

    def position_at(self, offset: int) -> Position:
        """Convert a character offset to a position, clamped to the text."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_offsets, offset) - 1
        return Position(line, offset - self._line_offsets[line])

    def offset_at(self, position: Position) -> int:
        """Convert a position to a character offset, clamped to its line."""
        if position.line >= len(self._line_offsets):
            return len(self.text)
        if position.line < 0:
            return 0
        line_offset = self._line_offsets[position.line]
        if position.line + 1 < len(self._line_offsets):
            next_line_offset = self._line_offsets[position.line + 1]
        else:
            next_line_offset = len(self.text)
        return max(min(line_offset + position.character, next_line_offset), line_offset)
