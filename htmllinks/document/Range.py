"""Range in a text document."""

from dataclasses import dataclass

from .Position import Position


@dataclass(frozen=True)
class Range:
    """Span between two positions; end is exclusive."""

    start: Position
    end: Position

    @classmethod
    def create(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> "Range":
        return cls(Position(start_line, start_character), Position(end_line, end_character))

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}
