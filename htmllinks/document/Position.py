"""Position in a text document."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character offset."""

    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}
