"""Document model: positions, ranges and text documents."""

from .Position import Position
from .Range import Range
from .TextDocument import TextDocument

__all__ = ["Position", "Range", "TextDocument"]
