"""Link record reported for a document."""

from dataclasses import dataclass
from typing import Any

from ..document.Range import Range


@dataclass(frozen=True)
class DocumentLink:
    """Range of a link attribute value (quotes excluded) and its target.

    target is None when the reference is present but cannot be resolved.
    """

    range: Range
    target: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "target": self.target}
