"""Outcome of resolving one link reference."""

from dataclasses import dataclass
from enum import Enum


class ResolutionStatus(Enum):
    RESOLVED = "resolved"
    # Policy-excluded (empty, pseudo-scheme, fragment): the candidate is dropped
    FILTERED = "filtered"
    # Unparsable reference: the candidate is reported without a target
    INVALID = "invalid"


@dataclass(frozen=True)
class LinkResolution:
    status: ResolutionStatus
    target: str | None = None
    reason: str = ""

    @classmethod
    def resolved(cls, target: str) -> "LinkResolution":
        return cls(ResolutionStatus.RESOLVED, target)

    @classmethod
    def filtered(cls, reason: str) -> "LinkResolution":
        return cls(ResolutionStatus.FILTERED, None, reason)

    @classmethod
    def invalid(cls, reason: str) -> "LinkResolution":
        return cls(ResolutionStatus.INVALID, None, reason)

    @property
    def is_reported(self) -> bool:
        """True if the candidate appears in the link list (with or without target)."""
        return self.status is not ResolutionStatus.FILTERED
