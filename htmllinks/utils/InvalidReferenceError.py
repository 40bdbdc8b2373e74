"""Invalid reference error."""


class InvalidReferenceError(ValueError):
    """Raised when a reference cannot be parsed as a URI reference."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"Invalid URI reference {reference!r}: {reason}")
