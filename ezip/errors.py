class ParseError(ValueError):
    """
    Raised when the input is not valid marker-compressed text.

    `position` is the offset in the source where the problem was found.
    """
    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at offset {position})")
        self.position: int = position

class MalformedMarker(ParseError):
    """An opener was found but no `(LxR)` header follows it."""

class TruncatedPayload(ParseError):
    """A marker declares more payload than the input holds."""

class OverrunPayload(ParseError):
    """A nested marker's payload runs past the window of its parent."""
