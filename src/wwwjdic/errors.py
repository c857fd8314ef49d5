from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import LineError


class ErrorKind(str, Enum):
    MALFORMED_IDENTIFIER = "malformed identifier"
    MISSING_SEPARATOR = "missing separator"
    UNTERMINATED_ANNOTATION = "unterminated annotation"
    INVALID_SENSE_NUMBER = "invalid sense number"
    UNRECOGNIZED_ELEMENT = "unrecognized element marker"
    EMPTY_HEADWORD = "empty headword"


class ParseError(ValueError):
    """A single corpus line failed to parse at `position` (0-based char offset)."""

    def __init__(self, kind: ErrorKind, message: str, position: int) -> None:
        super().__init__(f"{kind.value} at {position}: {message}")
        self.kind = kind
        self.message = message
        self.position = position

    def __reduce__(self):
        # worker processes send these back to the parent
        return (self.__class__, (self.kind, self.message, self.position))


class CorpusLoadError(RuntimeError):
    """Raised by the strict policy on the first line that does not parse."""

    def __init__(self, failure: LineError) -> None:
        super().__init__(f"line {failure.line_no}: {failure.error}")
        self.failure = failure

    def __reduce__(self):
        return (self.__class__, (self.failure,))
