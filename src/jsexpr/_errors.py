"""Error kinds and the exception raised for malformed JSON input."""

from enum import Enum
from typing import TypeAlias

Position: TypeAlias = int


class ErrorKind(Enum):
    """
    Classifies why a document was rejected.

    Lexing kinds come from the tokenizer; grammar kinds from the parser.
    """

    UNTERMINATED_STRING = "unterminated_string"
    INVALID_NUMBER = "invalid_number"
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_TOKEN = "unexpected_token"
    MISSING_SEPARATOR = "missing_separator"
    ALLOCATION_FAILURE = "allocation_failure"
    TOO_DEEP = "too_deep"


class ParseError(ValueError):
    """
    Handles JSON parsing failures with position and line/column information.

    Raised once per failed parse; no partial document accompanies it.
    """

    def __init__(
        self, kind: ErrorKind, msg: str, doc: str = "", pos: Position = 0
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[type, tuple[ErrorKind, str, str, int]]:
        return self.__class__, (self.kind, self.msg, self.doc, self.pos)
