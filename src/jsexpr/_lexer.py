"""
Tokenizer for JSON text.

Turns the raw input into a lazy stream of tokens, one per call, while
tracking the offset and the 1-based line and column of every token.
Lexing failures are returned as ERROR tokens rather than raised, so the
parser decides whether the failure matters at that point in the grammar.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from ._errors import ErrorKind
from ._errors import ParseError
from ._errors import Position

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class TokenType(Enum):
    """Lexical token kinds."""

    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    EOF = "eof"
    ERROR = "error"


_STRUCTURAL = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_KEYWORDS = (
    ("true", TokenType.TRUE),
    ("false", TokenType.FALSE),
    ("null", TokenType.NULL),
)


@dataclass(frozen=True)
class JsonToken:
    """
    Represents a JSON token with position information.

    ``value`` holds the decoded payload for strings and the source text
    for everything else. NUMBER tokens also carry their parsed float in
    ``number``, which is 0.0 on every other token. ERROR tokens carry the
    kind and message of the lexing failure.
    """

    type: TokenType
    value: str
    start: Position
    end: Position
    line: int
    column: int
    number: float = 0.0
    error: ErrorKind | None = None
    message: str = ""

    def as_error(self, doc: str) -> ParseError:
        """Builds the ParseError describing this ERROR token."""
        if self.error is None:
            raise ValueError(f"{self.type.name} token carries no error")
        return ParseError(self.error, self.message, doc, self.start)


class JsonLexer:
    """
    Tokenizes JSON input one token at a time.

    Character-by-character scanning with line and column bookkeeping:
    a line feed starts a new line at column 1, any other character
    advances the column by one.
    """

    def __init__(self, text: str, decode_unicode_escapes: bool = True):
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.line = 1
        self.column = 1
        self.decode_unicode_escapes = decode_unicode_escapes

    def __iter__(self) -> Iterator[JsonToken]:
        """Yields tokens up to and including EOF or the first ERROR."""
        while True:
            token = self.next_token()
            yield token
            if token.type in (TokenType.EOF, TokenType.ERROR):
                return

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else "\0"

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
            if char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        return char

    def skip_whitespace(self) -> None:
        """Skips whitespace characters allowed between JSON tokens."""
        while self.pos < self.length and self.text[self.pos] in _WHITESPACE:
            self.advance()

    def _token(
        self,
        token_type: TokenType,
        value: str,
        start: tuple[Position, int, int],
        number: float = 0.0,
    ) -> JsonToken:
        pos, line, column = start
        return JsonToken(
            token_type, value, pos, self.pos, line, column, number=number
        )

    def _error(
        self, kind: ErrorKind, message: str, start: tuple[Position, int, int]
    ) -> JsonToken:
        pos, line, column = start
        return JsonToken(
            TokenType.ERROR,
            self.text[pos : self.pos],
            pos,
            self.pos,
            line,
            column,
            error=kind,
            message=message,
        )

    def _mark(self) -> tuple[Position, int, int]:
        return self.pos, self.line, self.column

    def _scan_digits(self) -> bool:
        """Consumes a run of ASCII digits, returns False if there was none."""
        begin = self.pos
        while self.peek() in _DIGITS:
            self.advance()
        return self.pos > begin

    def _scan_unicode_escape(self) -> str | None:
        """
        Decodes the four hex digits following ``\\u``.

        A high surrogate immediately followed by an escaped low surrogate is
        combined into one character. Returns None, consuming nothing, when
        the digits are malformed or name an unpaired surrogate.
        """
        code_point = self._hex_quad(self.pos)
        if code_point is None or 0xDC00 <= code_point <= 0xDFFF:
            return None

        if 0xD800 <= code_point <= 0xDBFF:
            low_point: int | None = None
            if self.text.startswith("\\u", self.pos + 4):
                low_point = self._hex_quad(self.pos + 6)
            if low_point is None or not 0xDC00 <= low_point <= 0xDFFF:
                return None
            for _ in range(10):
                self.advance()
            return chr(
                0x10000 + ((code_point - 0xD800) << 10) + (low_point - 0xDC00)
            )

        for _ in range(4):
            self.advance()
        return chr(code_point)

    def _hex_quad(self, pos: Position) -> int | None:
        digits = self.text[pos : pos + 4]
        if len(digits) != 4 or any(c not in _HEX_DIGITS for c in digits):
            return None
        return int(digits, 16)

    def _scan_escape(self) -> str:
        """Resolves the escape whose backslash was just consumed."""
        char = self.advance()
        if char in _ESCAPES:
            return _ESCAPES[char]
        if char == "u" and self.decode_unicode_escapes:
            decoded = self._scan_unicode_escape()
            if decoded is not None:
                return decoded
        # Unknown escapes are kept verbatim.
        return "\\" + char

    def scan_string(self) -> JsonToken:
        """Scans a JSON string token, decoding its escape sequences."""
        start = self._mark()
        self.advance()

        chunks: list[str] = []
        while self.pos < self.length:
            char = self.advance()
            if char == '"':
                return self._token(TokenType.STRING, "".join(chunks), start)
            if char == "\\" and self.pos < self.length:
                chunks.append(self._scan_escape())
            else:
                chunks.append(char)

        return self._error(
            ErrorKind.UNTERMINATED_STRING, "Unterminated string", start
        )

    def scan_number(self) -> JsonToken:
        """Scans a JSON number token."""
        start = self._mark()

        if self.peek() == "-":
            self.advance()

        if self.peek() == "0":
            self.advance()
            if self.peek() in _DIGITS:
                return self._error(
                    ErrorKind.INVALID_NUMBER,
                    "Leading zeros not allowed",
                    start,
                )
        elif not self._scan_digits():
            return self._error(
                ErrorKind.INVALID_NUMBER, "Invalid number", start
            )

        if self.peek() == ".":
            self.advance()
            if not self._scan_digits():
                return self._error(
                    ErrorKind.INVALID_NUMBER, "Invalid decimal number", start
                )

        if self.peek() in "eE":
            self.advance()
            if self.peek() in "+-":
                self.advance()
            if not self._scan_digits():
                return self._error(
                    ErrorKind.INVALID_NUMBER, "Invalid exponent", start
                )

        literal = self.text[start[0] : self.pos]
        return self._token(
            TokenType.NUMBER, literal, start, number=float(literal)
        )

    def scan_literal(self) -> JsonToken:
        """Scans literal tokens: true, false, null."""
        start = self._mark()
        for word, token_type in _KEYWORDS:
            if self.text.startswith(word, self.pos):
                for _ in word:
                    self.advance()
                return self._token(token_type, word, start)

        return self._error(
            ErrorKind.UNEXPECTED_CHARACTER, "Invalid literal", start
        )

    def next_token(self) -> JsonToken:
        """Returns the next token, an EOF token once input is exhausted."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return self._token(TokenType.EOF, "", self._mark())

        char = self.peek()

        if char in _STRUCTURAL:
            start = self._mark()
            self.advance()
            return self._token(_STRUCTURAL[char], char, start)
        elif char == '"':
            return self.scan_string()
        elif char in _DIGITS or char == "-":
            return self.scan_number()
        elif char in "tfn":
            return self.scan_literal()
        else:
            return self._error(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Unexpected character {char!r}",
                self._mark(),
            )
