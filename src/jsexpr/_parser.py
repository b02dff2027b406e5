"""
Recursive-descent parser building the value tree.

Grammar::

    document := value
    value    := object | array | string | number | true | false | null
    object   := '{' (member (',' member)*)? '}'
    member   := string ':' value
    array    := '[' (value (',' value)*)? ']'

The parser holds a single token of lookahead and never backtracks. The
first error aborts the parse; containers collect their children in local
lists and are only frozen into tree nodes once complete, so nothing
partial reaches the caller.
"""

import logging
from dataclasses import dataclass

from ._errors import ErrorKind
from ._errors import ParseError
from ._lexer import JsonLexer
from ._lexer import JsonToken
from ._lexer import TokenType
from ._tree import JsonArray
from ._tree import JsonBoolean
from ._tree import JsonNull
from ._tree import JsonNumber
from ._tree import JsonObject
from ._tree import JsonString
from ._tree import Value

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``max_depth`` bounds container nesting; ``decode_unicode_escapes``
    controls whether ``\\uXXXX`` is decoded or kept verbatim.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    decode_unicode_escapes: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if not isinstance(self.decode_unicode_escapes, bool):
            raise TypeError("decode_unicode_escapes must be a boolean")


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one document.

    ``trailing`` is the first token found after the document value when
    the input did not end there; it is tolerated, not materialized.
    """

    value: Value
    trailing: JsonToken | None = None

    @property
    def has_trailing_content(self) -> bool:
        return self.trailing is not None


class JsonParser:
    """
    Recursive descent parser over a JsonLexer token stream.

    Call ``advance_token`` once to load the first token, then
    ``parse_value``.
    """

    def __init__(self, lexer: JsonLexer, config: ParseConfig):
        self.lexer = lexer
        self.config = config
        self.current_token = JsonToken(TokenType.EOF, "", 0, 0, 1, 1)
        self.depth = 0

    def advance_token(self) -> JsonToken:
        """Advances to next token and returns it."""
        self.current_token = self.lexer.next_token()
        return self.current_token

    def _error(
        self, kind: ErrorKind, msg: str, token: JsonToken | None = None
    ) -> ParseError:
        token = token or self.current_token
        if token.type is TokenType.ERROR:
            return token.as_error(self.lexer.text)
        return ParseError(kind, msg, self.lexer.text, token.start)

    def expect_token(self, token_type: TokenType) -> JsonToken:
        """Expects a specific token type and advances."""
        if self.current_token.type is not token_type:
            raise self._error(
                ErrorKind.MISSING_SEPARATOR,
                f"Expecting '{token_type.value}' delimiter",
            )
        token = self.current_token
        self.advance_token()
        return token

    def parse_value(self) -> Value:  # noqa: PLR0911
        """Parses any JSON value based on current token."""
        token = self.current_token

        if token.type is TokenType.LBRACE:
            return self.parse_object()
        elif token.type is TokenType.LBRACKET:
            return self.parse_array()
        elif token.type is TokenType.STRING:
            self.advance_token()
            return JsonString(token.value)
        elif token.type is TokenType.NUMBER:
            self.advance_token()
            return JsonNumber(token.number)
        elif token.type is TokenType.TRUE:
            self.advance_token()
            return JsonBoolean(True)
        elif token.type is TokenType.FALSE:
            self.advance_token()
            return JsonBoolean(False)
        elif token.type is TokenType.NULL:
            self.advance_token()
            return JsonNull()
        else:
            raise self._error(ErrorKind.UNEXPECTED_TOKEN, "Expecting value")

    def _enter_container(self) -> None:
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise self._error(
                ErrorKind.TOO_DEEP,
                f"Maximum nesting depth of {self.config.max_depth} exceeded",
            )

    def _parse_object_key(self) -> str:
        """Parses object key and validates it's a proper string token."""
        if self.current_token.type is not TokenType.STRING:
            raise self._error(
                ErrorKind.UNEXPECTED_TOKEN,
                "Expecting property name enclosed in double quotes",
            )

        key_token = self.current_token
        self.advance_token()
        return key_token.value

    def _handle_continuation(self, closing: TokenType, container: str) -> bool:
        """
        Consumes the separator after a member or element.

        Returns True if another member or element follows, False once the
        closing delimiter has been consumed.
        """
        token = self.current_token

        if token.type is closing:
            self.advance_token()
            return False
        elif token.type is TokenType.COMMA:
            self.advance_token()
            if self.current_token.type is closing:
                raise self._error(
                    ErrorKind.UNEXPECTED_TOKEN,
                    f"Illegal trailing comma before end of {container}",
                    token,
                )
            return True
        else:
            raise self._error(
                ErrorKind.MISSING_SEPARATOR,
                f"Expecting ',' or '{closing.value}' delimiter",
            )

    def parse_object(self) -> JsonObject:
        """Parses a JSON object, keeping duplicate keys in order."""
        self._enter_container()
        self.expect_token(TokenType.LBRACE)

        if self.current_token.type is TokenType.RBRACE:
            self.advance_token()
            self.depth -= 1
            return JsonObject()

        members: list[tuple[str, Value]] = []

        while True:
            key = self._parse_object_key()
            self.expect_token(TokenType.COLON)
            members.append((key, self.parse_value()))

            if not self._handle_continuation(TokenType.RBRACE, "object"):
                break

        self.depth -= 1
        return JsonObject(tuple(members))

    def parse_array(self) -> JsonArray:
        """Parses a JSON array."""
        self._enter_container()
        self.expect_token(TokenType.LBRACKET)

        if self.current_token.type is TokenType.RBRACKET:
            self.advance_token()
            self.depth -= 1
            return JsonArray()

        elements: list[Value] = []

        while True:
            elements.append(self.parse_value())

            if not self._handle_continuation(TokenType.RBRACKET, "array"):
                break

        self.depth -= 1
        return JsonArray(tuple(elements))


def parse_document(
    text: str, config: ParseConfig | None = None
) -> ParseResult:
    """
    Parses one JSON document from ``text``.

    Content after the first value is logged as a warning and reported on
    the result instead of failing the parse.
    """
    config = config or ParseConfig()
    lexer = JsonLexer(text, config.decode_unicode_escapes)
    parser = JsonParser(lexer, config)

    try:
        parser.advance_token()
        value = parser.parse_value()
    except RecursionError as e:
        raise ParseError(
            ErrorKind.TOO_DEEP,
            "Maximum recursion depth exceeded",
            text,
            lexer.pos,
        ) from e
    except MemoryError as e:
        raise ParseError(
            ErrorKind.ALLOCATION_FAILURE, "Out of memory", text, lexer.pos
        ) from e

    trailing = parser.current_token
    if trailing.type is TokenType.EOF:
        logger.debug(
            "Parsed %s document from %d characters",
            value.kind.value,
            len(text),
        )
        return ParseResult(value)

    logger.warning(
        "Extra content after JSON at line %d, column %d",
        trailing.line,
        trailing.column,
    )
    return ParseResult(value, trailing)
