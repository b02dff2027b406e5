"""
JSON to S-expression conversion.

Parses JSON text with a hand-written tokenizer and recursive-descent
parser into an immutable value tree, and renders that tree as a
namespaced S-expression::

    >>> import jsexpr
    >>> jsexpr.render(jsexpr.parse('{"a": [1, true]}'))
    '(json:object\\n  (json:a (json:array\\n    1\\n    #t)))'
"""

import logging
from typing import IO
from typing import Any

from ._errors import ErrorKind
from ._errors import ParseError
from ._lexer import JsonLexer
from ._lexer import JsonToken
from ._lexer import TokenType
from ._parser import DEFAULT_MAX_DEPTH
from ._parser import JsonParser
from ._parser import ParseConfig
from ._parser import ParseResult
from ._parser import parse_document
from ._tree import JsonArray
from ._tree import JsonBoolean
from ._tree import JsonNull
from ._tree import JsonNumber
from ._tree import JsonObject
from ._tree import JsonString
from ._tree import JsonValue
from ._tree import Value
from ._tree import ValueKind
from ._tree import from_python
from ._tree import to_python
from ._writer import NAMESPACE
from ._writer import RenderConfig
from ._writer import escape_string
from ._writer import format_number
from ._writer import render
from ._writer import render_with_config

__version__ = "0.1.0"

# Leading comment line of every converted document
HEADER = ";; JSON to S-expression conversion\n\n"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(s: str, **kwargs: Any) -> Value:
    """
    Parses a JSON document into a value tree.

    Keyword arguments build a ParseConfig. Trailing content after the
    first value is logged as a warning and ignored.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON document must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    return parse_document(s, config).value


def load(fp: IO[str], **kwargs: Any) -> Value:
    """
    Parses a JSON document read in full from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


def dump(value: Value | None, fp: IO[str], **kwargs: Any) -> None:
    """
    Renders a value tree into a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(render(value, **kwargs))


def convert(
    s: str,
    *,
    compact: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
    decode_unicode_escapes: bool = True,
) -> str:
    """
    Converts JSON text into a complete S-expression document.

    The result is the fixed header, the rendered value and a final
    newline. Nothing is produced unless the whole parse succeeds.
    """
    value = parse(
        s, max_depth=max_depth, decode_unicode_escapes=decode_unicode_escapes
    )
    return HEADER + render(value, compact=compact) + "\n"


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "HEADER",
    "NAMESPACE",
    "ErrorKind",
    "JsonArray",
    "JsonBoolean",
    "JsonLexer",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonToken",
    "JsonValue",
    "ParseConfig",
    "ParseError",
    "ParseResult",
    "RenderConfig",
    "TokenType",
    "Value",
    "ValueKind",
    "convert",
    "dump",
    "escape_string",
    "format_number",
    "from_python",
    "load",
    "parse",
    "parse_document",
    "render",
    "render_with_config",
    "to_python",
]
