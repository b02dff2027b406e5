"""
S-expression writer for the value tree.

Containers are tagged in the ``json:`` namespace. Non-empty containers
use block style: each child on its own line, indented two spaces per
nesting level, with the closing parenthesis glued to the last child.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any

from ._tree import JsonArray
from ._tree import JsonBoolean
from ._tree import JsonNull
from ._tree import JsonNumber
from ._tree import JsonObject
from ._tree import JsonString
from ._tree import Value

logger = logging.getLogger(__name__)

NAMESPACE = "json"
INDENT_WIDTH = 2

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Characters that break the tag grammar when spliced into a member key
_UNSAFE_KEY_CHARS = frozenset(' \t\n\r()";')

_STRING_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class RenderConfig:
    """
    Configures S-expression output with immutable settings.

    ``indent_base`` is the nesting level the root is rendered at.
    ``compact`` puts children on the same line separated by one space.
    """

    indent_base: int = 0
    compact: bool = False
    indent_width: int = INDENT_WIDTH

    def __post_init__(self) -> None:
        for name in ("indent_base", "indent_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer")
            if value < 0:
                raise ValueError(f"{name} must not be negative")
        if not isinstance(self.compact, bool):
            raise TypeError("compact must be a boolean")


def escape_string(s: str) -> str:
    """
    Quotes ``s`` for the S-expression reader.

    Only the quote, backslash, newline, carriage return and tab are
    escaped; every other character passes through unchanged.
    """
    result = ['"']
    for char in s:
        result.append(_STRING_ESCAPES.get(char, char))
    result.append('"')
    return "".join(result)


def format_number(n: float) -> str:
    """
    Formats a number, as an integer literal when it has no fraction.

    Values outside the signed 64-bit range, infinities and NaN use the
    general ``%.15g`` format.
    """
    if (
        math.isfinite(n)
        and math.trunc(n) == n
        and _INT64_MIN <= n <= _INT64_MAX
    ):
        return str(int(n))
    return f"{n:.15g}"


def _separator(config: RenderConfig, level: int) -> str:
    if config.compact:
        return " "
    return "\n" + " " * (config.indent_width * level)


def _check_key(key: str) -> None:
    if not key or any(char in _UNSAFE_KEY_CHARS for char in key):
        logger.warning(
            "Object key %r cannot be represented safely in a json: tag", key
        )


def _render_object(obj: JsonObject, config: RenderConfig, level: int) -> str:
    if not obj.members:
        return f"({NAMESPACE}:object)"

    separator = _separator(config, level + 1)
    parts = [f"({NAMESPACE}:object"]
    for key, member in obj.members:
        _check_key(key)
        rendered = _render_value(member, config, level + 1)
        parts.append(f"{separator}({NAMESPACE}:{key} {rendered})")
    parts.append(")")
    return "".join(parts)


def _render_array(arr: JsonArray, config: RenderConfig, level: int) -> str:
    if not arr.elements:
        return f"({NAMESPACE}:array)"

    separator = _separator(config, level + 1)
    parts = [f"({NAMESPACE}:array"]
    for element in arr.elements:
        parts.append(separator + _render_value(element, config, level + 1))
    parts.append(")")
    return "".join(parts)


def _render_value(  # noqa: PLR0911
    value: Value | None, config: RenderConfig, level: int
) -> str:
    if value is None or isinstance(value, JsonNull):
        return "nil"
    elif isinstance(value, JsonObject):
        return _render_object(value, config, level)
    elif isinstance(value, JsonArray):
        return _render_array(value, config, level)
    elif isinstance(value, JsonString):
        return escape_string(value.text)
    elif isinstance(value, JsonNumber):
        return format_number(value.value)
    elif isinstance(value, JsonBoolean):
        return "#t" if value.value else "#f"
    else:
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)


def render(value: Value | None, indent_base: int = 0, **kwargs: Any) -> str:
    """
    Renders a value tree as an S-expression.

    ``None`` stands for an absent value and renders as ``nil``. Rendering
    is deterministic: the same tree always yields the same text.
    """
    config = RenderConfig(indent_base=indent_base, **kwargs)
    return render_with_config(value, config)


def render_with_config(value: Value | None, config: RenderConfig) -> str:
    """Renders ``value`` using an existing RenderConfig."""
    output = _render_value(value, config, config.indent_base)
    logger.debug("Rendered %d characters", len(output))
    return output
