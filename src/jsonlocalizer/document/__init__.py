"""Resource document model and compound key resolution.

Submodules:
    nodes - Immutable tagged-variant JSON tree, parsing and rendering
    keys  - Compound key splitting, resolution and leaf enumeration

Python 3.13+.
"""

from .keys import iter_leaves, join_key, resolve_key, split_key
from .nodes import (
    JsonArray,
    JsonBoolean,
    JsonNode,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    child,
    from_python,
    parse_document,
    to_display_string,
    to_python,
)

__all__ = [
    "JsonArray",
    "JsonBoolean",
    "JsonNode",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "child",
    "from_python",
    "iter_leaves",
    "join_key",
    "parse_document",
    "resolve_key",
    "split_key",
    "to_display_string",
    "to_python",
]
