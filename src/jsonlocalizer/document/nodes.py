"""Resource document tree.

A parsed resource file is represented as an immutable tagged-variant tree:
every JSON value becomes one of six frozen node classes. Child lookup and
rendering dispatch on the node class with ``match`` instead of indexing into
loosely-typed dicts and lists.

Numbers keep the literal text that appeared in the file so that "1.50"
renders back as "1.50".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeIs, cast

from jsonlocalizer.core.depth_guard import DepthGuard
from jsonlocalizer.enums import NodeKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Node types
    "JsonObject",
    "JsonArray",
    "JsonString",
    "JsonNumber",
    "JsonBoolean",
    "JsonNull",
    "JsonNode",
    # Operations
    "child",
    "parse_document",
    "from_python",
    "to_python",
    "to_display_string",
]


@dataclass(frozen=True, slots=True)
class JsonObject:
    """Object node: named children in document order.

    Attributes:
        members: Read-only mapping of member name to child node
    """

    members: Mapping[str, JsonNode]

    kind = NodeKind.OBJECT

    def get(self, name: str) -> JsonNode | None:
        """Return the member called ``name``, or None."""
        return self.members.get(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    @staticmethod
    def guard(node: object) -> TypeIs[JsonObject]:
        """Type guard for JsonObject."""
        return isinstance(node, JsonObject)


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Array node.

    Attributes:
        items: Child nodes in order
    """

    items: tuple[JsonNode, ...]

    kind = NodeKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class JsonString:
    """String leaf."""

    value: str

    kind = NodeKind.STRING


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """Number leaf.

    Attributes:
        literal: Number exactly as written in the source ("42", "1.50", "1e3")
    """

    literal: str

    kind = NodeKind.NUMBER

    @property
    def value(self) -> int | float:
        """Numeric value (int when the literal is integral)."""
        try:
            return int(self.literal)
        except ValueError:
            return float(self.literal)


@dataclass(frozen=True, slots=True)
class JsonBoolean:
    """Boolean leaf."""

    value: bool

    kind = NodeKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class JsonNull:
    """Null leaf."""

    kind = NodeKind.NULL


type JsonNode = JsonObject | JsonArray | JsonString | JsonNumber | JsonBoolean | JsonNull


class _NumberLiteral(str):
    """Marker for number text handed back by the json module's parse hooks."""

    __slots__ = ()


def child(node: JsonNode, segment: str) -> JsonNode | None:
    """Look up one level below ``node``.

    Objects are addressed by member name, arrays by a non-negative decimal
    index. Anything else (unknown member, bad index, scalar parent) yields
    None rather than raising.

    Args:
        node: Parent node
        segment: Member name or array index

    Returns:
        Child node, or None if there is no such child
    """
    match node:
        case JsonObject(members=members):
            return members.get(segment)
        case JsonArray(items=items) if segment.isascii() and segment.isdigit():
            index = int(segment)
            return items[index] if index < len(items) else None
        case _:
            return None


def parse_document(data: bytes) -> JsonObject:
    """Parse raw resource file contents into a document tree.

    Encoding is detected from the bytes: UTF-8, UTF-16 and UTF-32 byte-order
    marks are honoured, and BOM-less input is treated as UTF-8.

    Args:
        data: File contents

    Returns:
        Root object node

    Raises:
        ValueError: If the data is not valid JSON, cannot be decoded, or the
            root value is not an object
        DepthLimitExceededError: If the document nests too deeply
    """
    raw = json.loads(
        data,
        parse_int=_NumberLiteral,
        parse_float=_NumberLiteral,
        parse_constant=_NumberLiteral,
    )
    if not isinstance(raw, dict):
        msg = f"Resource document root must be a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)  # noqa: TRY004 - parse failure, not a caller type error
    return cast(JsonObject, from_python(raw))


def from_python(value: object, guard: DepthGuard | None = None) -> JsonNode:
    """Build a node tree from json-module output (dict/list/str/number/bool/None).

    Args:
        value: Decoded JSON value
        guard: Depth guard shared by the recursive calls

    Returns:
        Equivalent node tree

    Raises:
        DepthLimitExceededError: If nesting exceeds the guard's limit
        TypeError: If value contains a non-JSON type
    """
    if guard is None:
        guard = DepthGuard()
    match value:
        case dict():
            with guard:
                members = {str(k): from_python(v, guard) for k, v in value.items()}
            return JsonObject(MappingProxyType(members))
        case list() | tuple():
            with guard:
                items = tuple(from_python(v, guard) for v in value)
            return JsonArray(items)
        case _NumberLiteral():
            return JsonNumber(str(value))
        case str():
            return JsonString(value)
        # bool before int: bool is an int subclass
        case bool():
            return JsonBoolean(value)
        case int() | float():
            return JsonNumber(repr(value))
        case None:
            return JsonNull()
        case _:
            msg = f"Unsupported JSON value type: {type(value).__name__}"
            raise TypeError(msg)


def to_python(node: JsonNode) -> object:
    """Convert a node tree back to plain Python values."""
    match node:
        case JsonObject(members=members):
            return {name: to_python(member) for name, member in members.items()}
        case JsonArray(items=items):
            return [to_python(item) for item in items]
        case JsonString(value=value) | JsonBoolean(value=value):
            return value
        case JsonNumber():
            return node.value
        case JsonNull():
            return None


def to_display_string(node: JsonNode) -> str:
    """Render a found node as the string handed to callers.

    Strings render as-is, numbers as their source literal, booleans as
    ``true``/``false`` and null as the empty string. Objects and arrays render
    as indented JSON.

    This keeps the JSON spelling of scalars: a boolean is ``true`` rather than
    ``True`` and ``1.50`` stays ``1.50`` instead of being normalized to ``1.5``.
    """
    match node:
        case JsonString(value=value):
            return value
        case JsonNumber(literal=literal):
            return literal
        case JsonBoolean(value=value):
            return "true" if value else "false"
        case JsonNull():
            return ""
        case JsonObject() | JsonArray():
            return json.dumps(to_python(node), indent=2, ensure_ascii=False)
