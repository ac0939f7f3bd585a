"""Compound key resolution within a resource document.

A compound key such as ``"errors:email:invalid"`` addresses a path through
the document: the first segment selects a top-level member and each further
segment descends one level.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator

from jsonlocalizer.constants import KEY_SEPARATOR
from jsonlocalizer.document.nodes import JsonArray, JsonNode, JsonObject, child

__all__ = ["iter_leaves", "join_key", "resolve_key", "split_key"]


def split_key(name: str, separator: str = KEY_SEPARATOR) -> tuple[str, ...]:
    """Split a compound key into its path segments.

    Always returns at least one segment; empty segments are kept so that
    ``"a::b"`` addresses a member literally named "".

    Example:
        >>> split_key("errors:required")
        ('errors', 'required')
        >>> split_key("title")
        ('title',)
    """
    return tuple(name.split(separator))


def join_key(segments: tuple[str, ...], separator: str = KEY_SEPARATOR) -> str:
    """Inverse of split_key."""
    return separator.join(segments)


def resolve_key(
    document: JsonObject, name: str, separator: str = KEY_SEPARATOR
) -> JsonNode | None:
    """Walk ``document`` along the segments of ``name``.

    A missing member at any level, an invalid array index, or an attempt to
    descend into a scalar short-circuits to None. The final node is returned
    whatever its kind; rendering object and array nodes is the caller's job.

    Args:
        document: Root of a loaded resource document
        name: Compound lookup key
        separator: Segment separator (default ":")

    Returns:
        Node at the end of the path, or None if the path does not exist

    Example:
        >>> doc = parse_document(b'{"a": {"b": "value"}}')
        >>> resolve_key(doc, "a:b")
        JsonString(value='value')
        >>> resolve_key(doc, "a:c") is None
        True
    """
    node: JsonNode | None = document
    for segment in split_key(name, separator):
        if node is None:
            return None
        node = child(node, segment)
    return node


def iter_leaves(
    document: JsonObject, separator: str = KEY_SEPARATOR
) -> Iterator[tuple[str, JsonNode]]:
    """Yield ``(compound key, leaf)`` for every scalar in document order.

    Array elements are addressed by their index, so every yielded key
    resolves back to its leaf through resolve_key(). Empty objects and
    arrays contribute nothing.
    """
    stack: list[tuple[tuple[str, ...], JsonNode]] = [
        ((name,), member) for name, member in reversed(document.members.items())
    ]
    while stack:
        path, node = stack.pop()
        match node:
            case JsonObject(members=members):
                stack.extend(
                    ((*path, name), member) for name, member in reversed(members.items())
                )
            case JsonArray(items=items):
                stack.extend(
                    ((*path, str(index)), item)
                    for index, item in reversed(list(enumerate(items)))
                )
            case _:
                yield join_key(path, separator), node
