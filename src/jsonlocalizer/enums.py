"""Enumerations for jsonlocalizer type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading one per-culture resource document.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Document found and parsed."""

    NOT_FOUND = "not_found"
    """No document exists for the culture (the common case for most cultures)."""

    ERROR = "error"
    """Document exists but could not be read or parsed."""


class NodeKind(StrEnum):
    """Kind of node in a parsed resource document.

    StrEnum provides automatic string conversion: str(NodeKind.OBJECT) == "object"
    """

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


__all__ = [
    "LoadStatus",
    "NodeKind",
]
