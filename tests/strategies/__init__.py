"""Hypothesis strategies for jsonlocalizer property-based testing.

Usage:
    from tests.strategies import culture_names, resource_documents
"""

from .localization import culture_names, key_segments, leaf_values, resource_documents

__all__ = [
    "culture_names",
    "key_segments",
    "leaf_values",
    "resource_documents",
]
