"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating localizer call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BaseName",
    "CultureName",
    "ResourceKey",
]

type ResourceKey = str
"""Compound lookup key (e.g., 'title', 'errors:required')."""

type CultureName = str
"""Culture name (e.g., 'en-US', 'zh-Hant-TW'; '' for the neutral culture)."""

type BaseName = str
"""Dotted resource base name (e.g., 'MyApp.Resources.Shared')."""
