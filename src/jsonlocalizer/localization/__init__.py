"""Localization package for JsonStringLocalizer.

Provides the localization stack: type aliases, resource loading
infrastructure, the culture-fallback localizer, and its factory.

Submodules:
    types     - PEP 695 type aliases (ResourceKey, CultureName, BaseName)
    loading   - ResourceLoader protocol, JsonResourceLoader,
                ResourceLoadResult, LoadSummary
    localizer - JsonStringLocalizer, LocalizedString, FallbackInfo
    factory   - JsonStringLocalizerFactory, LocalizerIdentity

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from jsonlocalizer.enums import LoadStatus
from jsonlocalizer.localization.loading import (
    JsonResourceLoader,
    LoadSummary,
    ResourceLoader,
    ResourceLoadResult,
)
from jsonlocalizer.localization.localizer import (
    FallbackInfo,
    JsonStringLocalizer,
    LocalizedString,
    trim_prefix,
)
from jsonlocalizer.localization.factory import (
    JsonStringLocalizerFactory,
    LocalizerIdentity,
    strip_view_extension,
)
from jsonlocalizer.localization.types import BaseName, CultureName, ResourceKey

__all__ = [
    # Localizer and factory
    "JsonStringLocalizer",
    "JsonStringLocalizerFactory",
    "LocalizerIdentity",
    "LocalizedString",
    # Loader protocol and implementation
    "ResourceLoader",
    "JsonResourceLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Fallback observability
    "FallbackInfo",
    # Helpers
    "strip_view_extension",
    "trim_prefix",
    # Type aliases for user code type annotations
    "BaseName",
    "CultureName",
    "ResourceKey",
]
