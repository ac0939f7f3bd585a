"""jsonlocalizer - Culture-aware string localization from JSON resource files.

Looks up localized strings by compound key ("errors:required") in
per-culture JSON documents, falling back along the culture hierarchy
("en-US" -> "en" -> neutral) until a value is found. Each culture's
document is read at most once per localizer, even under concurrent access.

Public API:
    JsonStringLocalizer - Keyed lookup with culture fallback
    JsonStringLocalizerFactory - Creates and caches localizers per resource location
    LocalizerOptions - Application name, resources path and content root
    LocalizedString - Lookup result with not-found flag
    use_culture - Context manager setting the ambient culture

Exceptions:
    LocalizationError - Base exception class
    InvalidCultureError - Malformed culture names
    DepthLimitExceededError - Resource documents nested too deeply

Submodules:
    jsonlocalizer.document - JSON node tree and compound-key resolution
    jsonlocalizer.localization - Loaders, localizer, factory and type aliases
    jsonlocalizer.runtime - DocumentCache and RWLock
    jsonlocalizer.culture - Culture normalization and parent chains
"""

from .config import LocalizerOptions
from .culture import get_current_culture, normalize_culture, parent_culture, use_culture
from .errors import DepthLimitExceededError, InvalidCultureError, LocalizationError
from .localization import (
    FallbackInfo,
    JsonStringLocalizer,
    JsonStringLocalizerFactory,
    LocalizedString,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("jsonlocalizer")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Resource files are decoded as UTF-8; a leading BOM is tolerated
__recommended_encoding__ = "UTF-8"

__all__ = [
    "DepthLimitExceededError",
    "FallbackInfo",
    "InvalidCultureError",
    "JsonStringLocalizer",
    "JsonStringLocalizerFactory",
    "LocalizationError",
    "LocalizedString",
    "LocalizerOptions",
    "__recommended_encoding__",
    "__version__",
    "get_current_culture",
    "normalize_culture",
    "parent_culture",
    "use_culture",
]
