"""Shared constants for jsonlocalizer.

Centralizes values used across the document, runtime and localization
packages. Placing them here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Resource layout: file naming and key syntax
- Culture names: neutral culture spelling
- Factory conventions: path joining and view-template extensions
- Input limits: size and nesting bounds for resource documents

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource layout
    "KEY_SEPARATOR",
    "RESOURCE_FILE_EXTENSION",
    # Culture names
    "NEUTRAL_CULTURE",
    "ROOT_CULTURE_ALIAS",
    "DEFAULT_CULTURE",
    # Factory conventions
    "PATH_JOIN_CHAR",
    "KNOWN_VIEW_EXTENSIONS",
    # Input limits
    "MAX_DEPTH",
    "MAX_RESOURCE_SIZE",
]

# ============================================================================
# RESOURCE LAYOUT
# ============================================================================

# Separator between segments of a compound lookup key ("errors:required").
KEY_SEPARATOR: str = ":"

# Every per-culture document is named "<culture>.json"; the neutral culture
# document is therefore literally ".json".
RESOURCE_FILE_EXTENSION: str = ".json"

# ============================================================================
# CULTURE NAMES
# ============================================================================

# Neutral (invariant) culture. Fixed point of parent_culture().
NEUTRAL_CULTURE: str = ""

# Display name some hosts use for the invariant culture; normalized to "".
ROOT_CULTURE_ALIAS: str = "."

# Returned by get_system_culture() when nothing can be detected.
DEFAULT_CULTURE: str = "en-US"

# ============================================================================
# FACTORY CONVENTIONS
# ============================================================================

# Join character for resource base names ("MyApp.Resources.Shared").
# Both "/" and "\\" in the configured resources path are rewritten to it.
PATH_JOIN_CHAR: str = "."

# View-template suffixes stripped from a location before computing the
# localizer base name. First exact suffix match wins.
KNOWN_VIEW_EXTENSIONS: tuple[str, ...] = (".cshtml", ".html", ".jinja", ".jinja2", ".j2")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum nesting of objects/arrays in a resource document.
# Real resource files rarely exceed 5 levels; 100 is clearly malformed.
MAX_DEPTH: int = 100

# Maximum resource file size in bytes (10 MB).
# Larger files are reported as load errors instead of being parsed.
MAX_RESOURCE_SIZE: int = 10 * 1024 * 1024
