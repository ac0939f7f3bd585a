"""Culture name utilities and the culture hierarchy.

Culture names are BCP-47 style ("en-US", "zh-Hant-TW") and double as
resource file names, so every name entering the system is normalized at the
boundary: POSIX underscores become hyphens, component casing is made
canonical, and the root alias "." becomes the neutral culture "".

The hierarchy is a pure function: parent_culture() drops the most specific
component, honouring CLDR parent exceptions ("es-MX" -> "es-419"). The
neutral culture is its own parent, which is the fixed point every fallback
walk terminates on.

Ambient culture:
    Lookups in the core always take an explicit culture. Host integrations
    that want "the culture of the current request" set it with use_culture();
    accessor adapters read it through get_current_culture(). The value lives
    in a ContextVar, so threads and asyncio tasks each see their own.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from babel.core import get_global, parse_locale

from jsonlocalizer.constants import DEFAULT_CULTURE, NEUTRAL_CULTURE, ROOT_CULTURE_ALIAS
from jsonlocalizer.errors import InvalidCultureError

__all__ = [
    "culture_chain",
    "get_current_culture",
    "get_system_culture",
    "normalize_culture",
    "parent_culture",
    "use_culture",
]

# CLDR marks cultures whose parent is the root with this name.
_CLDR_ROOT = "root"

_current_culture: ContextVar[str | None] = ContextVar("jsonlocalizer_culture", default=None)


@functools.lru_cache(maxsize=512)
def _split_culture(culture: str) -> tuple[str, str | None, str | None, str | None]:
    """Parse a culture name into (language, script, territory, variant).

    Raises:
        InvalidCultureError: If the name is not a well-formed locale identifier
    """
    if "/" in culture or "\\" in culture or ".." in culture:
        raise InvalidCultureError(culture, "path separators are not allowed")
    if culture.strip() != culture:
        raise InvalidCultureError(culture, "leading/trailing whitespace")
    try:
        parts = parse_locale(culture.replace("_", "-"), sep="-")
    except ValueError as e:
        raise InvalidCultureError(culture, str(e)) from e
    language, territory, script, variant = parts[:4]
    return language, script, territory, variant


def _join_culture(*components: str | None) -> str:
    return "-".join(c for c in components if c)


@functools.cache
def _parent_exceptions() -> dict[str, str]:
    # Lazy: Babel loads CLDR global data on first access
    return dict(get_global("parent_exceptions"))


def normalize_culture(culture: str) -> str:
    """Return the canonical spelling of a culture name.

    Accepts BCP-47 ("en-us") and POSIX ("en_US") forms, drops encoding
    suffixes ("en_US.UTF-8"), and maps the root alias "." to "".

    Args:
        culture: Culture name

    Returns:
        Canonical culture name ("en-US"), or "" for the neutral culture

    Raises:
        TypeError: If culture is not a string
        InvalidCultureError: If culture is malformed or unsafe as a file name

    Example:
        >>> normalize_culture("en_us")
        'en-US'
        >>> normalize_culture("zh-hant-tw")
        'zh-Hant-TW'
        >>> normalize_culture(".")
        ''
    """
    if not isinstance(culture, str):
        msg = f"culture must be a str, got {type(culture).__name__}"
        raise TypeError(msg)
    if culture in (NEUTRAL_CULTURE, ROOT_CULTURE_ALIAS):
        return NEUTRAL_CULTURE
    language, script, territory, variant = _split_culture(culture)
    return _join_culture(language, script, territory, variant)


def parent_culture(culture: str) -> str:
    """Return the parent of a culture in the fallback hierarchy.

    The most specific component is dropped first (variant, then territory,
    then script); a bare language falls back to the neutral culture. CLDR
    parent exceptions take precedence. The neutral culture is its own parent.

    Args:
        culture: Culture name (normalized or not)

    Returns:
        Canonical parent culture name

    Example:
        >>> parent_culture("en-US")
        'en'
        >>> parent_culture("en")
        ''
        >>> parent_culture("")
        ''
        >>> parent_culture("es-MX")
        'es-419'
    """
    culture = normalize_culture(culture)
    if culture == NEUTRAL_CULTURE:
        return NEUTRAL_CULTURE

    language, script, territory, variant = _split_culture(culture)
    posix = "_".join(c for c in (language, script, territory, variant) if c)
    exception = _parent_exceptions().get(posix)
    if exception is not None:
        return NEUTRAL_CULTURE if exception == _CLDR_ROOT else normalize_culture(exception)

    if variant:
        return _join_culture(language, script, territory)
    if territory:
        return _join_culture(language, script)
    if script:
        return language
    return NEUTRAL_CULTURE


def culture_chain(culture: str) -> tuple[str, ...]:
    """Return ``culture`` followed by its ancestors, ending at the neutral culture.

    The walk stops once taking the parent no longer changes the culture.

    Example:
        >>> culture_chain("en-US")
        ('en-US', 'en', '')
    """
    current = normalize_culture(culture)
    chain = [current]
    previous = None
    while previous != current:
        previous, current = current, parent_culture(current)
        if previous != current:
            chain.append(current)
    return tuple(chain)


def get_current_culture() -> str:
    """Return the ambient culture for the current context.

    Falls back to the system culture when no culture has been set with
    use_culture().
    """
    culture = _current_culture.get()
    if culture is None:
        return get_system_culture()
    return culture


@contextmanager
def use_culture(culture: str) -> Generator[str]:
    """Set the ambient culture for the duration of a ``with`` block.

    Args:
        culture: Culture name; normalized before it is stored

    Yields:
        The normalized culture name

    Example:
        >>> with use_culture("de_DE"):
        ...     localizer["greeting"]  # resolved against "de-DE"
    """
    normalized = normalize_culture(culture)
    token = _current_culture.set(normalized)
    try:
        yield normalized
    finally:
        _current_culture.reset(token)


def get_system_culture(*, raise_on_failure: bool = False) -> str:
    """Detect the system culture from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and values that are not
    well-formed culture names.

    Args:
        raise_on_failure: If True, raise RuntimeError when no culture can be
            determined. If False (default), return "en-US".

    Returns:
        Normalized culture name

    Raises:
        RuntimeError: If raise_on_failure is True and nothing is detected.
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        candidates.append(system_locale)
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            candidates.append(value)

    for candidate in candidates:
        # Strip encoding suffix (e.g., ".UTF-8")
        candidate = candidate.split(".")[0]
        if candidate in ("", "C", "POSIX"):
            continue
        try:
            return normalize_culture(candidate)
        except InvalidCultureError:
            continue

    if raise_on_failure:
        msg = (
            "Could not determine system culture. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_CULTURE
