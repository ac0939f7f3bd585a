"""Culture-fallback string lookup over per-culture JSON documents.

JsonStringLocalizer resolves a compound key against the document of the
requested culture, then against each ancestor culture ("en-US" -> "en" ->
neutral) until a value is found or the hierarchy is exhausted.

Key architectural decisions:
- Lazy per-culture loading: a document is read the first time a lookup
  needs it, and at most once per localizer (see DocumentCache)
- Fail-soft lookups: a missing or broken document and an unknown key are
  normal outcomes; the accessors echo the key and flag it as not found
- Explicit culture in the core: get_localized_string() takes the culture as
  an argument; only the accessor adapters (``[]``, format, get_all_strings)
  consult the bound culture or the ambient culture from use_culture()
- Rebinding shares the cache: with_culture() returns a localizer for the
  same resource location backed by the same DocumentCache

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from jsonlocalizer.constants import KEY_SEPARATOR, PATH_JOIN_CHAR
from jsonlocalizer.culture import (
    culture_chain,
    get_current_culture,
    normalize_culture,
    parent_culture,
)
from jsonlocalizer.document.keys import iter_leaves, resolve_key
from jsonlocalizer.document.nodes import JsonNode, to_display_string
from jsonlocalizer.localization.loading import JsonResourceLoader, LoadSummary, ResourceLoader
from jsonlocalizer.localization.types import BaseName, CultureName, ResourceKey
from jsonlocalizer.runtime.document_cache import DocumentCache

__all__ = ["FallbackInfo", "JsonStringLocalizer", "LocalizedString", "trim_prefix"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocalizedString:
    """Result of a localized string lookup.

    Attributes:
        name: The key that was looked up
        value: Resolved value, or the key itself when not found
        resource_not_found: True when no culture in the chain had the key
        searched_location: Resource location that was searched

    Example:
        >>> result = localizer["greeting"]
        >>> str(result)
        'Hello'
        >>> localizer["missing"].resource_not_found
        True
    """

    name: ResourceKey
    value: str
    resource_not_found: bool = False
    searched_location: str | None = None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a culture fallback event.

    Provided to the on_fallback callback when a key resolves from an
    ancestor of the requested culture.

    Attributes:
        requested_culture: The culture the lookup started from
        resolved_culture: The culture whose document contained the key
        name: The key that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.name} resolved from {info.resolved_culture!r} "
        ...           f"(requested {info.requested_culture!r})")
        >>> localizer = JsonStringLocalizer("App.Resources", "App", on_fallback=log_fallback)
    """

    requested_culture: CultureName
    resolved_culture: CultureName
    name: ResourceKey


def trim_prefix(name: str, prefix: str) -> str:
    """Remove ``prefix`` from the start of ``name`` (ordinal match), if present.

    Raises:
        TypeError: If either argument is None
    """
    if name is None or prefix is None:
        msg = "trim_prefix() arguments must not be None"
        raise TypeError(msg)
    return name.removeprefix(prefix)


def _require_text(value: object, argument: str) -> str:
    """Validate a required, non-empty string argument."""
    if value is None:
        msg = f"{argument} must not be None"
        raise TypeError(msg)
    if not isinstance(value, str):
        msg = f"{argument} must be a str, got {type(value).__name__}"
        raise TypeError(msg)
    if not value:
        msg = f"{argument} must not be empty"
        raise ValueError(msg)
    return value


class JsonStringLocalizer:
    """Localized string lookup with culture fallback.

    The resource location is derived from the base name: the application
    name prefix is trimmed and surrounding dots are stripped. The remaining
    dotted string names one directory under ``content_root``:
    ``"MyApp.Resources.Shared"`` for application ``"MyApp"`` reads
    ``<content_root>/Resources.Shared/<culture>.json``.

    Thread Safety:
        All lookups are safe to call concurrently. Each culture's document is
        loaded at most once per DocumentCache.

    Example:
        >>> localizer = JsonStringLocalizer("MyApp.Resources", "MyApp", culture="en-US")
        >>> localizer["greeting"].value
        'Hello'
        >>> localizer.format("welcome", "Anna").value
        'Welcome, Anna!'

    Attributes:
        base_name: Dotted resource base name
        application_name: Application name trimmed from the base name
        culture: Culture bound to this instance, or None to use the ambient culture
    """

    __slots__ = (
        "_application_name",
        "_base_name",
        "_cache",
        "_content_root",
        "_culture",
        "_on_fallback",
        "_resource_dir",
        "_resource_location",
    )

    def __init__(
        self,
        base_name: BaseName,
        application_name: str,
        *,
        content_root: str | Path | None = None,
        culture: CultureName | None = None,
        resource_loader: ResourceLoader | None = None,
        document_cache: DocumentCache | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize a localizer for one resource location.

        Args:
            base_name: Dotted resource base name (e.g., 'MyApp.Resources')
            application_name: Application name prefix of the base name
            content_root: Directory the resource location is relative to
                (default: current working directory)
            culture: Culture to bind; None resolves the ambient culture per call
            resource_loader: Loader to use instead of a JsonResourceLoader
                for the derived resource directory
            document_cache: Existing cache to share (used by with_culture);
                takes precedence over resource_loader
            on_fallback: Optional callback invoked when a key is resolved
                from an ancestor culture instead of the requested one

        Raises:
            TypeError: If base_name or application_name is None or not a str
            ValueError: If base_name or application_name is empty
            InvalidCultureError: If culture is malformed
        """
        self._base_name = _require_text(base_name, "base_name")
        self._application_name = _require_text(application_name, "application_name")
        self._culture = None if culture is None else normalize_culture(culture)
        self._on_fallback = on_fallback

        self._resource_location = trim_prefix(base_name, application_name).strip(PATH_JOIN_CHAR)
        self._content_root = Path.cwd() if content_root is None else Path(content_root)
        self._resource_dir = (
            self._content_root / self._resource_location
            if self._resource_location
            else self._content_root
        )

        if document_cache is None:
            if resource_loader is None:
                resource_loader = JsonResourceLoader(self._resource_dir)
            document_cache = DocumentCache(resource_loader)
        self._cache = document_cache

        logger.debug("Resource file location base path: %s", self._resource_location)

    # ------------------------------------------------------------------
    # Core lookup
    # ------------------------------------------------------------------

    def _find(
        self, name: ResourceKey, culture: CultureName
    ) -> tuple[JsonNode, CultureName] | None:
        """Walk the culture hierarchy until a document contains ``name``.

        The walk stops at the first culture whose document has the key, or
        once taking the parent no longer changes the culture.
        """
        current = culture
        previous: CultureName | None = None
        while previous != current:
            document = self._cache.get_or_load(current)
            if document is None:
                logger.info(
                    "No resource file found or error occurred for base name %s, "
                    "culture %r and key '%s'",
                    self._base_name,
                    current,
                    name,
                )
            else:
                node = resolve_key(document, name, KEY_SEPARATOR)
                if node is not None:
                    return node, current
            previous, current = current, parent_culture(current)
            if previous != current:
                logger.debug("Switching to parent culture %r for key '%s'.", current, name)
        return None

    def get_localized_string(self, name: ResourceKey, culture: CultureName) -> str | None:
        """Resolve ``name`` for an explicit culture.

        Args:
            name: Compound lookup key (e.g., 'errors:required')
            culture: Culture to start from ("" for the neutral culture)

        Returns:
            Rendered value from the most specific culture that defines the
            key, or None if no culture in the chain does

        Raises:
            TypeError: If name is None or not a str
            ValueError: If name is empty
            InvalidCultureError: If culture is malformed
        """
        _require_text(name, "name")
        requested = normalize_culture(culture)

        found = self._find(name, requested)
        if found is None:
            logger.info(
                "Could not find key '%s' in resource file for base name %s and culture %r",
                name,
                self._base_name,
                requested,
            )
            return None

        node, resolved = found
        if self._on_fallback is not None and resolved != requested:
            self._on_fallback(
                FallbackInfo(requested_culture=requested, resolved_culture=resolved, name=name)
            )
        return to_display_string(node)

    # ------------------------------------------------------------------
    # Accessor surface
    # ------------------------------------------------------------------

    def _effective_culture(self) -> CultureName:
        if self._culture is not None:
            return self._culture
        return get_current_culture()

    def __getitem__(self, name: ResourceKey) -> LocalizedString:
        """Look up ``name`` in the bound (or ambient) culture.

        Returns:
            LocalizedString with the resolved value, or the key itself
            flagged resource_not_found when no culture defines it
        """
        _require_text(name, "name")
        value = self.get_localized_string(name, self._effective_culture())
        return LocalizedString(
            name=name,
            value=name if value is None else value,
            resource_not_found=value is None,
            searched_location=self.searched_location,
        )

    def format(self, name: ResourceKey, *arguments: object) -> LocalizedString:
        """Look up ``name`` and use it as a ``str.format`` template.

        When the key is not found, the key itself is the template, so
        ``format("Hello {0}", "World")`` still yields "Hello World".
        A template that cannot be formatted with the given arguments is
        returned unformatted and logged as an error.

        Example:
            >>> # {"greet": "Hello {0}"}
            >>> localizer.format("greet", "World").value
            'Hello World'
        """
        _require_text(name, "name")
        template = self.get_localized_string(name, self._effective_culture())
        pattern = name if template is None else template
        try:
            value = pattern.format(*arguments)
        except (ValueError, IndexError, KeyError, AttributeError, TypeError) as e:
            logger.error("Could not format value of key '%s' with template %r: %s", name, pattern, e)
            value = pattern
        return LocalizedString(
            name=name,
            value=value,
            resource_not_found=template is None,
            searched_location=self.searched_location,
        )

    def get_all_strings(self, include_parent_cultures: bool = True) -> tuple[LocalizedString, ...]:
        """Enumerate every localized string for the bound (or ambient) culture.

        Each successfully loaded document along the culture chain is
        flattened into compound keys. Results are concatenated most specific
        culture first. A key defined at several levels appears once per
        level; entries are not de-duplicated.

        Args:
            include_parent_cultures: Also enumerate ancestor cultures

        Returns:
            Tuple of LocalizedString in culture order, then document order
        """
        culture = normalize_culture(self._effective_culture())
        cultures = culture_chain(culture) if include_parent_cultures else (culture,)

        strings: list[LocalizedString] = []
        for current in cultures:
            document = self._cache.get_or_load(current)
            if document is None:
                continue
            strings.extend(
                LocalizedString(
                    name=name,
                    value=to_display_string(node),
                    resource_not_found=False,
                    searched_location=self.searched_location,
                )
                for name, node in iter_leaves(document, KEY_SEPARATOR)
            )
        return tuple(strings)

    def with_culture(self, culture: CultureName) -> JsonStringLocalizer:
        """Return a localizer bound to ``culture`` for the same resources.

        The new localizer shares this localizer's DocumentCache, so documents
        already loaded are not read again.

        Raises:
            InvalidCultureError: If culture is malformed
        """
        return JsonStringLocalizer(
            self._base_name,
            self._application_name,
            content_root=self._content_root,
            culture=culture,
            document_cache=self._cache,
            on_fallback=self._on_fallback,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_load_summary(self) -> LoadSummary:
        """Summarize the document loads this localizer's cache has performed."""
        return LoadSummary(results=self._cache.results())

    @property
    def base_name(self) -> BaseName:
        """Dotted resource base name."""
        return self._base_name

    @property
    def application_name(self) -> str:
        """Application name trimmed from the base name."""
        return self._application_name

    @property
    def resource_location(self) -> str:
        """Base name with the application prefix and surrounding dots removed."""
        return self._resource_location

    @property
    def resource_dir(self) -> Path:
        """Directory holding this localizer's culture documents."""
        return self._resource_dir

    @property
    def searched_location(self) -> str:
        """Human-readable location reported on LocalizedString results."""
        return self._resource_dir.as_posix()

    @property
    def culture(self) -> CultureName | None:
        """Bound culture, or None when lookups use the ambient culture."""
        return self._culture

    @property
    def document_cache(self) -> DocumentCache:
        """Cache of parsed documents backing this localizer."""
        return self._cache

    def __repr__(self) -> str:
        return (
            f"JsonStringLocalizer(base_name={self._base_name!r}, "
            f"culture={self._culture!r}, documents={len(self._cache)})"
        )
