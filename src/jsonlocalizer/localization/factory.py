"""Factory producing one JsonStringLocalizer per resource base name.

Localizers are memoized for the lifetime of the factory: asking twice for the
same logical resource returns the same instance and therefore the same warm
DocumentCache. There is no eviction.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from jsonlocalizer.config import LocalizerOptions
from jsonlocalizer.constants import KNOWN_VIEW_EXTENSIONS, PATH_JOIN_CHAR
from jsonlocalizer.localization.localizer import FallbackInfo, JsonStringLocalizer
from jsonlocalizer.localization.types import BaseName
from jsonlocalizer.runtime.rwlock import RWLock

__all__ = ["JsonStringLocalizerFactory", "LocalizerIdentity", "strip_view_extension"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocalizerIdentity:
    """Identifies one logical resource family.

    Attributes:
        base_name: Dotted resource base name ("MyApp.Resources.")
        application_name: Application the resources belong to
    """

    base_name: BaseName
    application_name: str


class JsonStringLocalizerFactory:
    """Creates and caches JsonStringLocalizer instances.

    Thread-safe via double-checked locking on an RWLock: cache hits take the
    read lock only; a miss re-checks and constructs under the write lock, so
    exactly one localizer is ever built per identity.

    Example:
        >>> factory = JsonStringLocalizerFactory(
        ...     LocalizerOptions("MyApp", resources_path="Resources")
        ... )
        >>> localizer = factory.create(HomeController)
        >>> localizer is factory.create(AccountController)
        True
    """

    __slots__ = ("_localizers", "_lock", "_on_fallback", "_options")

    def __init__(
        self,
        options: LocalizerOptions,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize factory.

        Args:
            options: Application name, resources path and content root
            on_fallback: Callback passed to every localizer created

        Raises:
            TypeError: If options is not a LocalizerOptions
        """
        if not isinstance(options, LocalizerOptions):
            msg = f"options must be LocalizerOptions, got {type(options).__name__}"
            raise TypeError(msg)
        self._options = options
        self._on_fallback = on_fallback
        self._localizers: dict[LocalizerIdentity, JsonStringLocalizer] = {}
        self._lock = RWLock()

        logger.debug(
            "Created %s with application name %r and resources relative path %r",
            type(self).__name__,
            options.application_name,
            options.relative_path_prefix,
        )

    @property
    def options(self) -> LocalizerOptions:
        """Factory configuration."""
        return self._options

    @property
    def application_name(self) -> str:
        """Application name from the options."""
        return self._options.application_name

    @property
    def resources_relative_path(self) -> str:
        """Resources path in base-name form ("Resources.Shared.")."""
        return self._options.relative_path_prefix

    def create(self, resource_source: type) -> JsonStringLocalizer:
        """Return the localizer for the application's shared resources.

        Every type maps to the same base name, application name plus the
        resources path; ``resource_source`` only identifies the requester.

        Args:
            resource_source: Type requesting a localizer

        Raises:
            TypeError: If resource_source is None
            ValueError: If no resources path is configured
        """
        if resource_source is None:
            msg = "resource_source must not be None"
            raise TypeError(msg)
        logger.debug("Getting localizer for type %r", resource_source)
        if not self.resources_relative_path:
            msg = "resources_path must be configured to create a localizer for a type"
            raise ValueError(msg)
        base_name = self.application_name + PATH_JOIN_CHAR + self.resources_relative_path
        return self._get_or_create(base_name)

    def create_for_location(
        self, base_name: BaseName, location: str | None = None
    ) -> JsonStringLocalizer:
        """Return the localizer for an explicit location.

        A known view-template extension at the end of ``location`` is
        stripped before the resource base name is derived.

        Args:
            base_name: Requested base name; must be non-empty
            location: Dotted location; defaults to the application name

        Raises:
            TypeError: If base_name is None
            ValueError: If base_name is empty
        """
        if base_name is None:
            msg = "base_name must not be None"
            raise TypeError(msg)
        if not base_name:
            msg = "base_name must not be empty"
            raise ValueError(msg)
        logger.debug("Getting localizer for base name %r and location %r", base_name, location)

        if location is None:
            location = self.application_name
        location = strip_view_extension(location)
        resource_base_name = location + PATH_JOIN_CHAR + self.resources_relative_path
        logger.debug("Localizer base name: %s", resource_base_name)
        return self._get_or_create(resource_base_name)

    def _get_or_create(self, base_name: BaseName) -> JsonStringLocalizer:
        identity = LocalizerIdentity(base_name=base_name, application_name=self.application_name)

        with self._lock.read():
            localizer = self._localizers.get(identity)
            if localizer is not None:
                return localizer

        with self._lock.write():
            localizer = self._localizers.get(identity)
            if localizer is None:
                localizer = JsonStringLocalizer(
                    base_name,
                    self.application_name,
                    content_root=self._options.content_root,
                    on_fallback=self._on_fallback,
                )
                self._localizers[identity] = localizer
            return localizer

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._localizers)

    def __repr__(self) -> str:
        return (
            f"JsonStringLocalizerFactory(application_name={self.application_name!r}, "
            f"localizers={len(self)})"
        )


def strip_view_extension(name: str) -> str:
    """Remove the first known view-template extension ``name`` ends with.

    Example:
        >>> strip_view_extension("MyApp.Views.Home.Index.cshtml")
        'MyApp.Views.Home.Index'
        >>> strip_view_extension("MyApp.Views.Home")
        'MyApp.Views.Home'
    """
    for extension in KNOWN_VIEW_EXTENSIONS:
        if name.endswith(extension):
            return name.removesuffix(extension)
    return name
