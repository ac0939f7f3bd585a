"""Resource loading infrastructure for JsonStringLocalizer.

Provides the protocol for per-culture document loaders, a filesystem
implementation, and result/summary data structures for tracking load
attempts.

Components:
    ResourceLoader - Protocol for loading one culture's document (structural typing)
    JsonResourceLoader - Disk-based loader for "<culture>.json" files
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of load results

A loader never raises for an ordinary missing or broken file. Absence and
failure are both reported through ResourceLoadResult so that a corrupt
translation degrades to "missing translation" instead of failing the caller.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from jsonlocalizer.constants import MAX_RESOURCE_SIZE, RESOURCE_FILE_EXTENSION
from jsonlocalizer.document.nodes import JsonObject, parse_document
from jsonlocalizer.enums import LoadStatus
from jsonlocalizer.localization.types import CultureName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loader
    "JsonResourceLoader",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading the resource document for one culture.

    Attributes:
        culture: Culture suffix the load was attempted for ("" = neutral)
        status: Load status (success, not_found, error)
        document: Parsed document if status is SUCCESS, None otherwise
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to the resource file
    """

    culture: CultureName
    status: LoadStatus
    document: JsonObject | None = None
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if the document loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if no document exists (expected for most cultures)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the document exists but failed to load."""
        return self.status == LoadStatus.ERROR


class ResourceLoader(Protocol):
    """Protocol for loading the resource document of one culture.

    A loader is bound to one resource location; the culture suffix is the
    only per-call input. This is a Protocol (structural typing) rather than
    an ABC so tests and hosts can supply their own loaders.

    Example:
        >>> class InMemoryLoader:
        ...     def __init__(self, documents: dict[str, bytes]) -> None:
        ...         self._documents = documents
        ...     def load(self, culture: str) -> ResourceLoadResult:
        ...         data = self._documents.get(culture)
        ...         if data is None:
        ...             return ResourceLoadResult(culture, LoadStatus.NOT_FOUND)
        ...         return ResourceLoadResult(
        ...             culture, LoadStatus.SUCCESS, document=parse_document(data)
        ...         )
        ...     def describe_path(self, culture: str) -> str:
        ...         return f"memory:{culture}"
    """

    def load(self, culture: CultureName) -> ResourceLoadResult:
        """Load the document for ``culture``.

        Args:
            culture: Normalized culture suffix ("" for the neutral culture)

        Returns:
            Load result; never raises for missing or malformed resources
        """
        ...

    def describe_path(self, culture: CultureName) -> str:
        """Return a human-readable location for diagnostics."""
        ...


@dataclass(frozen=True, slots=True)
class JsonResourceLoader:
    """File system loader for per-culture JSON documents.

    Documents are named ``<culture>.json`` inside ``resource_dir``; the
    neutral culture's document is therefore the file ``.json``.

    Security:
        Culture suffixes containing path separators or ".." are rejected
        with ValueError, so a culture name can never address a file outside
        ``resource_dir``.

    Example:
        >>> loader = JsonResourceLoader(Path("Resources"))
        >>> loader.describe_path("en-US")
        'Resources/en-US.json'

    Attributes:
        resource_dir: Directory holding the culture documents
        max_size: Files larger than this many bytes are reported as errors
    """

    resource_dir: Path
    max_size: int = MAX_RESOURCE_SIZE

    def __post_init__(self) -> None:
        """Coerce resource_dir to Path and validate max_size.

        Raises:
            ValueError: If max_size is not positive
        """
        object.__setattr__(self, "resource_dir", Path(self.resource_dir))
        if self.max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)

    @staticmethod
    def _validate_culture(culture: CultureName) -> None:
        """Reject culture suffixes that would escape the resource directory.

        Raises:
            ValueError: If culture contains unsafe path components
        """
        if ".." in culture:
            msg = f"Path traversal sequences not allowed in culture: '{culture}'"
            raise ValueError(msg)
        if "/" in culture or "\\" in culture:
            msg = f"Path separators not allowed in culture: '{culture}'"
            raise ValueError(msg)

    def resource_path(self, culture: CultureName) -> Path:
        """Return the path of the document for ``culture``."""
        self._validate_culture(culture)
        return self.resource_dir / f"{culture}{RESOURCE_FILE_EXTENSION}"

    def describe_path(self, culture: CultureName) -> str:
        """Return the document path as a string."""
        return self.resource_path(culture).as_posix()

    def load(self, culture: CultureName) -> ResourceLoadResult:
        """Locate, read and parse the document for ``culture``.

        Args:
            culture: Normalized culture suffix ("" for the neutral culture)

        Returns:
            ResourceLoadResult with status SUCCESS, NOT_FOUND or ERROR

        Raises:
            ValueError: If culture contains path traversal sequences
        """
        path = self.resource_path(culture)
        source_path = path.as_posix()
        logger.debug("Attempt to get resource object for culture %r at %s", culture, source_path)

        if not path.is_file():
            logger.debug("Resource file location %s does not exist", source_path)
            logger.debug("No resource file found for suffix %r", culture)
            return ResourceLoadResult(
                culture=culture, status=LoadStatus.NOT_FOUND, source_path=source_path
            )
        logger.info("Resource file location %s found", source_path)

        try:
            document = parse_document(self._read(path))
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers JSON syntax, decoding, non-object roots,
            # oversize files and DepthLimitExceededError
            logger.error(
                "Error occurred attempting to read JSON resource file %s: %s", source_path, e
            )
            return ResourceLoadResult(
                culture=culture, status=LoadStatus.ERROR, error=e, source_path=source_path
            )

        return ResourceLoadResult(
            culture=culture,
            status=LoadStatus.SUCCESS,
            document=document,
            source_path=source_path,
        )

    def _read(self, path: Path) -> bytes:
        """Read the whole file sequentially, enforcing the size limit."""
        with path.open("rb") as stream:
            data = stream.read(self.max_size + 1)
        if len(data) > self.max_size:
            msg = f"Resource file exceeds maximum size of {self.max_size} bytes"
            raise ValueError(msg)
        return data


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of resource load results.

    Attributes:
        results: Individual load results (immutable tuple)

    Example:
        >>> summary = localizer.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of cultures without a document."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any document failed to load."""
        return self.errors > 0

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where no document exists."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_culture(self, culture: CultureName) -> ResourceLoadResult | None:
        """Get the result for one culture, if it has been loaded."""
        for result in self.results:
            if result.culture == culture:
                return result
        return None
