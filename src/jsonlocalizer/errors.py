"""Exception hierarchy for jsonlocalizer.

Only programmer errors and construction-time misconfiguration surface as
exceptions. Missing or unreadable resources and unresolved keys are ordinary
outcomes reported through return values and logging.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DepthLimitExceededError",
    "InvalidCultureError",
    "LocalizationError",
]


class LocalizationError(Exception):
    """Base exception for all jsonlocalizer errors."""


class InvalidCultureError(LocalizationError, ValueError):
    """Culture name is syntactically invalid or unsafe as a file name.

    Subclasses ValueError so callers validating arguments generically
    (``except ValueError``) still catch it.

    Attributes:
        culture: The rejected culture name
    """

    def __init__(self, culture: str, reason: str) -> None:
        """Initialize InvalidCultureError.

        Args:
            culture: The rejected culture name
            reason: Human-readable explanation
        """
        super().__init__(f"Invalid culture name {culture!r}: {reason}")
        self.culture = culture


class DepthLimitExceededError(LocalizationError, ValueError):
    """Resource document nests objects/arrays deeper than the allowed limit.

    Raised while building a document tree. The loader treats it like any
    other parse failure: the document is reported as unreadable.
    """
