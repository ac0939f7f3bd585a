"""Nesting limit for building document trees from decoded JSON.

Decoded JSON arrives as nested dicts and lists and is converted to nodes
recursively. A DepthGuard shared by one conversion counts how many
containers are open and refuses to open another once the limit is reached,
so a pathological resource file becomes a load error rather than a
RecursionError somewhere deep in the interpreter.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from jsonlocalizer.constants import MAX_DEPTH
from jsonlocalizer.errors import DepthLimitExceededError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Counts open containers during one document conversion.

    Mutable on purpose: entering the guard increments ``current_depth`` and
    leaving it decrements. One conversion owns one guard, so no locking is
    needed.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> with guard, guard:
        ...     guard.current_depth
        2

    Attributes:
        max_depth: Containers that may be open at once (clamped on creation)
        current_depth: Containers currently open
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Check first: __exit__ is skipped when __enter__ raises
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    def check(self) -> None:
        """Raise DepthLimitExceededError if no further level may be opened."""
        if self.current_depth >= self.max_depth:
            msg = f"Resource document nesting exceeds maximum depth of {self.max_depth}"
            raise DepthLimitExceededError(msg)


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower ``requested_depth`` so it stays below the interpreter recursion limit.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Frames kept free for the callers of the recursion

    Returns:
        ``requested_depth``, or the recursion limit minus ``reserve_frames``
        if that is smaller (a warning is logged in that case)
    """
    ceiling = sys.getrecursionlimit() - reserve_frames
    if requested_depth <= ceiling:
        return requested_depth
    logger.warning(
        "Requested depth %d exceeds Python recursion limit (%d). Clamping to %d.",
        requested_depth,
        sys.getrecursionlimit(),
        ceiling,
    )
    return ceiling
