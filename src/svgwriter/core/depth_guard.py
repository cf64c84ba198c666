"""Depth tracking for tree serialization.

Tracks the current nesting level while the serializer walks a document tree.
The level drives two things:
- Pretty-print indentation (one indent unit per ancestor container)
- Recursion protection against deeply nested or generated trees

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from svgwriter.constants import MAX_DEPTH
from svgwriter.diagnostics import SerializationDepthError
from svgwriter.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# walk() -> _render_node() -> _render_element() per nesting level.
_FRAMES_PER_LEVEL: int = 3

# Caller stack plus the leaf renderers below the deepest element.
_RESERVE_FRAMES: int = 150


@dataclass(slots=True)
class DepthGuard:
    """Tracks and limits nesting depth.

    Usage in serialization:
        guard = DepthGuard()
        with guard.descend("svg"):
            body, info = self.walk(element, guard)

    Mutability Note:
        Intentionally mutable (not frozen=True). current_depth and trail
        change on every descend() and are restored when it exits.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each serialize() call creates its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current nesting depth
        trail: Labels of the containers currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)
    trail: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    @contextmanager
    def descend(self, label: str = "") -> Iterator[DepthGuard]:
        """Enter one nesting level labelled with the container's name.

        Args:
            label: Element name of the container being entered ("" for a document)

        Raises:
            SerializationDepthError: If entering would exceed max_depth
        """
        self.check(label)
        self.current_depth += 1
        self.trail.append(label)
        try:
            yield self
        finally:
            self.current_depth -= 1
            self.trail.pop()

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    @property
    def path(self) -> str:
        """Element path of the containers entered so far, e.g. ``svg > g``."""
        return " > ".join(label for label in self.trail if label)

    def check(self, label: str = "") -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            SerializationDepthError: If depth limit reached
        """
        if self.current_depth >= self.max_depth:
            path = " > ".join(part for part in (self.path, label) if part)
            raise SerializationDepthError(
                ErrorTemplate.max_depth_exceeded(self.max_depth, path)
            )

    def indent(self, unit: str, pretty: bool) -> str:
        """Leading whitespace for a node at the current depth.

        Children of the top-level container sit at depth 1 and get no
        indent; each deeper level adds one unit.

        Args:
            unit: Indent unit (e.g. four spaces)
            pretty: Whether pretty printing is active

        Returns:
            ``unit * (depth - 1)`` when pretty, otherwise ""
        """
        if not pretty or self.current_depth <= 1:
            return ""
        return unit * (self.current_depth - 1)


def depth_clamp(requested_depth: int, reserve_frames: int = _RESERVE_FRAMES) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level costs a few interpreter frames (walk, element render),
    so the safe depth is well below sys.getrecursionlimit(). Logs a warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 150)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(600)
        >>> depth_clamp(100)  # OK, within limit
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped to (600 - 150) // 3
        150
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth

