"""Unified depth limiting for recursion protection.

Provides reusable depth tracking to prevent stack overflow from:
- Deeply nested maps in locale files during seeded decoding
- Deeply nested component tags in translation strings, counted on top of
  the map depth of the string

Schema construction, reduction and merge walk trees that decoding already
bounded.

Uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from i18nschema.constants import MAX_DEPTH
from i18nschema.diagnostics import I18nSchemaError
from i18nschema.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(I18nSchemaError):
    """Raised when a translation tree nests deeper than the limit.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Unintended deep nesting in a locale file
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in decoding:
        guard = DepthGuard()
        with guard:
            value = self._decode_map(nested, ...)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def check(self, nested: int = 0) -> None:
        """Explicitly check depth and raise if exceeded.

        Args:
            nested: Levels open below the current one that did not enter
                the guard (component tags inside a string)

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.current_depth + nested >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level costs several stack frames (decode map, decode value,
    the guard itself), so the limit is compared against a third of the
    remaining recursion budget.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // 3
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
