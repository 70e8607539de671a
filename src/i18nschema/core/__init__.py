"""Core utilities shared across the syntax and localization layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax <- localization

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    is_valid_key: Key grammar check shared by decoding and configuration

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError
from .identifier_validation import is_valid_key

__all__ = ["DepthGuard", "DepthLimitExceededError", "is_valid_key"]
