"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["RawTree"]

type RawTree = dict[object, object] | list[object] | str | int | float | bool | None
"""Document as produced by the JSON or YAML decoder, before seeded decoding."""
