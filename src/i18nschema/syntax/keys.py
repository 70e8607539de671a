"""Interned translation keys and key paths.

Key:
    Immutable, content-compared identifier. Key.intern() returns one shared
    instance per name, so the same name used as a map key in every locale
    and as a path segment in every diagnostic is a single object.

KeyPath:
    Mutable stack of keys (optionally prefixed by a namespace) tracking the
    current position during recursive descent. Used only to attach
    locations to diagnostics.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import ClassVar

__all__ = ["Key", "KeyPath"]


@dataclass(frozen=True, slots=True, weakref_slot=True)
class Key:
    """Translation key, locale identifier or namespace identifier.

    Equality and hashing are by name only. Prefer Key.intern() over direct
    construction so that equal names share one instance.

    Attributes:
        name: The key text
    """

    name: str

    _interned: ClassVar[weakref.WeakValueDictionary[str, Key]] = weakref.WeakValueDictionary()

    @classmethod
    def intern(cls, name: str) -> Key:
        """Return the shared Key instance for a name.

        Args:
            name: Key text

        Returns:
            The Key instance every caller interning this name receives
            while any reference to it is alive
        """
        key = cls._interned.get(name)
        if key is None:
            key = cls(name)
            cls._interned[name] = key
        return key

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True)
class KeyPath:
    """Current position in a translation tree.

    The namespace segment is fixed at construction. Key segments follow a
    strict stack discipline: pushed before descending into a child, popped
    on return, so at any diagnostic emission point the path reflects the
    current nesting exactly. Use descend() to get the pop on every exit path.

    Attributes:
        namespace: Namespace of the tree, None in flat mode
        path: Key segments from the root to the current entry

    Example:
        >>> path = KeyPath(Key.intern("common"))
        >>> with path.descend(Key.intern("menu")):
        ...     path.push_key(Key.intern("open"))
        ...     str(path)
        'common::menu.open'
    """

    namespace: Key | None = None
    path: list[Key] = field(default_factory=list)

    def push_key(self, key: Key) -> None:
        """Append a key segment."""
        self.path.append(key)

    def pop_key(self) -> Key | None:
        """Remove and return the last key segment (None if empty)."""
        if self.path:
            return self.path.pop()
        return None

    @contextmanager
    def descend(self, key: Key) -> Iterator[KeyPath]:
        """Push a key for the duration of a with-block.

        The segment is popped on normal exit and when an exception escapes,
        restoring the path to its pre-call value.

        Args:
            key: Segment to push

        Yields:
            This KeyPath, extended by key
        """
        depth = len(self.path)
        self.path.append(key)
        try:
            yield self
        finally:
            del self.path[depth:]

    def copy(self) -> KeyPath:
        """Snapshot of the current path (segments are shared Key instances)."""
        return KeyPath(self.namespace, list(self.path))

    @property
    def depth(self) -> int:
        """Number of key segments."""
        return len(self.path)

    def __str__(self) -> str:
        keys = ".".join(key.name for key in self.path)
        if self.namespace is None:
            return keys
        return f"{self.namespace.name}::{keys}"
