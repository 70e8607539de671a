"""Immutable cursor for the translation string lexer.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

from i18nschema.core.identifier_validation import is_identifier_char, is_identifier_start

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hi {name}", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance(3).current
        '{'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Source text from the current position up to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_spaces(self) -> "Cursor":
        """Skip spaces and tabs."""
        pos = self.pos
        while pos < len(self.source) and self.source[pos] in " \t":
            pos += 1
        return Cursor(self.source, pos)

    def skip_until(self, stop_chars: str) -> "Cursor":
        """Advance to the next character in stop_chars (or EOF)."""
        pos = self.pos
        while pos < len(self.source) and self.source[pos] not in stop_chars:
            pos += 1
        return Cursor(self.source, pos)

    def read_identifier(self) -> tuple[str, "Cursor"] | None:
        """Read an identifier starting at the current position.

        Returns:
            (identifier, cursor after it), or None if no identifier starts here
        """
        if self.is_eof or not is_identifier_start(self.current):
            return None
        pos = self.pos + 1
        while pos < len(self.source) and is_identifier_char(self.source[pos]):
            pos += 1
        return self.source[self.pos : pos], Cursor(self.source, pos)
