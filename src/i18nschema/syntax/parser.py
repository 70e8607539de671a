"""Translation string lexer.

Turns one translation string into a value AST:

    {name}            Variable (spaces inside the braces are allowed)
    <tag>...</tag>    Component wrapping the parsed content, tags nest
    {{ and }}         literal braces

Anything else, including braces that do not form a placeholder, tags that
are never closed and closing tags that were never opened, is literal text.
The lexer never fails on malformed input. With a DepthGuard it rejects tags
nested past the guard's remaining depth.

The result is not reduced; schema construction canonicalizes it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18nschema.core.identifier_validation import is_valid_key

from .ast import Bloc, Component, Literal, ParsedValue, Variable
from .cursor import Cursor
from .keys import Key

if TYPE_CHECKING:
    from i18nschema.core.depth_guard import DepthGuard

__all__ = ["parse_text"]

_SPECIAL_CHARS = "{}<"


@dataclass(slots=True)
class _Frame:
    """Open component tag (or the root, tag None)."""

    tag: Key | None
    opening: str
    values: list[ParsedValue] = field(default_factory=list)


def parse_text(text: str, depth_guard: DepthGuard | None = None) -> ParsedValue:
    """Lex a translation string.

    Args:
        text: Raw translation string
        depth_guard: Guard of the enclosing document; open tags count as
            levels below its current depth

    Returns:
        Bloc of the lexed parts

    Raises:
        DepthLimitExceededError: If tags nest past the guard's limit

    Example:
        >>> parse_text("hi {name}")
        Bloc(values=(Literal(text='hi '), Variable(key=Key(name='name'))))
    """
    stack: list[_Frame] = [_Frame(None, "")]
    pending: list[str] = []

    def flush() -> None:
        if pending:
            stack[-1].values.append(Literal("".join(pending)))
            pending.clear()

    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        ch = cursor.current
        match ch:
            case "{":
                if cursor.peek(1) == "{":
                    pending.append("{")
                    cursor = cursor.advance(2)
                    continue
                placeholder = _scan_placeholder(cursor)
                if placeholder is None:
                    pending.append("{")
                    cursor = cursor.advance()
                    continue
                name, cursor = placeholder
                flush()
                stack[-1].values.append(Variable(Key.intern(name)))
            case "}":
                pending.append("}")
                cursor = cursor.advance(2 if cursor.peek(1) == "}" else 1)
            case "<":
                tag = _scan_tag(cursor)
                if tag is None:
                    pending.append("<")
                    cursor = cursor.advance()
                    continue
                name, closing, after = tag
                if not closing:
                    if depth_guard is not None:
                        depth_guard.check(len(stack))
                    flush()
                    stack.append(_Frame(Key.intern(name), cursor.slice_to(after.pos)))
                elif (index := _find_open(stack, name)) is None:
                    pending.append(cursor.slice_to(after.pos))
                else:
                    flush()
                    while len(stack) - 1 > index:
                        _unwind(stack)
                    frame = stack.pop()
                    assert frame.tag is not None  # noqa: S101 - root never matches
                    stack[-1].values.append(Component(frame.tag, Bloc(tuple(frame.values))))
                cursor = after
            case _:
                end = cursor.skip_until(_SPECIAL_CHARS)
                pending.append(cursor.slice_to(end.pos))
                cursor = end

    flush()
    while len(stack) > 1:
        _unwind(stack)
    return Bloc(tuple(stack[0].values))


def _scan_placeholder(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Scan '{ name }' at cursor (positioned on '{')."""
    inner = cursor.advance().skip_spaces()
    ident = inner.read_identifier()
    if ident is None:
        return None
    name, after = ident
    after = after.skip_spaces()
    if after.is_eof or after.current != "}" or not is_valid_key(name):
        return None
    return name, after.advance()


def _scan_tag(cursor: Cursor) -> tuple[str, bool, Cursor] | None:
    """Scan '<name>' or '</name>' at cursor (positioned on '<')."""
    after = cursor.advance()
    closing = after.peek() == "/"
    if closing:
        after = after.advance()
    ident = after.read_identifier()
    if ident is None:
        return None
    name, after = ident
    if after.is_eof or after.current != ">" or not is_valid_key(name):
        return None
    return name, closing, after.advance()


def _find_open(stack: list[_Frame], name: str) -> int | None:
    """Index of the innermost open frame for tag name (never the root)."""
    for index in range(len(stack) - 1, 0, -1):
        tag = stack[index].tag
        if tag is not None and tag.name == name:
            return index
    return None


def _unwind(stack: list[_Frame]) -> None:
    """Turn the innermost open frame back into literal text in its parent."""
    frame = stack.pop()
    parent = stack[-1].values
    parent.append(Literal(frame.opening))
    parent.extend(frame.values)
