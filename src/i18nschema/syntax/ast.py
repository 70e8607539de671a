"""Translation value AST node definitions.

One parsed translation entry is exactly one of:

    Literal    - plain text
    Variable   - interpolation placeholder: {name}
    Component  - wrapping component: <b>...</b>
    Bloc       - concatenation of the above
    Plural     - count-selected forms: [["one item", 1], "{count} items"]
    Subkeys    - nested map of keys (a locale-shaped subtree)
    Default    - explicit "inherit from the default locale" marker (null)

The union is closed: reduce_value() and interpolation_keys() here, and
classification and merging in the localization layer, match it exhaustively.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18nschema.constants import PLURAL_COUNT_KEY
from i18nschema.enums import InterpolationKind, ValueShape

from .keys import Key

if TYPE_CHECKING:
    from i18nschema.localization.locale import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Interpolation
    "InterpolateKey",
    # Plural selectors
    "PluralRange",
    "PluralForm",
    # Nodes
    "Default",
    "Literal",
    "Variable",
    "Component",
    "Bloc",
    "Plural",
    "Subkeys",
    # Type alias
    "ParsedValue",
    # Operations
    "reduce_value",
    "interpolation_keys",
    "shape_name",
]


# ============================================================================
# INTERPOLATION
# ============================================================================


@dataclass(frozen=True, slots=True)
class InterpolateKey:
    """Argument a leaf requires from the caller.

    Attributes:
        kind: Variable, component or plural count
        name: Argument name
    """

    kind: InterpolationKind
    name: Key

    @classmethod
    def variable(cls, name: str) -> InterpolateKey:
        """Variable placeholder key."""
        return cls(InterpolationKind.VARIABLE, Key.intern(name))

    @classmethod
    def component(cls, name: str) -> InterpolateKey:
        """Component tag key."""
        return cls(InterpolationKind.COMPONENT, Key.intern(name))

    @classmethod
    def count(cls) -> InterpolateKey:
        """Implicit plural count key."""
        return cls(InterpolationKind.COUNT, Key.intern(PLURAL_COUNT_KEY))

    def __str__(self) -> str:
        match self.kind:
            case InterpolationKind.VARIABLE:
                return f"variable '{{{self.name.name}}}'"
            case InterpolationKind.COMPONENT:
                return f"component '<{self.name.name}>'"
            case InterpolationKind.COUNT:
                return "plural count"


# ============================================================================
# PLURAL SELECTORS
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralRange:
    """Inclusive range of counts selecting a plural form.

    A bound of None is open. Both bounds None is the fallback form.

    Selector syntax:
        "_" or ".."   fallback
        3 or "3"      exactly 3
        "2..5"        2, 3, 4
        "2..=5"       2 to 5
        "2.."         2 and more
        "..5"         less than 5
        "..=5"        5 or less

    Attributes:
        start: Smallest selected count (None: unbounded)
        end: Largest selected count (None: unbounded)
    """

    start: int | None = None
    end: int | None = None

    def __post_init__(self) -> None:
        """Reject empty ranges.

        Raises:
            ValueError: If start is greater than end
        """
        if self.start is not None and self.end is not None and self.start > self.end:
            msg = f"empty range {self.start}..={self.end}"
            raise ValueError(msg)

    @property
    def is_fallback(self) -> bool:
        """True if the range selects every count."""
        return self.start is None and self.end is None

    def contains(self, count: int) -> bool:
        """Check whether a count selects this range."""
        if self.start is not None and count < self.start:
            return False
        return self.end is None or count <= self.end

    @classmethod
    def parse(cls, selector: int | str) -> PluralRange:
        """Parse a selector as written in a locale file.

        Args:
            selector: Integer count or selector string

        Returns:
            The selected range

        Raises:
            ValueError: If the selector is malformed or selects nothing
        """
        if isinstance(selector, bool):
            msg = f"invalid plural selector {selector!r}"
            raise ValueError(msg)
        if isinstance(selector, int):
            return cls(selector, selector)

        text = selector.strip()
        if text in ("_", ".."):
            return cls()
        if ".." not in text:
            value = _parse_count(text)
            return cls(value, value)

        head, tail = text.split("..", 1)
        inclusive = tail.startswith("=")
        if inclusive:
            tail = tail[1:]
        start = _parse_count(head) if head else None
        if not tail:
            if inclusive:
                msg = f"invalid plural selector {selector!r}: '..=' needs an end"
                raise ValueError(msg)
            return cls(start, None)
        end = _parse_count(tail)
        return cls(start, end if inclusive else end - 1)

    def __str__(self) -> str:
        if self.is_fallback:
            return "_"
        if self.start == self.end:
            return str(self.start)
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else f"={self.end}"
        return f"{start}..{end}"


def _parse_count(text: str) -> int:
    """Parse one range bound.

    Raises:
        ValueError: If text is not an integer
    """
    try:
        return int(text.strip())
    except ValueError:
        msg = f"invalid plural count {text!r}"
        raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class PluralForm:
    """One plural form: a value and the counts selecting it.

    Attributes:
        value: Text of the form (never a plural, subtree or default)
        ranges: Count ranges selecting this form
    """

    value: ParsedValue
    ranges: tuple[PluralRange, ...]

    @property
    def is_fallback(self) -> bool:
        """True if any selector of this form selects every count."""
        return any(r.is_fallback for r in self.ranges)


# ============================================================================
# NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Default:
    """Explicit "inherit from the default locale" marker."""


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text."""

    text: str


@dataclass(frozen=True, slots=True)
class Variable:
    """Interpolation placeholder: {name}."""

    key: Key


@dataclass(frozen=True, slots=True)
class Component:
    """Component wrapping content: <name>inner</name>."""

    key: Key
    inner: ParsedValue


@dataclass(frozen=True, slots=True)
class Bloc:
    """Concatenation of values."""

    values: tuple[ParsedValue, ...]


@dataclass(frozen=True, slots=True)
class Plural:
    """Count-selected forms, checked in order."""

    forms: tuple[PluralForm, ...]

    def select(self, count: int) -> ParsedValue | None:
        """Return the first form selected by count, None if no form matches."""
        for form in self.forms:
            if any(r.contains(count) for r in form.ranges):
                return form.value
        return None


@dataclass(frozen=True, slots=True)
class Subkeys:
    """Nested map of keys.

    The subtree is a Locale of its own: it keeps the top-level locale
    identity of the file it was decoded from.
    """

    locale: Locale


type ParsedValue = Default | Literal | Variable | Component | Bloc | Plural | Subkeys
"""Any translation value node."""


# ============================================================================
# OPERATIONS
# ============================================================================


def reduce_value(value: ParsedValue) -> ParsedValue:
    """Canonicalize a value.

    Rules (deterministic and total):
        - nested Blocs are flattened
        - adjacent Literals are concatenated, empty Literals dropped
        - a Bloc of one value becomes that value, an empty Bloc Literal("")
        - component contents and plural forms are reduced recursively
        - subtrees are reduced in place and returned as is
        - plural form order is kept (forms are checked in order)

    Args:
        value: Value to reduce

    Returns:
        Reduced value (the same object when already canonical)
    """
    match value:
        case Default() | Literal() | Variable():
            return value
        case Component(key=key, inner=inner):
            return Component(key, reduce_value(inner))
        case Bloc(values=values):
            return _collapse(_flatten(values))
        case Plural(forms=forms):
            return Plural(
                tuple(PluralForm(reduce_value(f.value), f.ranges) for f in forms)
            )
        case Subkeys(locale=locale):
            locale.reduce()
            return value


def _flatten(values: tuple[ParsedValue, ...]) -> list[ParsedValue]:
    """Reduce and splice values, merging adjacent literals."""
    out: list[ParsedValue] = []
    for raw in values:
        reduced = reduce_value(raw)
        parts = reduced.values if isinstance(reduced, Bloc) else (reduced,)
        for part in parts:
            match part:
                case Literal(text=""):
                    continue
                case Literal(text=text) if out and isinstance(out[-1], Literal):
                    out[-1] = Literal(out[-1].text + text)
                case _:
                    out.append(part)
    return out


def _collapse(values: list[ParsedValue]) -> ParsedValue:
    if not values:
        return Literal("")
    if len(values) == 1:
        return values[0]
    return Bloc(tuple(values))


def interpolation_keys(value: ParsedValue) -> frozenset[InterpolateKey]:
    """Collect the arguments a leaf value requires.

    Inside a plural, a {count} placeholder refers to the plural count and is
    reported as the COUNT key only.

    Args:
        value: Leaf value (subtrees and defaults require nothing)

    Returns:
        Required interpolation keys, possibly empty
    """
    match value:
        case Default() | Literal() | Subkeys():
            return frozenset()
        case Variable(key=key):
            return frozenset({InterpolateKey(InterpolationKind.VARIABLE, key)})
        case Component(key=key, inner=inner):
            own = InterpolateKey(InterpolationKind.COMPONENT, key)
            return interpolation_keys(inner) | {own}
        case Bloc(values=values):
            keys: set[InterpolateKey] = set()
            for v in values:
                keys |= interpolation_keys(v)
            return frozenset(keys)
        case Plural(forms=forms):
            count = InterpolateKey.count()
            as_variable = InterpolateKey(InterpolationKind.VARIABLE, count.name)
            keys = {count}
            for form in forms:
                keys |= interpolation_keys(form.value) - {as_variable}
            return frozenset(keys)


def shape_name(value: ParsedValue) -> ValueShape:
    """Schema shape of a value: SUBTREE for Subkeys, else LEAF."""
    if isinstance(value, Subkeys):
        return ValueShape.SUBTREE
    return ValueShape.LEAF
