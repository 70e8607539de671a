"""Tests for the translation value AST: reduction, plurals, interpolation keys."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nschema.enums import InterpolationKind, ValueShape
from i18nschema.localization import Locale
from i18nschema.syntax import (
    Bloc,
    Component,
    Default,
    InterpolateKey,
    Key,
    Literal,
    Plural,
    PluralForm,
    PluralRange,
    Subkeys,
    Variable,
    interpolation_keys,
    reduce_value,
)
from i18nschema.syntax.ast import shape_name
from tests.strategies import plural_selectors

NAME = Variable(Key.intern("name"))


class TestReduceValue:
    """Canonicalization rules of reduce_value."""

    def test_adjacent_literals_merge(self) -> None:
        """Adjacent literals are concatenated."""
        assert reduce_value(Bloc((Literal("a"), Literal("b")))) == Literal("ab")

    def test_empty_literals_dropped(self) -> None:
        """Empty literals disappear."""
        assert reduce_value(Bloc((Literal(""), NAME, Literal("")))) == NAME

    def test_nested_blocs_flatten(self) -> None:
        """Nested Blocs are spliced into their parent."""
        value = Bloc((Literal("a"), Bloc((Literal("b"), NAME)), Literal("c")))
        assert reduce_value(value) == Bloc((Literal("ab"), NAME, Literal("c")))

    def test_empty_bloc_is_empty_literal(self) -> None:
        """An empty Bloc reduces to the empty literal."""
        assert reduce_value(Bloc(())) == Literal("")

    def test_component_content_reduced(self) -> None:
        """Component children are reduced."""
        value = Component(Key.intern("b"), Bloc((Literal("x"), Literal("y"))))
        assert reduce_value(value) == Component(Key.intern("b"), Literal("xy"))

    def test_plural_forms_reduced_in_order(self) -> None:
        """Plural forms are reduced and keep their order."""
        one = PluralForm(Bloc((Literal("one"),)), (PluralRange(1, 1),))
        other = PluralForm(Bloc((Literal("many"),)), (PluralRange(),))
        reduced = reduce_value(Plural((one, other)))
        assert reduced == Plural(
            (
                PluralForm(Literal("one"), (PluralRange(1, 1),)),
                PluralForm(Literal("many"), (PluralRange(),)),
            )
        )

    def test_subkeys_reduced_in_place(self) -> None:
        """Subtree entries are replaced by their reduced form."""
        en = Key.intern("en")
        subtree = Locale(en, Key.intern("menu"), {Key.intern("a"): Bloc((Literal("x"),))})
        value = Subkeys(subtree)
        assert reduce_value(value) is value
        assert subtree.keys[Key.intern("a")] == Literal("x")

    def test_default_unchanged(self) -> None:
        """The inherit marker reduces to itself."""
        assert reduce_value(Default()) == Default()

    @given(texts=st.lists(st.text(alphabet="ab", max_size=3), max_size=6))
    def test_idempotent(self, texts: list[str]) -> None:
        """PROPERTY: reducing twice equals reducing once."""
        value = Bloc(tuple(Literal(t) for t in texts) + (NAME,))
        once = reduce_value(value)
        assert reduce_value(once) == once


class TestPluralRange:
    """Plural selector parsing."""

    @pytest.mark.parametrize(
        ("selector", "expected"),
        [
            (3, PluralRange(3, 3)),
            ("3", PluralRange(3, 3)),
            ("_", PluralRange()),
            ("..", PluralRange()),
            ("2..5", PluralRange(2, 4)),
            ("2..=5", PluralRange(2, 5)),
            ("2..", PluralRange(2, None)),
            ("..5", PluralRange(None, 4)),
            ("..=5", PluralRange(None, 5)),
            (" 1 ..= 2 ", PluralRange(1, 2)),
        ],
    )
    def test_parse(self, selector: int | str, expected: PluralRange) -> None:
        """Selectors parse to inclusive ranges."""
        assert PluralRange.parse(selector) == expected

    @pytest.mark.parametrize("selector", ["", "x", "1..x", "..=", "5..=2", "3..3", True])
    def test_parse_rejects(self, selector: object) -> None:
        """Malformed or empty selectors raise ValueError."""
        with pytest.raises(ValueError):  # noqa: PT011 - message varies per case
            PluralRange.parse(selector)  # type: ignore[arg-type]

    def test_contains(self) -> None:
        """contains checks both bounds inclusively."""
        rng = PluralRange(2, 4)
        assert [rng.contains(n) for n in range(6)] == [False, False, True, True, True, False]

    def test_fallback(self) -> None:
        """An unbounded range is the fallback and selects everything."""
        assert PluralRange().is_fallback
        assert PluralRange().contains(-10)

    @given(selector=plural_selectors())
    def test_str_round_trips(self, selector: int | str) -> None:
        """PROPERTY: str() of a parsed range parses back to the same range."""
        rng = PluralRange.parse(selector)
        assert PluralRange.parse(str(rng)) == rng


class TestPluralSelect:
    """Plural.select picks the first matching form."""

    def test_first_match_wins(self) -> None:
        """Forms are checked in order."""
        plural = Plural(
            (
                PluralForm(Literal("zero"), (PluralRange(0, 0),)),
                PluralForm(Literal("few"), (PluralRange(0, 3),)),
                PluralForm(Literal("many"), (PluralRange(),)),
            )
        )
        assert plural.select(0) == Literal("zero")
        assert plural.select(2) == Literal("few")
        assert plural.select(10) == Literal("many")

    def test_no_match(self) -> None:
        """Without a fallback, an unselected count yields None."""
        plural = Plural((PluralForm(Literal("one"), (PluralRange(1, 1),)),))
        assert plural.select(5) is None


class TestInterpolationKeys:
    """Interpolation key collection."""

    def test_literal_needs_nothing(self) -> None:
        """A literal requires no arguments."""
        assert interpolation_keys(Literal("x")) == frozenset()

    def test_component_and_inner_variable(self) -> None:
        """A component contributes itself and its content's keys."""
        value = Component(Key.intern("b"), NAME)
        assert interpolation_keys(value) == {
            InterpolateKey.component("b"),
            InterpolateKey.variable("name"),
        }

    def test_plural_requires_count(self) -> None:
        """A plural requires the count; {count} inside it is the count."""
        plural = Plural(
            (
                PluralForm(Literal("one"), (PluralRange(1, 1),)),
                PluralForm(Bloc((Variable(Key.intern("count")), NAME)), (PluralRange(),)),
            )
        )
        assert interpolation_keys(plural) == {
            InterpolateKey.count(),
            InterpolateKey.variable("name"),
        }

    def test_count_outside_plural_is_variable(self) -> None:
        """{count} outside a plural is an ordinary variable."""
        keys = interpolation_keys(Variable(Key.intern("count")))
        assert keys == {InterpolateKey(InterpolationKind.VARIABLE, Key.intern("count"))}

    def test_str(self) -> None:
        """Interpolation keys render for diagnostics."""
        assert str(InterpolateKey.variable("n")) == "variable '{n}'"
        assert str(InterpolateKey.component("b")) == "component '<b>'"
        assert str(InterpolateKey.count()) == "plural count"


class TestShapeName:
    """Schema shape of values."""

    def test_subtree(self) -> None:
        """Subkeys are subtrees."""
        en = Key.intern("en")
        assert shape_name(Subkeys(Locale(en, Key.intern("x")))) == ValueShape.SUBTREE

    def test_leaf(self) -> None:
        """Everything else is a leaf."""
        assert shape_name(Literal("x")) == ValueShape.LEAF
        assert shape_name(Plural(())) == ValueShape.LEAF
