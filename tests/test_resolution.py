"""Tests for schema construction, merging and orchestration."""

from __future__ import annotations

import copy
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nschema.diagnostics import (
    DiagnosticCode,
    ExplicitDefaultInDefaultError,
    SubKeyMismatchError,
    WarningCollector,
)
from i18nschema.enums import ValueShape, WarningKind
from i18nschema.localization import (
    FlatBuildersKeys,
    FlatLocales,
    LeafValue,
    Locale,
    LocaleSeed,
    Namespace,
    NamespacedBuildersKeys,
    NamespacedLocales,
    SubkeysValue,
    build_schema,
    check_locales,
    check_locales_inner,
    merge_locale,
)
from i18nschema.syntax import InterpolateKey, Key, Literal
from tests.strategies import locale_trees

EN = Key.intern("en")
FR = Key.intern("fr")
DE = Key.intern("de")


def tree(locale: Key, raw: dict[str, object], namespace: Key | None = None) -> Locale:
    """Decode a locale document."""
    return LocaleSeed.for_locale(locale, namespace).deserialize(raw)


def flat(*trees: Locale) -> FlatLocales:
    """Flat tree set, default first."""
    return FlatLocales(list(trees))


def paths(warnings: tuple[object, ...], kind: WarningKind) -> list[str]:
    """Rendered key paths of the warnings of one kind."""
    return [str(w.key_path) for w in warnings if w.kind == kind]  # type: ignore[attr-defined]


class TestConcreteScenarios:
    """End-to-end scenarios of the resolver."""

    def test_surplus_key_in_subtree(self) -> None:
        """fr has an extra nested key: one surplus warning at nested.b."""
        en = tree(EN, {"greeting": "hi {name}", "nested": {"a": "x"}})
        fr = tree(FR, {"greeting": "salut {name}", "nested": {"a": "y", "b": "z"}})

        resolved = check_locales(flat(en, fr))

        keys = resolved.builders_keys.keys
        assert isinstance(resolved.builders_keys, FlatBuildersKeys)
        greeting = keys[Key.intern("greeting")]
        assert greeting == LeafValue(frozenset({InterpolateKey.variable("name")}))
        nested = keys[Key.intern("nested")]
        assert isinstance(nested, SubkeysValue)
        assert nested.keys[Key.intern("a")] == LeafValue(None)

        assert len(resolved.warnings) == 1
        warning = resolved.warnings[0]
        assert warning.kind == WarningKind.SURPLUS_KEY
        assert warning.locale == FR
        assert str(warning.key_path) == "nested.b"

    def test_missing_key(self) -> None:
        """de is empty: one missing warning at a, schema unaffected."""
        en = tree(EN, {"a": "x"})
        de = tree(DE, {})

        resolved = check_locales(flat(en, de))

        assert paths(resolved.warnings, WarningKind.MISSING_KEY) == ["a"]
        assert len(resolved.warnings) == 1
        assert resolved.builders_keys.keys.entries == {Key.intern("a"): LeafValue(None)}

    def test_shape_mismatch(self) -> None:
        """de has a subtree where en has a leaf: fatal at a."""
        en = tree(EN, {"a": "x"})
        de = tree(DE, {"a": {"b": "y"}})

        with pytest.raises(SubKeyMismatchError) as exc_info:
            check_locales(flat(en, de))

        error = exc_info.value
        assert str(error.key_path) == "a"
        assert error.locale == "de"
        assert error.expected == ValueShape.LEAF
        assert error.received == ValueShape.SUBTREE
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.SUBKEY_MISMATCH

    def test_shape_mismatch_leaf_for_subtree(self) -> None:
        """A leaf where the default has a subtree is fatal too."""
        en = tree(EN, {"menu": {"open": "Open"}})
        fr = tree(FR, {"menu": "Menu"})

        with pytest.raises(SubKeyMismatchError) as exc_info:
            check_locales(flat(en, fr))
        assert exc_info.value.expected == ValueShape.SUBTREE
        assert exc_info.value.received == ValueShape.LEAF


class TestBuildSchema:
    """Schema construction from the default locale."""

    def test_single_locale_keys(self) -> None:
        """With one locale the schema has exactly its keys and no warnings."""
        en = tree(EN, {"a": "x", "b": {"c": "y"}, "d": [["one", 1], "many"]})
        resolved = check_locales(flat(en))
        assert resolved.builders_keys.keys.key_names() == {"a", "b", "d"}
        assert resolved.warnings == ()

    def test_plural_requires_count(self) -> None:
        """A plural leaf requires the count key."""
        en = tree(EN, {"items": [["one item", 1], "{count} items for {user}"]})
        schema = build_schema(en)
        assert schema[Key.intern("items")] == LeafValue(
            frozenset({InterpolateKey.count(), InterpolateKey.variable("user")})
        )

    def test_component_key(self) -> None:
        """Components are interpolation keys."""
        schema = build_schema(tree(EN, {"link": "click <b>here</b>"}))
        assert schema[Key.intern("link")] == LeafValue(
            frozenset({InterpolateKey.component("b")})
        )

    def test_default_tree_reduced_in_place(self) -> None:
        """Building the schema stores reduced values back into the tree."""
        en = tree(EN, {"a": "plain", "sub": {"b": "nested"}})
        build_schema(en)
        assert en.keys[Key.intern("a")] == Literal("plain")
        assert en.get_value_at([Key.intern("sub"), Key.intern("b")]) == Literal("nested")

    def test_explicit_default_at_top(self) -> None:
        """The inherit marker in the default locale is fatal."""
        en = tree(EN, {"a": "x", "b": None})
        with pytest.raises(ExplicitDefaultInDefaultError) as exc_info:
            build_schema(en)
        assert str(exc_info.value.key_path) == "b"

    def test_explicit_default_nested(self) -> None:
        """The marker is found at any depth, with its full path."""
        en = tree(EN, {"a": {"b": {"c": None}}})
        with pytest.raises(ExplicitDefaultInDefaultError) as exc_info:
            build_schema(en, Key.intern("common"))
        assert str(exc_info.value.key_path) == "common::a.b.c"

    def test_explicit_default_regardless_of_other_locales(self) -> None:
        """The check runs before any other locale is looked at."""
        en = tree(EN, {"a": None})
        fr = tree(FR, {"a": {"nested": "x"}})
        with pytest.raises(ExplicitDefaultInDefaultError):
            check_locales(flat(en, fr))

    def test_subkeys_value_lists_locales(self) -> None:
        """A subtree entry lists the default subtree, then each merged one."""
        en = tree(EN, {"menu": {"open": "Open"}})
        fr = tree(FR, {"menu": {"open": "Ouvrir"}})
        de = tree(DE, {"menu": {"open": "Öffnen"}})
        resolved = check_locales(flat(en, fr, de))
        menu = resolved.builders_keys.keys[Key.intern("menu")]
        assert isinstance(menu, SubkeysValue)
        assert [loc.top_locale_name for loc in menu.locales] == [EN, FR, DE]
        assert all(loc.name == Key.intern("menu") for loc in menu.locales)


class TestMerge:
    """Merging non-default locales."""

    def test_default_marker_accepted(self) -> None:
        """The inherit marker in a non-default locale is accepted silently."""
        en = tree(EN, {"a": "x", "sub": {"b": "y"}})
        fr = tree(FR, {"a": None, "sub": None})
        assert check_locales(flat(en, fr)).warnings == ()

    def test_missing_nested_key(self) -> None:
        """Missing keys inside subtrees carry the full path."""
        en = tree(EN, {"menu": {"open": "Open", "close": "Close"}})
        fr = tree(FR, {"menu": {"open": "Ouvrir"}})
        resolved = check_locales(flat(en, fr))
        assert paths(resolved.warnings, WarningKind.MISSING_KEY) == ["menu.close"]

    def test_missing_subtree_reported_once(self) -> None:
        """A missing subtree is one warning, not one per nested key."""
        en = tree(EN, {"menu": {"open": "Open", "close": "Close"}})
        fr = tree(FR, {})
        resolved = check_locales(flat(en, fr))
        assert paths(resolved.warnings, WarningKind.MISSING_KEY) == ["menu"]

    def test_warnings_from_every_locale(self) -> None:
        """Warnings accumulate across locales, attributed to each."""
        en = tree(EN, {"a": "x", "b": "y"})
        fr = tree(FR, {"a": "x"})
        de = tree(DE, {"b": "y", "c": "z"})
        resolved = check_locales(flat(en, fr, de))
        found = {(w.kind, w.locale.name, str(w.key_path)) for w in resolved.warnings}
        assert found == {
            (WarningKind.MISSING_KEY, "fr", "b"),
            (WarningKind.MISSING_KEY, "de", "a"),
            (WarningKind.SURPLUS_KEY, "de", "c"),
        }

    def test_undeclared_interpolation_key(self) -> None:
        """A variable the default does not use is a warning, schema unchanged."""
        en = tree(EN, {"hello": "Hello"})
        fr = tree(FR, {"hello": "Bonjour {name}"})
        resolved = check_locales(flat(en, fr))
        assert len(resolved.warnings) == 1
        warning = resolved.warnings[0]
        assert warning.kind == WarningKind.UNDECLARED_INTERPOLATION_KEY
        assert warning.interpolation_key == InterpolateKey.variable("name")
        assert resolved.builders_keys.keys[Key.intern("hello")] == LeafValue(None)

    def test_fewer_interpolation_keys_accepted(self) -> None:
        """A locale may use fewer keys than the default."""
        en = tree(EN, {"hello": "Hello {name}"})
        fr = tree(FR, {"hello": "Bonjour"})
        assert check_locales(flat(en, fr)).warnings == ()

    def test_merged_values_reduced(self) -> None:
        """Merged locale values are stored back reduced."""
        en = tree(EN, {"a": "x"})
        fr = tree(FR, {"a": "y"})
        check_locales(flat(en, fr))
        assert fr.keys[Key.intern("a")] == Literal("y")

    def test_mismatch_reports_nested_path(self) -> None:
        """A mismatch deep in the tree reports its full path."""
        en = tree(EN, {"a": {"b": "x"}})
        fr = tree(FR, {"a": {"b": {"c": "y"}}})
        schema = build_schema(en)
        with pytest.raises(SubKeyMismatchError) as exc_info:
            merge_locale(fr, schema, EN, None, WarningCollector())
        assert str(exc_info.value.key_path) == "a.b"

    def test_self_merge_is_clean(self) -> None:
        """Merging the default tree against its own schema warns nothing."""
        en = tree(EN, {"a": "hi {name}", "sub": {"b": "<b>x</b>"}, "n": [["one", 1], "many"]})
        schema = build_schema(en)
        warnings = WarningCollector()
        merge_locale(en, schema, EN, None, warnings)
        assert len(warnings) == 0
        sub = schema[Key.intern("sub")]
        assert isinstance(sub, SubkeysValue)
        assert [t.top_locale_name for t in sub.locales] == [EN]

    @given(raw=locale_trees())
    def test_self_merge_property(self, raw: dict[str, object]) -> None:
        """PROPERTY: identical trees merge without warnings."""
        en = tree(EN, copy.deepcopy(raw))
        fr = tree(FR, copy.deepcopy(raw))
        assert check_locales(flat(en, fr)).warnings == ()

    @given(raw=locale_trees(), data=st.data())
    def test_missing_key_property(self, raw: dict[str, object], data: st.DataObject) -> None:
        """PROPERTY: dropping one top-level key gives exactly one MissingKey."""
        dropped = data.draw(st.sampled_from(sorted(raw)))
        partial = {k: v for k, v in copy.deepcopy(raw).items() if k != dropped}
        resolved = check_locales(flat(tree(EN, copy.deepcopy(raw)), tree(FR, partial)))
        assert paths(resolved.warnings, WarningKind.MISSING_KEY) == [dropped]
        assert len(resolved.warnings) == 1
        assert dropped in resolved.builders_keys.keys.key_names()

    @given(raw=locale_trees())
    def test_surplus_key_property(self, raw: dict[str, object]) -> None:
        """PROPERTY: one extra top-level key gives exactly one SurplusKey."""
        extra = dict(copy.deepcopy(raw))
        extra["Extra_key"] = "x"
        resolved = check_locales(flat(tree(EN, copy.deepcopy(raw)), tree(FR, extra)))
        assert paths(resolved.warnings, WarningKind.SURPLUS_KEY) == ["Extra_key"]
        assert len(resolved.warnings) == 1


class TestCheckLocales:
    """Orchestration over namespaces and collectors."""

    def test_namespaced(self) -> None:
        """Each namespace gets its own schema and its own default."""
        common = Key.intern("common")
        home = Key.intern("home")
        tree_set = NamespacedLocales(
            [
                Namespace(common, [tree(EN, {"ok": "OK"}, common), tree(FR, {}, common)]),
                Namespace(home, [tree(EN, {"title": "T"}, home), tree(FR, {"title": "T"}, home)]),
            ]
        )
        resolved = check_locales(tree_set)
        assert isinstance(resolved.builders_keys, NamespacedBuildersKeys)
        assert set(resolved.builders_keys.keys) == {common, home}
        assert [str(w.key_path) for w in resolved.warnings] == ["common::ok"]

    def test_caller_owned_collector(self) -> None:
        """Warnings accumulate into the collector the caller passes."""
        collector = WarningCollector()
        en = tree(EN, {"a": "x"})
        resolved = check_locales(flat(en, tree(FR, {})), warnings=collector)
        assert len(collector) == 1
        assert resolved.warnings == collector.warnings
        assert resolved.has_warnings

    def test_empty_scope_rejected(self) -> None:
        """A scope without any locale cannot have a schema."""
        with pytest.raises(ValueError, match="At least one locale"):
            check_locales_inner([], None, WarningCollector())

    def test_logs_resolution(self, caplog: pytest.LogCaptureFixture) -> None:
        """Resolution progress is logged at info level."""
        with caplog.at_level(logging.INFO, logger="i18nschema.localization.resolution"):
            check_locales(flat(tree(EN, {"a": "x"})))
        assert any("Resolving 1 locales" in r.getMessage() for r in caplog.records)

    def test_warnings_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each warning is logged at WARNING level by default."""
        with caplog.at_level(logging.WARNING, logger="i18nschema.diagnostics.validation"):
            check_locales(flat(tree(EN, {"a": "x"}), tree(FR, {})))
        assert any("Missing key 'a' in locale 'fr'" in r.getMessage() for r in caplog.records)

    def test_suppressed_warnings_still_collected(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Suppressing logs keeps the warnings in the result."""
        collector = WarningCollector(suppress_logging=True)
        with caplog.at_level(logging.WARNING, logger="i18nschema.diagnostics.validation"):
            resolved = check_locales(flat(tree(EN, {"a": "x"}), tree(FR, {})), warnings=collector)
        assert len(resolved.warnings) == 1
        assert not [r for r in caplog.records if r.name == "i18nschema.diagnostics.validation"]
