"""
tests/test_resolver.py
──────────────────────
Tests for path traversal, argument normalization and placeholder substitution.
"""

import pytest

from src.i18n.errors import TranslationsError, UnknownLanguageError
from src.i18n.models import MISSING, Found
from src.i18n.resolver import normalize_args, resolve, step, substitute, walk


class TestSubstitute:
    def test_in_order(self):
        assert substitute("{0} and {1}", ["x", "y"]) == "x and y"

    def test_only_first_occurrence(self):
        assert substitute("{0} {0}", ["x"]) == "x {0}"

    def test_unmatched_placeholder_left_verbatim(self):
        assert substitute("{0} of {1}", ["3"]) == "3 of {1}"

    def test_extra_args_unused(self):
        assert substitute("{0}", ["a", "b", "c"]) == "a"

    def test_args_are_stringified(self):
        assert substitute("{0}/{1}", [3, None]) == "3/None"

    def test_out_of_order_placeholders(self):
        assert substitute("{1} before {0}", ["a", "b"]) == "b before a"

    def test_no_args(self):
        assert substitute("{0}", []) == "{0}"


class TestNormalizeArgs:
    def test_variadic(self):
        assert normalize_args(("a", "b")) == ["a", "b"]

    def test_single_list_is_flattened(self):
        assert normalize_args((["a", "b"],)) == ["a", "b"]

    def test_single_tuple_is_flattened(self):
        assert normalize_args((("a", "b"),)) == ["a", "b"]

    def test_single_string_is_not_flattened(self):
        assert normalize_args(("abc",)) == ["abc"]

    def test_list_among_others_is_kept(self):
        assert normalize_args((["a"], "b")) == [["a"], "b"]


class TestWalk:
    def test_step_found(self):
        assert step({"a": 1}, "a") == Found(1)

    def test_step_missing(self):
        assert step({"a": 1}, "b") is MISSING

    def test_step_on_leaf_is_missing(self):
        assert step("text", "a") is MISSING

    def test_full_path(self, table):
        assert walk(table["en"], "menu.file.open") == "Open {0}"

    def test_missing_segment_stays_in_place(self, table):
        assert walk(table["en"], "menu.nope.edit") == "Edit"

    def test_missing_leaf_returns_intermediate_node(self, table):
        assert walk(table["en"], "menu.file.nope") == table["en"]["menu"]["file"]


class TestResolve:
    def test_simple(self, table):
        assert resolve(table, "en", "greet", "Sam") == "Hello Sam"

    def test_other_language(self, table):
        assert resolve(table, "fr", "greet", "Sam") == "Bonjour Sam"

    def test_array_argument(self, table):
        assert resolve(table, "en", "pair", ["x", "y"]) == "x and y"

    def test_nested(self, table):
        assert resolve(table, "fr", "menu.file.open", "doc.txt") == "Ouvrir doc.txt"

    def test_unknown_path_degrades_to_node_string(self, table):
        result = resolve(table, "en", "menu.file.nope")
        assert result == str(table["en"]["menu"]["file"])

    def test_unknown_language(self, table):
        with pytest.raises(UnknownLanguageError) as exc:
            resolve(table, "de", "greet")
        assert exc.value.language == "de"
        assert exc.value.available == ["en", "fr"]

    def test_unknown_language_is_translations_error(self, table):
        with pytest.raises(TranslationsError):
            resolve(table, "de", "greet")
