"""
tests/test_coercion.py
Type inference table, numeric boundaries and placeholder substitution.
"""

import pytest

from envlayer.coercion import convert, interpolate, is_numeric, render


def _no_lookup(name):
    raise AssertionError(f"unexpected lookup of {name}")


def _lookup_from(values):
    return lambda name: values.get(name)


class TestConvert:

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("TRUE", True), ("True", True),
        ("false", False), ("FALSE", False),
    ])
    def test_booleans(self, raw, expected):
        assert convert(raw, _no_lookup) is expected

    @pytest.mark.parametrize("raw", ["null", "NULL", "Null"])
    def test_null(self, raw):
        assert convert(raw, _no_lookup) is None

    @pytest.mark.parametrize("raw", ["", "empty", "EMPTY"])
    def test_empty(self, raw):
        assert convert(raw, _no_lookup) == ""

    def test_integer(self):
        value = convert("42", _no_lookup)
        assert value == 42 and isinstance(value, int)
        assert convert("-7", _no_lookup) == -7

    def test_leading_zeros_parse_as_int(self):
        assert convert("007", _no_lookup) == 7

    def test_negative_float(self):
        value = convert("-3.14", _no_lookup)
        assert value == -3.14 and isinstance(value, float)

    def test_plain_string(self):
        assert convert("hello", _no_lookup) == "hello"

    def test_non_strings_pass_through(self):
        assert convert(8080, _no_lookup) == 8080
        assert convert([1, 2], _no_lookup) == [1, 2]
        assert convert(None, _no_lookup) is None
        assert convert(False, _no_lookup) is False


class TestNumericBoundaries:

    @pytest.mark.parametrize("raw,expected", [
        ("1e10", 1e10), ("1E-3", 0.001), ("+5", 5.0), (".5", 0.5), ("5.", 5.0),
        ("3.0", 3.0),
    ])
    def test_float_forms(self, raw, expected):
        value = convert(raw, _no_lookup)
        assert isinstance(value, float)
        assert value == expected

    @pytest.mark.parametrize("raw", ["0x1A", "1,5", "1_000", "inf", "nan", "1e", "--1", "1.2.3"])
    def test_not_numeric_stays_string(self, raw):
        assert not is_numeric(raw)
        assert convert(raw, _no_lookup) == raw


class TestInterpolation:

    def test_single_placeholder(self):
        lookup = _lookup_from({"BASE": "hello"})
        assert interpolate("${BASE} world", lookup) == "hello world"

    def test_several_placeholders(self):
        lookup = _lookup_from({"HOST": "db", "PORT": 5432})
        assert interpolate("${HOST}:${PORT}", lookup) == "db:5432"

    def test_inner_name_trimmed_of_spaces_and_quotes(self):
        lookup = _lookup_from({"NAME": "x"})
        assert interpolate("${ NAME }-${'NAME'}-${\"NAME\"}", lookup) == "x-x-x"

    def test_missing_name_substitutes_empty(self):
        assert interpolate("a${MISSING}b", _lookup_from({})) == "ab"

    def test_empty_braces_left_as_text(self):
        assert interpolate("a${}b", _lookup_from({"": "x"})) == "a${}b"

    def test_substitution_not_rescanned(self):
        lookup = _lookup_from({"A": "${B}", "B": "nope"})
        assert interpolate("${A}", lookup) == "${B}"

    def test_interpolated_number_is_coerced(self):
        lookup = _lookup_from({"PORT": 8080})
        value = convert("${PORT}", lookup)
        assert value == 8080 and isinstance(value, int)

    def test_render(self):
        assert render(None) == ""
        assert render(True) == "true"
        assert render(False) == "false"
        assert render(1.5) == "1.5"
