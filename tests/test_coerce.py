"""Tests for the scalar coercers."""

import sys

import pytest

from tiled_tileset.coerce import (
    coerce_bool, coerce_float, coerce_int, coerce_round_int, coerce_str,
)
from tiled_tileset.errors import CoercionError


def test_int_accepts_native_and_string():
    assert coerce_int(16) == 16
    assert coerce_int("16") == 16
    assert coerce_int(" 7 ") == 7
    assert coerce_int("-3") == -3
    assert coerce_int(16.0) == 16


@pytest.mark.parametrize("value", ["1.5", "abc", "", "1_000", 1.5, True, None, [1]])
def test_int_rejects(value):
    with pytest.raises(CoercionError):
        coerce_int(value, "tilecount")


def test_int_minimum():
    assert coerce_int("0", minimum=0) == 0
    with pytest.raises(CoercionError) as excinfo:
        coerce_int("-1", "tilewidth", minimum=0)
    assert excinfo.value.path == "tilewidth"


def test_float():
    assert coerce_float("2.5") == 2.5
    assert coerce_float(3) == 3.0
    assert coerce_float(0.25) == 0.25
    for bad in ("x", "1_0", False, None):
        with pytest.raises(CoercionError):
            coerce_float(bad)


def test_round_int():
    assert coerce_round_int(5) == 5
    assert coerce_round_int(2.6) == 3
    assert coerce_round_int("2.4") == 2
    assert coerce_round_int("-2.6") == -3
    # built-in round() is used throughout
    assert coerce_round_int(2.5) == round(2.5)


@pytest.mark.parametrize("value", ["abc", "nan", "inf", None, True])
def test_round_int_rejects(value):
    with pytest.raises(CoercionError):
        coerce_round_int(value, "x")


@pytest.mark.parametrize("value", [True, "1", "true", "TRUE", "True", "yes", "YES", 1, 1.0])
def test_bool_true_spellings(value):
    assert coerce_bool(value) is True


@pytest.mark.parametrize("value", [False, "0", "false", "False", "no", " No ", 0])
def test_bool_false_spellings(value):
    assert coerce_bool(value) is False


@pytest.mark.parametrize("value", ["maybe", "", "t", "y", "on", "n", "off", 2, -1, None, [True]])
def test_bool_rejects(value):
    with pytest.raises(CoercionError) as excinfo:
        coerce_bool(value, "visible")
    assert excinfo.value.path == "visible"


def test_strict_values_pass_through_unchanged():
    assert coerce_int(42) == 42
    assert coerce_float(1.25) == 1.25
    assert coerce_round_int(-7) == -7
    assert coerce_bool(True) is True
    assert coerce_bool(False) is False
    assert coerce_str("terrain") == "terrain"


def test_str_rejects_non_text():
    with pytest.raises(CoercionError):
        coerce_str(12, "name")


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
def test_int_literal_over_digit_limit():
    with pytest.raises(CoercionError) as excinfo:
        coerce_int("9" * 5000, "tilewidth")
    assert excinfo.value.path == "tilewidth"
