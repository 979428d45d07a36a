"""Tests for the output formatting helpers."""

import pytest

from animate_library.utils.data_utils import readable_shapes, stringify_simple, to_precision


class TestToPrecision:
    """Rounding to decimal places."""

    def test_default_two_places(self) -> None:
        assert to_precision(3.14159) == 3.14

    def test_custom_places(self) -> None:
        assert to_precision(3.14159, 3) == 3.142
        assert to_precision(2.4, 0) == 2.0

    def test_halves_round_up(self) -> None:
        assert to_precision(0.125) == 0.13
        assert to_precision(2.5, 0) == 3.0
        assert to_precision(-2.5, 0) == -2.0

    def test_integers_unchanged(self) -> None:
        assert to_precision(10) == 10

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_precision(1.0, -1)


class TestStringifySimple:
    """Indented JSON with unquoted simple keys."""

    def test_simple_keys_unquoted(self) -> None:
        assert stringify_simple({"name": "x", "a1": 1}) == '{\n  name: "x",\n  "a1": 1\n}'

    def test_nested(self) -> None:
        text = stringify_simple({"stageName": "MC", "size": {"width": 550}})
        assert text == '{\n  stageName: "MC",\n  size: {\n    width: 550\n  }\n}'

    def test_string_values_untouched(self) -> None:
        assert stringify_simple(["name"]) == '[\n  "name"\n]'


class TestReadableShapes:
    """Line-broken shape listings."""

    def test_single_shape(self) -> None:
        assert readable_shapes({"a": [1, 2]}) == '{\n  \n    "a": [1, 2\n  ]\n}'

    def test_multiple_shapes(self) -> None:
        text = readable_shapes({"MC_1": [1], "MC_2": [2]})
        assert text == '{\n  "MC_1": [1],\n   "MC_2": [2\n  ]\n}'
