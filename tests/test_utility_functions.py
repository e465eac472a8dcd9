"""Test utility functions."""

from unittest.mock import MagicMock

import pytest
from aiohttp import ClientResponse

from pygaggiuino.util import (
    flexible_bool,
    flexible_float,
    flexible_int,
    is_success,
    lenient_bool,
    scale_tenths,
    strict_bool,
    strict_float,
    strict_float_dict,
    strict_int,
    strict_int_list,
    strict_str,
)


@pytest.mark.parametrize(
    ("status", "expected"),
    [(100, False), (200, True), (204, True), (299, True), (300, False), (404, False)],
)
def test_is_success(status: int, expected: bool) -> None:
    """Test is_success over the status ranges."""
    response = MagicMock(spec=ClientResponse)
    response.status = status

    assert is_success(response) is expected


@pytest.mark.parametrize(
    ("value", "expected"), [(85, 85), ("85", 85), (85.0, 85), ("-3", -3)]
)
def test_flexible_int(value: object, expected: int) -> None:
    """Test parsing integers."""
    assert flexible_int(value) == expected


@pytest.mark.parametrize("value", ["85.5", "abc", "", 85.5, True, None, [1]])
def test_flexible_int_invalid(value: object) -> None:
    """Test values that are not integers."""
    with pytest.raises(ValueError, match="to int"):
        flexible_int(value)


@pytest.mark.parametrize(
    ("value", "expected"), [(92.5, 92.5), ("92.5", 92.5), (93, 93.0), ("93", 93.0)]
)
def test_flexible_float(value: object, expected: float) -> None:
    """Test parsing floats."""
    result = flexible_float(value)
    assert result == expected
    assert isinstance(result, float)


@pytest.mark.parametrize("value", ["not-a-number", "", False, None])
def test_flexible_float_invalid(value: object) -> None:
    """Test values that are not floats."""
    with pytest.raises(ValueError, match="not-a-number|to float"):
        flexible_float(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, True),
        (False, False),
        ("True", True),
        ("1", True),
        ("YES", True),
        ("false", False),
        ("0", False),
        ("No", False),
    ],
)
def test_flexible_bool(value: object, expected: bool) -> None:
    """Test parsing booleans."""
    assert flexible_bool(value) is expected


@pytest.mark.parametrize("value", ["on", "off", "2", 1, 0, None])
def test_flexible_bool_invalid(value: object) -> None:
    """Test only the known tokens are accepted."""
    with pytest.raises(ValueError, match="to bool"):
        flexible_bool(value)


def test_lenient_bool() -> None:
    """Test unparseable booleans become None."""
    assert lenient_bool("yes") is True
    assert lenient_bool("maybe") is None


def test_scale_tenths() -> None:
    """Test converting tenths to units."""
    assert scale_tenths([90, 15, 0, -5]) == [9.0, 1.5, 0.0, -0.5]
    assert scale_tenths([]) == []
    assert scale_tenths(None) is None


@pytest.mark.parametrize("value", [" 42", "42 ", "1_000", "٤٢"])
def test_flexible_int_rejects_loose_spellings(value: str) -> None:
    """Test integer strings must be written plainly."""
    with pytest.raises(ValueError, match="to int"):
        flexible_int(value)


@pytest.mark.parametrize("value", [" 92.5", "92.5\n", "9_2.5"])
def test_flexible_float_rejects_loose_spellings(value: str) -> None:
    """Test float strings must be written plainly."""
    with pytest.raises(ValueError, match="to float"):
        flexible_float(value)


def test_strict_scalars() -> None:
    """Test strict parsers accept their own JSON type only."""
    assert strict_int(42) == 42
    assert strict_int(42.0) == 42
    assert strict_float(9) == 9.0
    assert isinstance(strict_float(9), float)
    assert strict_bool(False) is False
    assert strict_str("LINEAR") == "LINEAR"


@pytest.mark.parametrize(
    ("parser", "value"),
    [
        (strict_int, "42"),
        (strict_int, 42.5),
        (strict_int, True),
        (strict_float, "9.0"),
        (strict_float, False),
        (strict_bool, "false"),
        (strict_bool, 0),
        (strict_str, 5),
        (strict_int_list, [1, 1.7]),
        (strict_int_list, "90"),
        (strict_float_dict, {"weight": "36"}),
        (strict_float_dict, [36.0]),
    ],
)
def test_strict_rejects_other_types(parser: object, value: object) -> None:
    """Test strict parsers never coerce."""
    with pytest.raises(ValueError, match="Expected"):
        parser(value)  # type: ignore[operator]


def test_strict_containers() -> None:
    """Test strict container parsers."""
    assert strict_int_list([90, 92]) == [90, 92]
    assert strict_int_list([]) == []
    assert strict_float_dict({"weight": 36}) == {"weight": 36.0}
