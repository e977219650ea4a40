"""入力フォーム文字列から Shape を組み立てる処理のテスト群。"""

from __future__ import annotations

import pytest

from shapedraw.core.input_fields import clamp_thickness, parse_int, shape_from_fields
from shapedraw.core.pen import ColorCyclingPen
from shapedraw.core.shapes import Circle, Line, Rectangle


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  7", 7),
        ("-15", -15),
        ("+3", 3),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("3.9", 3),
        (None, 0),
        ("\u0663\u0664", 0),
        ("007", 7),
        ("2147483648", 2**31 - 1),
        ("-2147483649", -(2**31)),
        ("9" * 5000, 2**31 - 1),
        ("-" + "9" * 5000, -(2**31)),
    ],
)
def test_parse_int_reads_leading_integer_or_zero(text: str | None, expected: int) -> None:
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.2, 1), (1.0, 1), (2.6, 3), (4.4, 4), (5.0, 5), (9.0, 5), (-3.0, 1)],
)
def test_clamp_thickness_rounds_into_slider_range(value: float, expected: int) -> None:
    assert clamp_thickness(value) == expected


def test_line_from_fields() -> None:
    shape = shape_from_fields("line", {"x1": "10", "y1": "20", "x2": "30", "y2": "40"}, 2)
    assert isinstance(shape, Line)
    assert (shape.x1, shape.y1, shape.x2, shape.y2) == (10, 20, 30, 40)
    assert isinstance(shape.pen, ColorCyclingPen)
    assert shape.pen.thickness == 2


def test_rectangle_from_fields_treats_garbage_as_zero() -> None:
    shape = shape_from_fields("rectangle", {"x": "5", "y": "oops", "width": "100"}, 1)
    assert isinstance(shape, Rectangle)
    assert (shape.x, shape.y, shape.width, shape.height) == (5, 0, 100, 0)


def test_circle_from_fields_clamps_thickness() -> None:
    shape = shape_from_fields("circle", {"cx": "100", "cy": "100", "radius": "50"}, 8)
    assert isinstance(shape, Circle)
    assert (shape.cx, shape.cy, shape.radius) == (100, 100, 50)
    assert shape.pen.thickness == 5


def test_unknown_kind_raises() -> None:
    with pytest.raises(ValueError):
        shape_from_fields("triangle", {}, 1)
