"""Pen / ColorCyclingPen の状態と線分描画に関するテスト群。"""

from __future__ import annotations

import pytest

from shapedraw.core.color import BLACK, BLUE, GREEN, RED
from shapedraw.core.pen import ColorCyclingPen, Pen
from shapedraw.core.surface import DEFAULT_LINE_WIDTH, RecordingSurface, StrokeRecord


def test_pen_defaults_to_black_thickness_one() -> None:
    pen = Pen()
    assert pen.color == BLACK
    assert pen.thickness == 1


def test_pen_setters_are_independent_and_idempotent() -> None:
    """線幅の設定は色を変えず、色の設定は線幅を変えない。"""
    pen = Pen()
    pen.set_thickness(3)
    pen.set_thickness(3)
    assert pen.get_thickness() == 3
    assert pen.get_color() == BLACK

    pen.set_color(RED)
    pen.set_color(RED)
    assert pen.get_color() == RED
    assert pen.get_thickness() == 3


@pytest.mark.parametrize("value", [0, -4])
def test_pen_clamps_thickness_below_one(value: int) -> None:
    pen = Pen(thickness=value)
    assert pen.thickness == 1
    pen.set_thickness(value)
    assert pen.thickness == 1


def test_pen_stroke_uses_color_and_thickness_then_resets_line_width() -> None:
    surface = RecordingSurface()
    pen = Pen(BLUE, thickness=4)

    pen.stroke(surface, (0, 0), (10, 0))

    assert surface.strokes == [StrokeRecord(p1=(0, 0), p2=(10, 0), color=BLUE, width=4)]
    assert surface.line_width == DEFAULT_LINE_WIDTH


def test_color_cycling_pen_starts_red_with_rgb_palette() -> None:
    pen = ColorCyclingPen()
    assert pen.palette == (RED, GREEN, BLUE)
    assert pen.color == RED
    assert pen.cursor == 0
    assert pen.thickness == 1


def test_color_cycling_pen_advances_once_per_segment() -> None:
    """i 本目（0 始まり）の線分は palette[i % K] で描かれる。"""
    surface = RecordingSurface()
    pen = ColorCyclingPen(thickness=2)

    for i in range(7):
        pen.stroke(surface, (i, 0), (i, 1))

    colors = [s.color for s in surface.strokes]
    assert colors == [RED, GREEN, BLUE, RED, GREEN, BLUE, RED]
    assert all(s.width == 2 for s in surface.strokes)
    assert pen.cursor == 7 % 3


def test_color_cycling_pen_custom_palette() -> None:
    surface = RecordingSurface()
    pen = ColorCyclingPen(palette=[GREEN])

    pen.stroke(surface, (0, 0), (1, 1))
    pen.stroke(surface, (1, 1), (2, 2))

    assert [s.color for s in surface.strokes] == [GREEN, GREEN]
    assert pen.cursor == 0


def test_color_cycling_pen_rejects_empty_palette() -> None:
    with pytest.raises(ValueError):
        ColorCyclingPen(palette=[])
