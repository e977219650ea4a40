"""ShapeSession（図形追加の状態: Canvas / 乱数源 / 種別ごとの線幅カウンタ）のテスト。"""

from __future__ import annotations

import pytest

from shapedraw.core.canvas import Canvas, CanvasBounds
from shapedraw.core.session import ShapeSession
from shapedraw.core.shapes import Circle, Line, Rectangle

_BOUNDS = CanvasBounds(x=50, y=100, width=700, height=450)


def _session(**kwargs) -> ShapeSession:
    return ShapeSession(Canvas(_BOUNDS), seed=0, **kwargs)


def test_line_counter_cycles_while_other_kinds_stay_put() -> None:
    session = _session()

    got = [session.add_random_shape("line").pen.get_thickness() for _ in range(6)]

    assert got == [1, 2, 3, 4, 5, 1]
    assert session.thickness("line") == 2
    assert session.thickness("circle") == 1
    assert session.thickness("rectangle") == 1


def test_counters_advance_independently_per_kind() -> None:
    session = _session()
    session.add_random_shape("line")
    session.add_random_shape("line")

    circle = session.add_random_shape("circle")
    rect = session.add_random_shape("rectangle")

    assert isinstance(circle, Circle)
    assert isinstance(rect, Rectangle)
    assert circle.pen.get_thickness() == 1
    assert rect.pen.get_thickness() == 1
    assert session.thickness("line") == 3


def test_random_shapes_are_appended_in_order() -> None:
    session = _session()
    shapes = [session.add_random_shape(k) for k in ("circle", "line", "rectangle")]

    assert session.canvas.shapes == tuple(shapes)


def test_same_seed_gives_same_shapes() -> None:
    a = ShapeSession(Canvas(_BOUNDS), seed=42)
    b = ShapeSession(Canvas(_BOUNDS), seed=42)

    la = a.add_random_shape("line")
    lb = b.add_random_shape("line")

    assert (la.x1, la.y1, la.x2, la.y2) == (lb.x1, lb.y1, lb.x2, lb.y2)


def test_unknown_random_kind_raises_key_error() -> None:
    session = _session()
    with pytest.raises(KeyError):
        session.add_random_shape("triangle")
    assert len(session.canvas) == 0


def test_shape_from_fields_does_not_touch_random_counters() -> None:
    session = _session()

    shape = session.add_shape_from_fields("line", {"x1": "1", "y1": "2", "x2": "3", "y2": "x"}, 4.6)

    assert isinstance(shape, Line)
    assert (shape.x1, shape.y1, shape.x2, shape.y2) == (1, 2, 3, 0)
    assert shape.pen.get_thickness() == 5
    assert session.thickness("line") == 1
    assert session.canvas.shapes == (shape,)


def test_on_change_fires_once_per_added_shape() -> None:
    calls: list[int] = []
    session = _session(on_change=lambda: calls.append(len(session.canvas)))

    session.add_random_shape("circle")
    session.add_shape_from_fields("circle", {"cx": "100", "cy": "100", "radius": "50"}, 1)

    assert calls == [1, 2]


def test_on_change_is_not_called_when_add_fails() -> None:
    calls: list[int] = []
    session = _session(on_change=lambda: calls.append(1))

    with pytest.raises(ValueError):
        session.add_shape_from_fields("triangle", {}, 1)
    assert calls == []
