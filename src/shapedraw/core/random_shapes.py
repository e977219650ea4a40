# どこで: `src/shapedraw/core/random_shapes.py`。
# 何を: Canvas 範囲内にランダムな Line / Rectangle / Circle を生成する関数と、線幅カウンタの更新規則を提供する。
# なぜ: 「ランダム図形」操作の生成規則をウィンドウ系から切り離し、乱数源と線幅状態を呼び出し側で明示的に持つため。

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from shapedraw.core.canvas import CanvasBounds
from shapedraw.core.pen import ColorCyclingPen
from shapedraw.core.shapes import Circle, Line, Rectangle, Shape

THICKNESS_MIN = 1
THICKNESS_MAX = 5

_MIN_RECT_SIZE = 50
_MIN_RADIUS = 20
_RADIUS_SPAN = 50


def next_thickness(thickness: int) -> int:
    """線幅カウンタを 1→2→…→5→1 の順に 1 つ進めた値を返す。"""
    return int(thickness) % THICKNESS_MAX + THICKNESS_MIN


def _randint(rng: np.random.Generator, n: int) -> int:
    # 0..n-1。範囲が潰れた場合は 0 に寄せる。
    if n <= 0:
        return 0
    return int(rng.integers(n))


def _pen(thickness: int) -> ColorCyclingPen:
    return ColorCyclingPen(thickness=thickness)


def random_line(rng: np.random.Generator, bounds: CanvasBounds, thickness: int) -> Line:
    """両端点を Canvas 内に一様に置いた線分を返す。"""
    bx, by, bw, bh = bounds.x, bounds.y, bounds.width, bounds.height
    x1 = bx + _randint(rng, bw)
    y1 = by + _randint(rng, bh)
    x2 = bx + _randint(rng, bw)
    y2 = by + _randint(rng, bh)
    return Line(_pen(thickness), x1, y1, x2, y2)


def random_rectangle(
    rng: np.random.Generator, bounds: CanvasBounds, thickness: int
) -> Rectangle:
    """左上を Canvas 内に置き、幅・高さを 50px 以上にした矩形を返す。

    Notes
    -----
    幅・高さは ``50 + randint(右端/下端 - 左上)`` で決めるため、Canvas からはみ出し得る。
    """
    bx, by, bw, bh = bounds.x, bounds.y, bounds.width, bounds.height
    x = bx + _randint(rng, bw - _MIN_RECT_SIZE)
    y = by + _randint(rng, bh - _MIN_RECT_SIZE)
    width = _MIN_RECT_SIZE + _randint(rng, bx + bw - x)
    height = _MIN_RECT_SIZE + _randint(rng, by + bh - y)
    return Rectangle(_pen(thickness), x, y, width, height)


def random_circle(rng: np.random.Generator, bounds: CanvasBounds, thickness: int) -> Circle:
    """Canvas 内に収まる半径 20..69px の円を返す。"""
    bx, by, bw, bh = bounds.x, bounds.y, bounds.width, bounds.height
    radius = _MIN_RADIUS + _randint(rng, _RADIUS_SPAN)
    cx = bx + radius + _randint(rng, bw - 2 * radius)
    cy = by + radius + _randint(rng, bh - 2 * radius)
    return Circle(_pen(thickness), cx, cy, radius)


RandomShapeFactory = Callable[[np.random.Generator, CanvasBounds, int], Shape]

RANDOM_SHAPE_FACTORIES: dict[str, RandomShapeFactory] = {
    "line": random_line,
    "rectangle": random_rectangle,
    "circle": random_circle,
}


__all__ = [
    "RANDOM_SHAPE_FACTORIES",
    "RandomShapeFactory",
    "THICKNESS_MAX",
    "THICKNESS_MIN",
    "next_thickness",
    "random_circle",
    "random_line",
    "random_rectangle",
]
