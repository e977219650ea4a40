# どこで: `src/shapedraw/interactive/pyglet_surface.py`。
# 何を: Surface の各操作を pyglet の shapes / text オブジェクトへ変換し、1 つの Batch で描く。
# なぜ: core の描画経路（Pen → Surface）をそのまま使ってウィンドウへ表示するため。

from __future__ import annotations

from typing import Any

import pyglet

from shapedraw.core.color import BLACK, ColorRGB, rgb01_to_rgb255
from shapedraw.core.surface import DEFAULT_LINE_WIDTH, Point

_FONT_SIZE = 10


def _rgba255(color: ColorRGB) -> tuple[int, int, int, int]:
    r, g, b = rgb01_to_rgb255(color)
    return r, g, b, 255


class PygletSurface:
    """左上原点のスクリーン座標を pyglet（左下原点）へ反転して描く Surface。

    Parameters
    ----------
    height : int
        ウィンドウ高さ [px]。y 反転に使う。

    Notes
    -----
    操作ごとに order 付き Group を割り当て、Batch 内でも発行順 = 重なり順を保つ。
    生成したオブジェクトは `flush()` まで参照を保持しておく必要がある。
    """

    def __init__(self, height: int) -> None:
        self._height = int(height)
        self._color: ColorRGB = BLACK
        self._line_width = DEFAULT_LINE_WIDTH
        self._batch = pyglet.graphics.Batch()
        self._items: list[Any] = []

    def _y(self, y: int) -> int:
        return self._height - int(y)

    def _next_group(self) -> pyglet.graphics.Group:
        return pyglet.graphics.Group(order=len(self._items))

    def set_color(self, color: ColorRGB) -> None:
        self._color = color

    def set_line_width(self, width: int) -> None:
        self._line_width = int(width)

    def line(self, p1: Point, p2: Point) -> None:
        # x, y, x2, y2, 線幅, 色 の順は pyglet 2.x 系で共通。
        item = pyglet.shapes.Line(
            int(p1[0]),
            self._y(p1[1]),
            int(p2[0]),
            self._y(p2[1]),
            float(self._line_width),
            _rgba255(self._color),
            batch=self._batch,
            group=self._next_group(),
        )
        self._items.append(item)

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        # pyglet の矩形は左下基準なので、下辺の y を渡す。
        item = pyglet.shapes.Rectangle(
            int(x),
            self._y(int(y) + int(height)),
            int(width),
            int(height),
            color=_rgba255(self._color),
            batch=self._batch,
            group=self._next_group(),
        )
        self._items.append(item)

    def text(self, text: str, x: int, y: int) -> None:
        item = pyglet.text.Label(
            str(text),
            x=int(x),
            y=self._y(y),
            font_size=_FONT_SIZE,
            color=_rgba255(self._color),
            anchor_x="left",
            anchor_y="baseline",
            batch=self._batch,
            group=self._next_group(),
        )
        self._items.append(item)

    def flush(self) -> None:
        """蓄積した描画を現在のウィンドウへ描く。"""
        self._batch.draw()
