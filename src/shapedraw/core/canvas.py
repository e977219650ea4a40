"""
どこで: `src/shapedraw/core/canvas.py`。
何を: 追加順を保つ図形リストを所有し、背景・座標軸・全図形を毎回描き直す Canvas を定義する。
なぜ: 「保持したリストから全再描画する」モデルを描画先から独立して扱うため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from shapedraw.core.color import BLACK, WHITE, ColorRGB
from shapedraw.core.shapes import Shape
from shapedraw.core.surface import DEFAULT_LINE_WIDTH, Surface

_logger = logging.getLogger(__name__)

_TICK_HALF = 5
_Y_LABEL_DX = -30
_X_LABEL_DY = 15


@dataclass(frozen=True, slots=True)
class CanvasBounds:
    """スクリーン座標上の Canvas 矩形（左上原点）。"""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class AxisStyle:
    """座標軸の目盛り・ラベル規則。

    Notes
    -----
    ラベルは装飾であり、図形座標の変換には使わない。
    Y ラベルは下端で ``y_label_max``、上へ ``step`` ごとに ``step`` ずつ減る。
    X ラベルは左端で ``x_label_min``、右へ ``step`` ごとに ``step`` ずつ増える。
    X 目盛りは Canvas 幅ではなく ``x_extent`` まで打つ。
    """

    step: int = 50
    y_label_max: int = 550
    x_label_min: int = 50
    x_extent: int = 750


class Canvas:
    """図形リストを所有し、再描画のたびに全体を描き直す描画面。

    Parameters
    ----------
    bounds : CanvasBounds
        スクリーン上の矩形。生成後は固定。
    background_color : ColorRGB, optional
        背景色。既定は白。
    axis_color : ColorRGB, optional
        座標軸・目盛り・ラベルの色。既定は黒。
    axis : AxisStyle, optional
        目盛り間隔とラベル規則。
    """

    def __init__(
        self,
        bounds: CanvasBounds,
        *,
        background_color: ColorRGB = WHITE,
        axis_color: ColorRGB = BLACK,
        axis: AxisStyle | None = None,
    ) -> None:
        self.bounds = bounds
        self.background_color = background_color
        self.axis_color = axis_color
        self.axis = axis if axis is not None else AxisStyle()
        self._shapes: list[Shape] = []

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """追加順（= 描画順）の図形列。"""
        return tuple(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._shapes))

    def add_shape(self, shape: Shape) -> None:
        """図形を末尾へ追加する。以後 Canvas が所有し、後から追加したものが上に描かれる。"""
        self._shapes.append(shape)
        _logger.debug("add_shape: %r (count=%d)", shape, len(self._shapes))

    def draw(self, surface: Surface) -> None:
        """背景 → 座標軸 → 全図形（追加順）の順に描く。"""
        b = self.bounds

        surface.set_color(self.background_color)
        surface.fill_rect(b.x, b.y, b.width, b.height)

        self._draw_axes(surface)

        for shape in self._shapes:
            shape.draw(surface)
        _logger.debug("draw: %d shapes", len(self._shapes))

    def _draw_axes(self, surface: Surface) -> None:
        b = self.bounds
        axis = self.axis
        bottom = b.y + b.height

        surface.set_color(self.axis_color)
        surface.set_line_width(DEFAULT_LINE_WIDTH)
        surface.line((b.x, bottom), (b.x + b.width, bottom))
        surface.line((b.x, b.y), (b.x, bottom))

        step = int(axis.step)
        if step <= 0:
            return

        for i in range(0, b.height + 1, step):
            label = axis.y_label_max - (i // step) * step
            ty = bottom - i
            surface.text(str(label), b.x + _Y_LABEL_DX, ty)
            surface.line((b.x - _TICK_HALF, ty), (b.x + _TICK_HALF, ty))

        for i in range(0, axis.x_extent + 1, step):
            label = axis.x_label_min + (i // step) * step
            tx = b.x + i
            surface.text(str(label), tx, bottom + _X_LABEL_DY)
            surface.line((tx, bottom - _TICK_HALF), (tx, bottom + _TICK_HALF))


__all__ = ["AxisStyle", "Canvas", "CanvasBounds"]
