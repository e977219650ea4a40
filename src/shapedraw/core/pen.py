"""
どこで: `src/shapedraw/core/pen.py`。
何を: 線色・線幅を持ち線分を 1 本描く Pen と、線分ごとに色を巡回する ColorCyclingPen を定義する。
なぜ: Shape の幾何分解と描画スタイルを分離し、スタイルの差し替えを Pen 側に閉じ込めるため。
"""

from __future__ import annotations

from collections.abc import Sequence

from shapedraw.core.color import BLACK, BLUE, GREEN, RED, ColorRGB
from shapedraw.core.surface import DEFAULT_LINE_WIDTH, Point, Surface

DEFAULT_PALETTE: tuple[ColorRGB, ...] = (RED, GREEN, BLUE)


class Pen:
    """単色で線分を描くペン。

    Parameters
    ----------
    color : ColorRGB, optional
        線色（0..1）。既定は黒。
    thickness : int, optional
        線幅 [px]。1 未満は 1 にクランプする。

    Notes
    -----
    1 つの Pen は 1 つの Shape にだけ束縛する。
    """

    def __init__(self, color: ColorRGB = BLACK, thickness: int = 1) -> None:
        self._color: ColorRGB = color
        self._thickness = 1
        self.set_thickness(thickness)

    @property
    def color(self) -> ColorRGB:
        return self._color

    @property
    def thickness(self) -> int:
        return self._thickness

    def set_color(self, color: ColorRGB) -> None:
        self._color = color

    def get_color(self) -> ColorRGB:
        return self._color

    def set_thickness(self, thickness: int) -> None:
        self._thickness = max(1, int(thickness))

    def get_thickness(self) -> int:
        return self._thickness

    def stroke(self, surface: Surface, p1: Point, p2: Point) -> None:
        """現在の色・線幅で p1→p2 の線分を描く。

        描画後は surface の線幅を既定値へ戻し、呼び出し間で描画状態を持ち越さない。
        """
        surface.set_color(self._color)
        surface.set_line_width(self._thickness)
        surface.line(p1, p2)
        surface.set_line_width(DEFAULT_LINE_WIDTH)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self._color!r}, thickness={self._thickness})"


class ColorCyclingPen(Pen):
    """線分を 1 本描くごとにパレットの次の色へ進むペン。

    Parameters
    ----------
    thickness : int, optional
        線幅 [px]。
    palette : Sequence[ColorRGB], optional
        巡回する色列。既定は赤・緑・青。

    Raises
    ------
    ValueError
        palette が空の場合。
    """

    def __init__(
        self,
        thickness: int = 1,
        *,
        palette: Sequence[ColorRGB] = DEFAULT_PALETTE,
    ) -> None:
        colors = tuple(palette)
        if not colors:
            raise ValueError("palette は少なくとも 1 色を含む必要がある")
        super().__init__(colors[0], thickness)
        self._palette = colors
        self._cursor = 0

    @property
    def palette(self) -> tuple[ColorRGB, ...]:
        return self._palette

    @property
    def cursor(self) -> int:
        """次の線分に使うパレット位置。"""
        return self._cursor

    def stroke(self, surface: Surface, p1: Point, p2: Point) -> None:
        # 色はどの Shape から呼ばれたかに関係なく線分単位で進む。
        self._color = self._palette[self._cursor]
        super().stroke(surface, p1, p2)
        self._cursor = (self._cursor + 1) % len(self._palette)


__all__ = ["ColorCyclingPen", "DEFAULT_PALETTE", "Pen"]
