# どこで: `src/shapedraw/core/surface.py`。
# 何を: 描画先（Surface）のプロトコルと、操作を記録するだけの RecordingSurface を定義する。
# なぜ: Pen/Shape/Canvas をウィンドウ系から切り離し、SVG・pyglet・テストで同じ描画経路を使うため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias

from shapedraw.core.color import BLACK, ColorRGB

Point: TypeAlias = tuple[int, int]

DEFAULT_LINE_WIDTH = 1


class Surface(Protocol):
    """現在色・現在線幅という可変状態を持つ描画先。

    Notes
    -----
    状態は `set_color` / `set_line_width` で変更し、以降の描画操作に効く。
    座標は左上原点・y 下向きのスクリーンピクセル。
    """

    def set_color(self, color: ColorRGB) -> None: ...

    def set_line_width(self, width: int) -> None: ...

    def line(self, p1: Point, p2: Point) -> None: ...

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None: ...

    def text(self, text: str, x: int, y: int) -> None: ...


@dataclass(frozen=True, slots=True)
class StrokeRecord:
    """1 本の線分描画。"""

    p1: Point
    p2: Point
    color: ColorRGB
    width: int


@dataclass(frozen=True, slots=True)
class FillRecord:
    """塗りつぶし矩形の描画。"""

    x: int
    y: int
    width: int
    height: int
    color: ColorRGB


@dataclass(frozen=True, slots=True)
class TextRecord:
    """ラベル文字列の描画。"""

    text: str
    x: int
    y: int
    color: ColorRGB


DrawRecord: TypeAlias = StrokeRecord | FillRecord | TextRecord


class RecordingSurface:
    """描画操作を発行順に記録する Surface。

    ピクセルを持たないため、描画順と色・線幅の検査に使う。
    """

    def __init__(self) -> None:
        self.color: ColorRGB = BLACK
        self.line_width: int = DEFAULT_LINE_WIDTH
        self.records: list[DrawRecord] = []

    def set_color(self, color: ColorRGB) -> None:
        self.color = color

    def set_line_width(self, width: int) -> None:
        self.line_width = int(width)

    def line(self, p1: Point, p2: Point) -> None:
        self.records.append(
            StrokeRecord(p1=_point(p1), p2=_point(p2), color=self.color, width=self.line_width)
        )

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.records.append(
            FillRecord(x=int(x), y=int(y), width=int(width), height=int(height), color=self.color)
        )

    def text(self, text: str, x: int, y: int) -> None:
        self.records.append(TextRecord(text=str(text), x=int(x), y=int(y), color=self.color))

    @property
    def strokes(self) -> list[StrokeRecord]:
        """記録のうち線分だけを発行順で返す。"""
        return [r for r in self.records if isinstance(r, StrokeRecord)]

    @property
    def texts(self) -> list[TextRecord]:
        """記録のうちラベルだけを発行順で返す。"""
        return [r for r in self.records if isinstance(r, TextRecord)]

    def clear(self) -> None:
        """記録を破棄する（現在色・線幅は保持する）。"""
        self.records.clear()


def _point(p: Point) -> Point:
    x, y = p
    return int(x), int(y)


__all__ = [
    "DEFAULT_LINE_WIDTH",
    "DrawRecord",
    "FillRecord",
    "Point",
    "RecordingSurface",
    "StrokeRecord",
    "Surface",
    "TextRecord",
]
