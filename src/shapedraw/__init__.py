# どこで: `src/shapedraw/__init__.py`。
# 何を: ルート `shapedraw` パッケージを定義し、描画モデルの主要型を再公開する。
# なぜ: import 起点を `shapedraw` に統一するため（ウィンドウ系は `shapedraw.interactive` から明示 import する）。

from __future__ import annotations

from shapedraw.core.canvas import AxisStyle, Canvas, CanvasBounds
from shapedraw.core.pen import ColorCyclingPen, Pen
from shapedraw.core.shapes import Circle, Line, Rectangle, Shape

__all__ = [
    "AxisStyle",
    "Canvas",
    "CanvasBounds",
    "Circle",
    "ColorCyclingPen",
    "Line",
    "Pen",
    "Rectangle",
    "Shape",
]
