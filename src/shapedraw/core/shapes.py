"""
どこで: `src/shapedraw/core/shapes.py`。
何を: Line / Rectangle / Circle の幾何を保持し、自身の Pen で線分列へ分解して描く。
なぜ: 図形ごとの分解規則を 1 か所にまとめ、描画先に依存しない形で提供するため。
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeAlias

import numpy as np

from shapedraw.core.pen import Pen
from shapedraw.core.surface import Surface

CIRCLE_SEGMENTS = 100


@dataclass(frozen=True, slots=True)
class Shape(ABC):
    """Pen を 1 つ所有する図形の基底。

    幾何と Pen の束縛は生成後に変わらない。変化するのは Pen 内部の巡回状態だけ。
    """

    pen: Pen

    @abstractmethod
    def draw(self, surface: Surface) -> None:
        """自身の Pen で 1 本以上の線分を描く。"""


@dataclass(frozen=True, slots=True)
class Line(Shape):
    """2 端点の線分。"""

    x1: int
    y1: int
    x2: int
    y2: int

    def draw(self, surface: Surface) -> None:
        self.pen.stroke(surface, (self.x1, self.y1), (self.x2, self.y2))


@dataclass(frozen=True, slots=True)
class Rectangle(Shape):
    """左上 (x, y) と幅・高さで表す軸平行矩形。"""

    x: int
    y: int
    width: int
    height: int

    def corners(self) -> tuple[tuple[int, int], ...]:
        """左上から時計回りの 4 頂点を返す。"""
        x, y, w, h = self.x, self.y, self.width, self.height
        return (x, y), (x + w, y), (x + w, y + h), (x, y + h)

    def draw(self, surface: Surface) -> None:
        # 上辺 → 右辺 → 下辺 → 左辺の順で始点へ戻る。
        corners = self.corners()
        for i, p1 in enumerate(corners):
            self.pen.stroke(surface, p1, corners[(i + 1) % 4])


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    """中心と半径で表す円。CIRCLE_SEGMENTS 本の等角な弦で近似して描く。"""

    cx: int
    cy: int
    radius: int

    def vertices(self) -> np.ndarray:
        return circle_vertices(self.cx, self.cy, self.radius)

    def draw(self, surface: Surface) -> None:
        pts = self.vertices().tolist()
        for (x0, y0), (x1, y1) in zip(pts[:-1], pts[1:]):
            self.pen.stroke(surface, (x0, y0), (x1, y1))


AnyShape: TypeAlias = Line | Rectangle | Circle


def circle_vertices(
    cx: int,
    cy: int,
    radius: int,
    segments: int = CIRCLE_SEGMENTS,
) -> np.ndarray:
    """円を近似する閉ポリラインの頂点列を返す。

    Parameters
    ----------
    cx, cy : int
        中心座標 [px]。
    radius : int
        半径 [px]。0 以下でも例外にせず縮退した頂点列を返す。
    segments : int, optional
        弦の本数。

    Returns
    -------
    np.ndarray
        int64 型 shape (segments+1, 2)。先頭は角度 0 の点 (cx+radius, cy)、
        以降は角度 i·2π/segments (i=1..segments) の点。

    Notes
    -----
    各点は ``radius·cos`` / ``radius·sin`` を 0 方向へ切り捨ててから中心を足す。
    """
    n = int(segments)
    step = 2.0 * math.pi / n
    angles = np.arange(1, n + 1, dtype=np.float64) * step
    r = float(radius)

    out = np.empty((n + 1, 2), dtype=np.int64)
    out[0] = (int(cx) + int(radius), int(cy))
    out[1:, 0] = int(cx) + np.trunc(r * np.cos(angles)).astype(np.int64)
    out[1:, 1] = int(cy) + np.trunc(r * np.sin(angles)).astype(np.int64)
    return out


__all__ = [
    "AnyShape",
    "CIRCLE_SEGMENTS",
    "Circle",
    "Line",
    "Rectangle",
    "Shape",
    "circle_vertices",
]
