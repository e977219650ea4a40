# どこで: `src/shapedraw/core/session.py`。
# 何を: Canvas・乱数源・図形種別ごとの線幅カウンタをまとめ、図形追加の 2 経路（ランダム / 入力フォーム）を提供する。
# なぜ: ウィンドウを開かずに「追加 → 再描画要求」の状態遷移を検証できるよう、アプリ状態を pyglet から切り離すため。

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

import numpy as np

from shapedraw.core.canvas import Canvas
from shapedraw.core.input_fields import shape_from_fields
from shapedraw.core.random_shapes import (
    RANDOM_SHAPE_FACTORIES,
    THICKNESS_MIN,
    next_thickness,
)
from shapedraw.core.runtime_config import RuntimeConfig
from shapedraw.core.shapes import Shape

_logger = logging.getLogger(__name__)


class ShapeSession:
    """1 枚の Canvas に対する図形追加操作の状態を保持する。

    Parameters
    ----------
    canvas : Canvas
        図形の追加先。
    seed : int | None
        ランダム図形の乱数シード。None の場合は毎回異なる。
    on_change : Callable[[], None] | None
        図形が追加されるたびに呼ばれる。ウィンドウ側はここで再描画を要求する。

    Notes
    -----
    線幅カウンタは種別ごとに独立し、1..5 を巡回する。入力フォーム経由の追加は
    カウンタを進めない（線幅はスライダー値で決まる）。
    """

    def __init__(
        self,
        canvas: Canvas,
        *,
        seed: int | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.canvas = canvas
        self._rng = np.random.default_rng(seed)
        self._thickness: dict[str, int] = {kind: THICKNESS_MIN for kind in RANDOM_SHAPE_FACTORIES}
        self._on_change = on_change

    @classmethod
    def from_config(
        cls,
        config: RuntimeConfig,
        *,
        seed: int | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> ShapeSession:
        """RuntimeConfig の Canvas 設定から新しいセッションを作る。"""
        canvas = Canvas(
            config.canvas_bounds,
            background_color=config.background_color,
            axis_color=config.axis_color,
            axis=config.axis,
        )
        return cls(canvas, seed=seed, on_change=on_change)

    def thickness(self, kind: str) -> int:
        """次のランダム図形 `kind` に使われる線幅を返す。"""
        return self._thickness[kind]

    def add_random_shape(self, kind: str) -> Shape:
        """指定種別のランダム図形を追加し、その種別の線幅カウンタだけを進める。

        Raises
        ------
        KeyError
            kind が未対応の場合。
        """
        factory = RANDOM_SHAPE_FACTORIES[kind]
        thickness = self._thickness[kind]
        shape = factory(self._rng, self.canvas.bounds, thickness)
        self._thickness[kind] = next_thickness(thickness)
        self._add(shape)
        return shape

    def add_shape_from_fields(
        self, kind: str, fields: Mapping[str, str], thickness: float
    ) -> Shape:
        """入力フォームの値から図形を組み立てて追加する。"""
        shape = shape_from_fields(kind, fields, thickness)
        self._add(shape)
        return shape

    def _add(self, shape: Shape) -> None:
        self.canvas.add_shape(shape)
        _logger.debug("added %s (total=%d)", type(shape).__name__, len(self.canvas))
        if self._on_change is not None:
            self._on_change()


__all__ = ["ShapeSession"]
