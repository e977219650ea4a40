# どこで: `src/shapedraw/interactive/app.py`。
# 何を: ShapeSession を pyglet ウィンドウに表示し、キー操作でランダム図形の追加と SVG/PNG 保存を行うアプリを提供する。
# なぜ: core の 2 つの入口（add_shape / 再描画）を実際のイベントループから駆動する最小の導線を用意するため。

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

import pyglet
from pyglet.window import key

from shapedraw.core.canvas import Canvas
from shapedraw.core.runtime_config import (
    RuntimeConfig,
    output_root_dir,
    runtime_config,
    set_config_path,
)
from shapedraw.core.session import ShapeSession
from shapedraw.core.shapes import Shape
from shapedraw.export.image import export_image
from shapedraw.export.svg import export_svg
from shapedraw.interactive.draw_window import create_draw_window
from shapedraw.interactive.pyglet_surface import PygletSurface

_logger = logging.getLogger(__name__)

_WINDOW_CLEAR_COLOR = (0.85, 0.85, 0.85, 1.0)
_HELP_TEXT = "L: Random Line   R: Random Rectangle   C: Random Circle   S: Save SVG   P: Save PNG"

_KEY_TO_KIND = {
    key.L: "line",
    key.R: "rectangle",
    key.C: "circle",
}


class ShapeDrawerApp:
    """ShapeSession をウィンドウへ結び付け、キー入力と再描画要求を処理する。

    Notes
    -----
    描画は毎フレームではなく、図形追加・expose・resize のときだけ要求する。
    ColorCyclingPen は描画のたびに色が進むため、再描画回数がそのまま見た目に現れる。
    """

    def __init__(self, config: RuntimeConfig, *, seed: int | None = None) -> None:
        self._config = config
        self.session = ShapeSession.from_config(config, seed=seed, on_change=self.request_repaint)
        self._repaint_pending = False

        out_dir = output_root_dir()
        self._svg_output_path = out_dir / "svg" / "shapedraw.svg"
        self._png_output_path = out_dir / "png" / "shapedraw.png"

        self.window = create_draw_window(config)
        self._help = pyglet.text.Label(
            _HELP_TEXT,
            x=10,
            y=self.window.height - 20,
            font_size=11,
            color=(0, 0, 0, 255),
        )
        self.window.push_handlers(
            on_draw=self._on_draw,
            on_key_press=self._on_key_press,
            on_expose=self.request_repaint,
            on_resize=self._on_resize,
        )

    @property
    def canvas(self) -> Canvas:
        return self.session.canvas

    def add_random_shape(self, kind: str) -> Shape:
        return self.session.add_random_shape(kind)

    def add_shape_from_fields(self, kind: str, fields: Mapping[str, str], thickness: float) -> Shape:
        return self.session.add_shape_from_fields(kind, fields, thickness)

    def request_repaint(self) -> None:
        """次のイベントループ周回で 1 回だけ再描画する。"""
        if self._repaint_pending:
            return
        self._repaint_pending = True
        pyglet.clock.schedule_once(self._repaint, 0.0)

    def _repaint(self, dt: float) -> None:
        self._repaint_pending = False
        # 閉じられたウィンドウへ draw すると例外になり得る。
        if self.window not in pyglet.app.windows:
            return
        self.window.draw(dt)

    def save_svg(self) -> Path:
        """Canvas を SVG として保存し、保存先パスを返す。"""
        return export_svg(self.canvas, self._svg_output_path, canvas_size=self._config.window_size)

    def save_png(self) -> Path:
        """Canvas を PNG として保存し、保存先パスを返す。"""
        return export_image(
            self.canvas,
            self._png_output_path,
            canvas_size=self._config.window_size,
            background_color=self._config.background_color,
        )

    def _on_resize(self, _width: int, _height: int) -> None:
        self.request_repaint()

    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        kind = _KEY_TO_KIND.get(symbol)
        if kind is not None:
            self.add_random_shape(kind)
            return
        if symbol == key.S:
            try:
                path = self.save_svg()
            except Exception as e:
                _logger.exception("Failed to save SVG")
                print(f"Failed to save SVG: {e}")
                return
            print(f"Saved SVG: {path}")
            return
        if symbol == key.P:
            try:
                path = self.save_png()
            except Exception as e:
                _logger.exception("Failed to save PNG")
                print(f"Failed to save PNG: {e}")
                return
            print(f"Saved PNG: {path}")

    def _on_draw(self) -> None:
        pyglet.gl.glClearColor(*_WINDOW_CLEAR_COLOR)
        self.window.clear()
        surface = PygletSurface(self.window.height)
        self.canvas.draw(surface)
        surface.flush()
        self._help.draw()


def run(
    *,
    config_path: str | Path | None = None,
    seed: int | None = None,
    shapes: Sequence[tuple[str, Mapping[str, str]]] = (),
    thickness: float = 1.0,
) -> None:
    """ウィンドウを開き、閉じられるまでイベントループを回す。

    Parameters
    ----------
    config_path : str | Path | None
        明示 config.yaml。None の場合は既定の探索に従う。
    seed : int | None
        ランダム図形の乱数シード。None の場合は毎回異なる。
    shapes : Sequence[tuple[str, Mapping[str, str]]]
        起動時に追加する (種別, 入力フィールド) の列。入力フォームと同じ規則で解釈する。
    thickness : float
        `shapes` に適用する線幅スライダー値。
    """
    if config_path is not None:
        set_config_path(config_path)
    app = ShapeDrawerApp(runtime_config(), seed=seed)
    for kind, fields in shapes:
        app.add_shape_from_fields(kind, fields, thickness)
    _logger.info(
        "Shape drawer started: window=%s shapes=%d", app.window.get_size(), len(app.canvas)
    )
    app.request_repaint()
    pyglet.app.run(interval=None)


__all__ = ["ShapeDrawerApp", "run"]
