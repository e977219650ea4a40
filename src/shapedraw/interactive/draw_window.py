# どこで: `src/shapedraw/interactive/draw_window.py`。
# 何を: Canvas を表示する pyglet ウィンドウ生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

import pyglet
from pyglet.window import Window

from shapedraw.core.runtime_config import RuntimeConfig


def create_draw_window(config: RuntimeConfig) -> Window:
    """設定に基づき固定サイズの描画ウィンドウを生成する。"""
    win_w, win_h = config.window_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(win_w),
        height=int(win_h),
        resizable=False,
        caption=config.window_caption,
    )
    return window
