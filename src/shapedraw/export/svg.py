"""
どこで: `src/shapedraw/export/svg.py`。
何を: 描画操作を SVG 要素へ変換する SvgSurface と、Canvas を SVG として保存する関数を提供する。
なぜ: ウィンドウを立ち上げずに Canvas の再描画結果をファイルへ残せるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from shapedraw.core.canvas import Canvas
from shapedraw.core.color import BLACK, ColorRGB, rgb01_to_hex
from shapedraw.core.surface import DEFAULT_LINE_WIDTH, Point

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3
_FONT_SIZE = 14
_FONT_FAMILY = "Helvetica, Arial, sans-serif"


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


class SvgSurface:
    """Surface の各操作を SVG 要素として蓄積する。

    Parameters
    ----------
    width, height : int
        viewBox と出力寸法 [px]。

    Notes
    -----
    線分は 1 本ごとに `<path>` を出す。発行順がそのまま重なり順になる。
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError("canvas_size は正の値である必要がある")
        self.width = int(width)
        self.height = int(height)
        self._color: ColorRGB = BLACK
        self._line_width = DEFAULT_LINE_WIDTH
        self._elements: list[str] = []

    def set_color(self, color: ColorRGB) -> None:
        self._color = color

    def set_line_width(self, width: int) -> None:
        self._line_width = int(width)

    def line(self, p1: Point, p2: Point) -> None:
        d = f"M {_fmt(p1[0])} {_fmt(p1[1])} L {_fmt(p2[0])} {_fmt(p2[1])}"
        self._elements.append(
            (
                f'  <path d="{d}" fill="none" stroke="{rgb01_to_hex(self._color)}" '
                f'stroke-width="{_fmt(self._line_width)}" stroke-linecap="round" '
                f'stroke-linejoin="round" />'
            )
        )

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._elements.append(
            (
                f'  <rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(width)}" '
                f'height="{_fmt(height)}" fill="{rgb01_to_hex(self._color)}" />'
            )
        )

    def text(self, text: str, x: int, y: int) -> None:
        self._elements.append(
            (
                f'  <text x="{_fmt(x)}" y="{_fmt(y)}" fill="{rgb01_to_hex(self._color)}" '
                f"font-size=\"{_FONT_SIZE}\" font-family={quoteattr(_FONT_FAMILY)}>"
                f"{escape(str(text))}</text>"
            )
        )

    def to_svg(self) -> str:
        """蓄積した要素から SVG 文書を組み立てて返す。"""
        lines: list[str] = []
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
        lines.append(
            (
                f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {self.width} {self.height}" '
                f'width="{self.width}" height="{self.height}">'
            )
        )
        lines.extend(self._elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"


def export_svg(
    canvas: Canvas,
    path: str | Path,
    *,
    canvas_size: tuple[int, int] | None = None,
) -> Path:
    """Canvas を 1 回再描画し、その結果を SVG として保存する。

    Parameters
    ----------
    canvas : Canvas
        出力対象。再描画するため ColorCyclingPen の巡回位置は進む。
    path : str or Path
        出力先パス。親ディレクトリは作成する。
    canvas_size : tuple[int, int] or None, optional
        出力寸法（通常はウィンドウ寸法）。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が None または正でない場合。
    """
    _path = Path(path)
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    canvas_w, canvas_h = canvas_size
    surface = SvgSurface(canvas_w, canvas_h)
    canvas.draw(surface)

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(surface.to_svg())

    _logger.info("Saved SVG: %s", _path)
    return _path


__all__ = ["SvgSurface", "export_svg"]
