"""
どこで: `src/shapedraw/export/image.py`。
何を: Canvas を SVG 経由で外部ラスタライザ（resvg）に渡し PNG として保存する関数を提供する。
なぜ: SVG を正（ソース）として保存し、PNG は任意の倍率で再生成できる導線を用意するため。
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from shapedraw.core.canvas import Canvas
from shapedraw.core.color import WHITE, ColorRGB, rgb01_to_hex
from shapedraw.core.runtime_config import runtime_config
from shapedraw.export.svg import export_svg

_logger = logging.getLogger(__name__)


def export_image(
    canvas: Canvas,
    path: str | Path,
    *,
    canvas_size: tuple[int, int] | None = None,
    background_color: ColorRGB = WHITE,
) -> Path:
    """Canvas を画像として保存する。

    Notes
    -----
    拡張子 `.svg` はそのまま SVG、`.png` は隣に SVG を保存してから resvg でラスタライズする。

    Raises
    ------
    ValueError
        canvas_size が None の場合、または未対応の拡張子の場合。
    """
    _path = Path(path)
    suffix = _path.suffix.lower()

    if suffix not in {".svg", ".png"}:
        raise ValueError(f"未対応の画像フォーマット: {suffix!r}")
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    if suffix == ".svg":
        return export_svg(canvas, _path, canvas_size=canvas_size)

    svg_path = _path.with_suffix(".svg")
    export_svg(canvas, svg_path, canvas_size=canvas_size)
    return rasterize_svg_to_png(
        svg_path,
        _path,
        output_size=png_output_size(canvas_size),
        background_color_rgb01=background_color,
    )


def png_output_size(canvas_size: tuple[int, int]) -> tuple[int, int]:
    """canvas_size を基準に PNG 出力ピクセルサイズを返す。"""

    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("canvas_size は正の (width, height) である必要がある")
    scale = float(runtime_config().png_scale)
    return int(int(canvas_w) * scale), int(int(canvas_h) * scale)


_RESVG = "resvg"


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background_color_rgb01: ColorRGB = WHITE,
) -> Path:
    """`resvg` で SVG を指定ピクセルサイズの PNG に変換し、出力パスを返す。

    Raises
    ------
    RuntimeError
        resvg が PATH に無い、または非 0 で終了した場合。stderr を詳細として含める。
    """
    src, dst = Path(svg_path), Path(png_path)
    width, height = (str(int(v)) for v in output_size)
    dst.parent.mkdir(parents=True, exist_ok=True)

    # 位置引数は「入力 SVG, 出力 PNG」の順で末尾に置く。
    options = {
        "--width": width,
        "--height": height,
        "--background": rgb01_to_hex(background_color_rgb01),
    }
    cmd = [_RESVG, *(tok for pair in options.items() for tok in pair), str(src), str(dst)]
    _logger.debug("rasterize: %s", " ".join(cmd))

    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RuntimeError(
            f"{_RESVG} が見つかりません（`{_RESVG}` をインストールして PATH を通してください）"
        ) from e
    if proc.returncode:
        details = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"{_RESVG} が失敗しました (code={proc.returncode}). {details}".strip())

    _logger.info("Saved PNG: %s (%sx%s)", dst, width, height)
    return dst


__all__ = ["export_image", "png_output_size", "rasterize_svg_to_png"]
