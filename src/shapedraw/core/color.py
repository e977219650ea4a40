"""
どこで: `src/shapedraw/core/color.py`。
何を: 0..1 float RGB の色型・名前付き定数・変換ユーティリティを定義する。
なぜ: Pen/Canvas と各描画サーフェスで同じ色表現を共有するため。
"""

from __future__ import annotations

ColorRGB = tuple[float, float, float]

BLACK: ColorRGB = (0.0, 0.0, 0.0)
WHITE: ColorRGB = (1.0, 1.0, 1.0)
RED: ColorRGB = (1.0, 0.0, 0.0)
GREEN: ColorRGB = (0.0, 1.0, 0.0)
BLUE: ColorRGB = (0.0, 0.0, 1.0)


def rgb01_to_rgb255(rgb: ColorRGB) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        fv = float(v)
        fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def rgb01_to_hex(rgb: ColorRGB) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""
    r, g, b = rgb01_to_rgb255(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = [
    "BLACK",
    "BLUE",
    "ColorRGB",
    "GREEN",
    "RED",
    "WHITE",
    "rgb01_to_hex",
    "rgb01_to_rgb255",
]
