"""
どこで: `src/shapedraw/core/input_fields.py`。
何を: 入力フォームの自由入力テキストと線幅スライダー値から Shape を組み立てる。
なぜ: フォーム UI と「文字列 → 幾何 → Pen 付き Shape」の変換規則を分離し、ヘッドレスで検証できるようにするため。
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from shapedraw.core.pen import ColorCyclingPen
from shapedraw.core.random_shapes import THICKNESS_MAX, THICKNESS_MIN
from shapedraw.core.shapes import Circle, Line, Rectangle, Shape

_INT_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)", re.ASCII)

# 読み取った値は 32bit 符号付き整数の範囲に飽和させる。
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_DIGITS = len(str(INT_MAX))

SHAPE_FIELDS: dict[str, tuple[str, ...]] = {
    "line": ("x1", "y1", "x2", "y2"),
    "rectangle": ("x", "y", "width", "height"),
    "circle": ("cx", "cy", "radius"),
}


def parse_int(text: str | None) -> int:
    """先頭の整数部分だけを読み取る。読めない入力は 0 とする。

    Examples
    --------
    >>> parse_int(" 42px")
    42
    >>> parse_int("abc")
    0
    """
    if text is None:
        return 0
    m = _INT_PREFIX.match(str(text))
    if m is None:
        return 0
    sign, digits = m.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return INT_MIN if sign == "-" else INT_MAX
    value = -int(digits) if sign == "-" else int(digits)
    return INT_MIN if value < INT_MIN else INT_MAX if value > INT_MAX else value


def clamp_thickness(value: float) -> int:
    """スライダー値を最も近い整数へ丸め、[1, 5] にクランプして返す。"""
    v = int(round(float(value)))
    return THICKNESS_MIN if v < THICKNESS_MIN else THICKNESS_MAX if v > THICKNESS_MAX else v


def shape_from_fields(kind: str, fields: Mapping[str, str], thickness: float) -> Shape:
    """フォーム入力から ColorCyclingPen 付きの Shape を生成する。

    Parameters
    ----------
    kind : str
        ``"line"`` / ``"rectangle"`` / ``"circle"``。
    fields : Mapping[str, str]
        フィールド名 → 入力テキスト。欠けたフィールドは空文字（= 0）として扱う。
    thickness : float
        線幅スライダー値。

    Returns
    -------
    Shape
        新しい Pen に束縛された図形。

    Raises
    ------
    ValueError
        kind が未対応の場合。
    """
    names = SHAPE_FIELDS.get(kind)
    if names is None:
        raise ValueError(f"未対応の図形種別: {kind!r}")

    values = [parse_int(fields.get(name, "")) for name in names]
    pen = ColorCyclingPen(thickness=clamp_thickness(thickness))

    if kind == "line":
        return Line(pen, *values)
    if kind == "rectangle":
        return Rectangle(pen, *values)
    return Circle(pen, *values)


__all__ = ["INT_MAX", "INT_MIN", "SHAPE_FIELDS", "clamp_thickness", "parse_int", "shape_from_fields"]
