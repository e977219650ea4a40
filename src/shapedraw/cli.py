"""
どこで: `src/shapedraw/cli.py`。
何を: `shapedraw` コマンドの引数（config / seed / 起動時に置く静的図形）を解釈してビューアを起動する。
なぜ: 入力フォームと同じ文字列規則（`shape_from_fields`）で図形を指定できる入口を、ウィンドウ無しで検証可能な形で持つため。
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from shapedraw.core.input_fields import SHAPE_FIELDS


class _AppendShape(argparse.Action):
    # const に図形種別を持ち、(種別, {フィールド名: 入力テキスト}) を出現順に積む。
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        kind = str(self.const)
        items = list(getattr(namespace, self.dest, None) or [])
        items.append((kind, dict(zip(SHAPE_FIELDS[kind], values))))
        setattr(namespace, self.dest, items)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="shapedraw")
    p.add_argument("--config", type=Path, default=None, help="明示 config.yaml のパス")
    p.add_argument("--seed", type=int, default=None, help="ランダム図形の乱数シード")
    p.add_argument(
        "--thickness",
        type=float,
        default=1.0,
        help="静的図形の線幅（1..5 に丸めてクランプ）",
    )
    for kind, names in SHAPE_FIELDS.items():
        p.add_argument(
            f"--{kind}",
            nargs=len(names),
            metavar=tuple(name.upper() for name in names),
            action=_AppendShape,
            const=kind,
            dest="shapes",
            help=f"起動時に {kind} を追加する（数値でない値は 0 として扱う）",
        )
    p.set_defaults(shapes=[])
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    # pyglet の import はウィンドウ環境を要するため、引数解釈の後まで遅らせる。
    from shapedraw.interactive.app import run

    run(
        config_path=args.config,
        seed=args.seed,
        shapes=args.shapes,
        thickness=args.thickness,
    )
    return 0


__all__ = ["main"]
