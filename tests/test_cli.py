"""`shapedraw` コマンドの引数解釈のテスト（ウィンドウは開かない）。"""

from __future__ import annotations

from pathlib import Path

import pytest

from shapedraw.cli import _parse_args


def test_defaults() -> None:
    args = _parse_args([])

    assert args.config is None
    assert args.seed is None
    assert args.thickness == 1.0
    assert args.shapes == []


def test_static_shapes_keep_command_line_order() -> None:
    args = _parse_args(
        [
            "--circle", "100", "100", "50",
            "--line", "10", "20", "-30", "abc",
            "--rectangle", "5", "6", "7", "8",
            "--thickness", "3",
            "--seed", "7",
            "--config", "my.yaml",
        ]
    )

    assert args.shapes == [
        ("circle", {"cx": "100", "cy": "100", "radius": "50"}),
        ("line", {"x1": "10", "y1": "20", "x2": "-30", "y2": "abc"}),
        ("rectangle", {"x": "5", "y": "6", "width": "7", "height": "8"}),
    ]
    assert args.thickness == 3.0
    assert args.seed == 7
    assert args.config == Path("my.yaml")


def test_wrong_field_count_is_a_usage_error() -> None:
    with pytest.raises(SystemExit):
        _parse_args(["--circle", "1", "2"])
