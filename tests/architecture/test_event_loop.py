"""ビューアのイベントループが固定間隔で再描画しないことを AST で確認するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path

_INTERACTIVE = Path(__file__).resolve().parents[2] / "src" / "shapedraw" / "interactive"


def _calls(path: Path) -> list[ast.Call]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    return [node for node in ast.walk(tree) if isinstance(node, ast.Call)]


def _dotted(node: ast.AST) -> str:
    if isinstance(node, ast.Attribute):
        return f"{_dotted(node.value)}.{node.attr}"
    if isinstance(node, ast.Name):
        return node.id
    return ""


def test_app_run_disables_periodic_redraw() -> None:
    runs = [c for c in _calls(_INTERACTIVE / "app.py") if _dotted(c.func) == "pyglet.app.run"]

    assert len(runs) == 1
    (call,) = runs
    interval = {kw.arg: kw.value for kw in call.keywords}.get("interval")
    assert isinstance(interval, ast.Constant) and interval.value is None


def test_interactive_layer_schedules_no_periodic_callbacks() -> None:
    periodic = {"pyglet.clock.schedule", "pyglet.clock.schedule_interval"}
    for path in sorted(_INTERACTIVE.rglob("*.py")):
        found = sorted({_dotted(c.func) for c in _calls(path)} & periodic)
        assert not found, f"{path.name}: {found}"
