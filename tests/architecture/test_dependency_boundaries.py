"""依存境界（core/export/interactive）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

# 層ごとに import してはならないモジュール接頭辞。
_FORBIDDEN: dict[str, tuple[str, ...]] = {
    "core": ("shapedraw.export", "shapedraw.interactive", "pyglet"),
    "export": ("shapedraw.interactive", "pyglet"),
}

# core が使ってよいサードパーティ。
_CORE_THIRD_PARTY = ("numpy", "yaml")


def _src_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent / "src"
    raise RuntimeError("repo root が見つからない")


def _module_name(path: Path, src_root: Path) -> tuple[str, bool]:
    parts = list(path.relative_to(src_root).parts)
    is_package = parts[-1] == "__init__.py"
    if is_package:
        parts = parts[:-1]
    else:
        parts[-1] = parts[-1].removesuffix(".py")
    return ".".join(parts), is_package


def _importfrom_targets(current_module: str, is_package: bool, node: ast.ImportFrom) -> set[str]:
    level = int(node.level or 0)
    if level == 0:
        base = str(node.module or "")
    else:
        package = current_module if is_package else current_module.rsplit(".", 1)[0]
        parts = package.split(".")
        if level - 1 >= len(parts):
            raise ValueError(f"相対 import の解決に失敗: {current_module!r} level={level}")
        base = ".".join(parts[: len(parts) - (level - 1)])
        if node.module is not None:
            base = f"{base}.{node.module}"
    if not base:
        return set()
    return {base} | {f"{base}.{a.name}" for a in node.names if a.name != "*"}


def _imports(path: Path, src_root: Path) -> set[str]:
    module, is_package = _module_name(path, src_root)
    tree = ast.parse(path.read_text(encoding="utf-8"))
    found: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            found.update(_importfrom_targets(module, is_package, node))
    return found


def _layer_files(layer: str) -> list[Path]:
    root = _src_root() / "shapedraw" / layer
    files = sorted(p for p in root.rglob("*.py") if p.is_file())
    assert files, f"{layer} 層に python ファイルが無い"
    return files


@pytest.mark.parametrize("layer", sorted(_FORBIDDEN))
def test_layer_does_not_import_forbidden_modules(layer: str) -> None:
    src_root = _src_root()
    violations: list[str] = []
    for path in _layer_files(layer):
        bad = sorted(m for m in _imports(path, src_root) if m.startswith(_FORBIDDEN[layer]))
        if bad:
            violations.append(f"{path.relative_to(src_root)}: {', '.join(bad)}")
    if violations:
        joined = "\n".join(violations)
        raise AssertionError(f"依存境界違反の import を検出:\n{joined}")


def test_core_third_party_imports_are_limited() -> None:
    src_root = _src_root()
    allowed = ("shapedraw", "__future__", *_CORE_THIRD_PARTY)
    stdlib_roots = {
        "abc", "collections", "dataclasses", "importlib", "logging",
        "math", "os", "pathlib", "re", "typing",
    }
    for path in _layer_files("core"):
        for module in _imports(path, src_root):
            root = module.split(".", 1)[0]
            assert root in stdlib_roots or module.startswith(allowed), (
                f"{path.name}: 想定外の import {module!r}"
            )


def test_importfrom_targets_resolves_relative_imports() -> None:
    node = ast.parse("from ..export import svg\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    got = _importfrom_targets("shapedraw.core.canvas", False, node)
    assert got == {"shapedraw.export", "shapedraw.export.svg"}

    node = ast.parse("from . import pen\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    got = _importfrom_targets("shapedraw.core", True, node)
    assert "shapedraw.core.pen" in got


def test_importfrom_targets_rejects_unresolvable_relative_imports() -> None:
    node = ast.parse("from ...export import svg\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    with pytest.raises(ValueError):
        _importfrom_targets("shapedraw.core", True, node)
