# どこで: `src/shapedraw/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ウィンドウ寸法・Canvas 矩形・座標軸・出力先をコード変更なしで差し替えられるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from shapedraw.core.canvas import AxisStyle, CanvasBounds
from shapedraw.core.color import ColorRGB


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """shapedraw の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    window_size: tuple[int, int]
    window_caption: str
    canvas_bounds: CanvasBounds
    background_color: ColorRGB
    axis_color: ColorRGB
    axis: AxisStyle
    png_scale: float


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".shapedraw" / "config.yaml",
        home / ".config" / "shapedraw" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_seq(value: Any, *, key: str, n: int) -> tuple[int, ...]:
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は長さ {n} の配列である必要があります: got={value!r}") from exc
    if len(seq) != n:
        raise RuntimeError(f"{key} は長さ {n} の配列である必要があります: got={value!r}")
    try:
        return tuple(int(v) for v in seq)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数配列である必要があります: got={value!r}") from exc


def _as_rgb01(value: Any, *, key: str) -> ColorRGB:
    try:
        r, g, b = value
        return float(r), float(g), float(b)
    except Exception as exc:
        raise RuntimeError(f"{key} は [r, g, b]（0..1）である必要があります: got={value!r}") from exc


def _as_int(value: Any, *, key: str) -> int:
    try:
        return int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float:
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _require(mapping: dict[str, Any], name: str, *, key: str) -> Any:
    value = mapping.get(name)
    if value is None:
        raise RuntimeError(
            f"{key} が未設定です（同梱 default_config.yaml を確認してください）"
        )
    return value


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("shapedraw")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="shapedraw/resource/default_config.yaml")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    # セクション（mapping）単位では再帰的に後勝ちで上書きする。
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。"""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = _as_int(_require(payload, "version", key="version"), key="version")
    if version != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _as_optional_path(paths.get("output_dir"))
    if output_dir is None:
        raise RuntimeError(
            "paths.output_dir が未設定です（同梱 default_config.yaml を確認してください）"
        )

    window = _as_mapping(payload.get("window"), key="window")
    win_w, win_h = _as_int_seq(
        _require(window, "size", key="window.size"), key="window.size", n=2
    )
    caption = str(window.get("caption") or "Shape Drawer")

    canvas = _as_mapping(payload.get("canvas"), key="canvas")
    bx, by, bw, bh = _as_int_seq(
        _require(canvas, "bounds", key="canvas.bounds"), key="canvas.bounds", n=4
    )
    if bw < 0 or bh < 0:
        raise RuntimeError(f"canvas.bounds の幅・高さは 0 以上である必要があります: got={(bw, bh)}")
    background_color = _as_rgb01(
        _require(canvas, "background_color", key="canvas.background_color"),
        key="canvas.background_color",
    )
    axis_color = _as_rgb01(
        _require(canvas, "axis_color", key="canvas.axis_color"),
        key="canvas.axis_color",
    )

    axis_map = _as_mapping(payload.get("axis"), key="axis")
    axis = AxisStyle(
        step=_as_int(_require(axis_map, "step", key="axis.step"), key="axis.step"),
        y_label_max=_as_int(
            _require(axis_map, "y_label_max", key="axis.y_label_max"), key="axis.y_label_max"
        ),
        x_label_min=_as_int(
            _require(axis_map, "x_label_min", key="axis.x_label_min"), key="axis.x_label_min"
        ),
        x_extent=_as_int(
            _require(axis_map, "x_extent", key="axis.x_extent"), key="axis.x_extent"
        ),
    )
    if axis.step <= 0:
        raise RuntimeError(f"axis.step は正の値である必要があります: got={axis.step}")

    export = _as_mapping(payload.get("export"), key="export")
    png = _as_mapping(export.get("png"), key="export.png")
    png_scale = _as_float(_require(png, "scale", key="export.png.scale"), key="export.png.scale")
    if png_scale <= 0:
        raise ValueError(f"export.png.scale は正の値である必要があります: got={png_scale}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        window_size=(win_w, win_h),
        window_caption=caption,
        canvas_bounds=CanvasBounds(x=bx, y=by, width=bw, height=bh),
        background_color=background_color,
        axis_color=axis_color,
        axis=axis,
        png_scale=float(png_scale),
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.shapedraw/config.yaml` / `~/.config/shapedraw/config.yaml`
    3) `set_config_path(...)` で指定したパス
    """

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
