# どこで: `src/doublef/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ノード数や色・出力先を、コードを書き換えずにユーザーが指定できるようにするため。

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from doublef.core.config import AnimationConfig

_logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 1
_PACKAGED_SOURCE = "doublef/resource/default_config.yaml"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """doublef の実行時設定。

    Attributes
    ----------
    config_path : Path | None
        同梱既定の上に重ねたユーザー config のうち、最も優先度の高いもの。
    output_dir : Path
        SVG などの出力ルート。
    window_position : tuple[int, int]
        描画ウィンドウの初期位置。
    canvas_size : tuple[int, int]
        キャンバス寸法 [px]。
    animation : AnimationConfig
        `animation:` セクションから組み立てたアニメーション設定。
    """

    config_path: Path | None
    output_dir: Path
    window_position: tuple[int, int]
    canvas_size: tuple[int, int]
    animation: AnimationConfig


_explicit_path: Path | None = None
_cached: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定し、キャッシュを捨てる。None で既定の探索に戻る。"""

    global _explicit_path, _cached
    _explicit_path = None if path is None else Path(str(path)).expanduser()
    _cached = None


def _discover_user_config() -> Path | None:
    """カレント優先で最初に見つかったユーザー config を返す。"""
    for candidate in (
        Path.cwd() / ".doublef" / "config.yaml",
        Path.home() / ".config" / "doublef" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return data


def _read_packaged_defaults() -> dict[str, Any]:
    resource = resources.files("doublef").joinpath("resource", "default_config.yaml")
    try:
        text = resource.read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            f"同梱 config を読めません（package-data を確認してください）: {_PACKAGED_SOURCE}"
        ) from exc
    return _parse_yaml(text, source=_PACKAGED_SOURCE)


def _layers(explicit: Path | None, discovered: Path | None) -> Iterator[dict[str, Any]]:
    """優先度の低い順に config の層を返す。"""
    yield _read_packaged_defaults()
    for path in (discovered, explicit):
        if path is not None:
            yield _parse_yaml(path.read_text(encoding="utf-8"), source=str(path))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping 同士は再帰的に、それ以外は override で置き換える。"""
    out = dict(base)
    for key, value in override.items():
        if isinstance(out.get(key), dict) and isinstance(value, dict):
            out[key] = _deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def _section(payload: dict[str, Any], name: str) -> dict[str, Any]:
    value = payload.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RuntimeError(f"{name} は mapping である必要があります: got={value!r}")
    return value


def _required(section: dict[str, Any], key: str, *, dotted: str) -> Any:
    value = section.get(key)
    if value is None:
        raise RuntimeError(f"{dotted} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def _int_pair(value: Any, *, dotted: str) -> tuple[int, int]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return int(value[0]), int(value[1])
        except (TypeError, ValueError):
            pass
    raise RuntimeError(f"{dotted} は [x, y] の整数配列である必要があります: got={value!r}")


def _expand_path(value: Any) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(str(value).strip())))


def _build(payload: dict[str, Any], *, source: Path | None) -> RuntimeConfig:
    version = payload.get("version")
    if isinstance(version, bool) or not isinstance(version, int):
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}")
    if version != SUPPORTED_VERSION:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    paths = _section(payload, "paths")
    output_dir = _expand_path(_required(paths, "output_dir", dotted="paths.output_dir"))

    ui = _section(payload, "ui")
    window_position = _int_pair(
        _required(ui, "window_position", dotted="ui.window_position"),
        dotted="ui.window_position",
    )

    canvas = _section(payload, "canvas")
    canvas_size = _int_pair(_required(canvas, "size", dotted="canvas.size"), dotted="canvas.size")
    if min(canvas_size) <= 0:
        raise ValueError(f"canvas.size は正の値である必要がある: got={canvas_size}")

    return RuntimeConfig(
        config_path=source,
        output_dir=output_dir,
        window_position=window_position,
        canvas_size=canvas_size,
        animation=AnimationConfig.from_mapping(_section(payload, "animation")),
    )


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.doublef/config.yaml`（無ければ `~/.config/doublef/config.yaml`）
    3) `set_config_path()` / `run(..., config_path=...)` の明示パス

    Raises
    ------
    FileNotFoundError
        明示パスが存在しない場合。
    RuntimeError
        YAML の構文・型・version が不正な場合。
    ValueError
        値が範囲外の場合（ノード数 0、負のキャンバス寸法など）。
    """

    global _cached
    if _cached is not None:
        return _cached

    explicit = _explicit_path
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")
    discovered = _discover_user_config()
    if discovered is not None:
        _logger.debug("discovered config: %s", discovered)

    payload: dict[str, Any] = {}
    for layer in _layers(explicit, discovered):
        payload = _deep_merge(payload, layer)

    _cached = _build(payload, source=explicit or discovered)
    return _cached


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    return runtime_config().output_dir


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
