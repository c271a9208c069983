# どこで: `src/doublef/core/config.py`。
# 何を: アニメーションと描画の定数をまとめた不変設定値 `AnimationConfig` を定義する。
# なぜ: プロセス全体のグローバル定数をやめ、状態機械とレンダラに構築時に明示的に渡すため。

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from doublef.core.color import ColorRGB, hex_to_rgb01, parse_hex_color
from doublef.core.scale_math import LINE_COUNT, SCALE_DIV, SCALE_GAP, ScaleParams


@dataclass(frozen=True, slots=True)
class AnimationConfig:
    """double F アニメーションの設定値。

    Parameters
    ----------
    node_count : int
        横一列に並ぶノード数（1 以上）。
    line_count : int
        1 グリフの横線本数。1 ノード内のグリフ数と前半レジームのレートも兼ねる。
    scale_gap : float
        1 tick あたりの基準増分。
    scale_div : float
        速度レジームの切替閾値。
    stroke_factor : float
        線幅 = `min(w, h) / stroke_factor`。
    size_factor : float
        ノードサイズ = ノード間隔 / `size_factor`。
    gap_factor : float
        グリフの左右オフセット = サイズ / `gap_factor`。
    gap_size_factor : float
        グリフサイズ = サイズ / `gap_size_factor`。
    fore_color : str
        線色（`#RRGGBB`）。
    back_color : str
        背景色（`#RRGGBB`）。
    interval_ms : float
        tick 周期 [ms]。
    """

    node_count: int = 1
    line_count: int = LINE_COUNT
    scale_gap: float = SCALE_GAP
    scale_div: float = SCALE_DIV
    stroke_factor: float = 90.0
    size_factor: float = 2.8
    gap_factor: float = 1.3
    gap_size_factor: float = 2.0
    fore_color: str = "#1565C0"
    back_color: str = "#bdbdbd"
    interval_ms: float = 50.0

    def __post_init__(self) -> None:
        if int(self.node_count) < 1:
            raise ValueError(f"node_count は 1 以上である必要がある: got={self.node_count!r}")
        for name in ("stroke_factor", "size_factor", "gap_factor", "gap_size_factor", "interval_ms"):
            if not float(getattr(self, name)) > 0.0:
                raise ValueError(f"{name} は正の値である必要がある: got={getattr(self, name)!r}")
        parse_hex_color(self.fore_color)
        parse_hex_color(self.back_color)
        # line_count / scale_gap / scale_div の検証は ScaleParams に任せる。
        ScaleParams(
            line_count=int(self.line_count),
            scale_gap=float(self.scale_gap),
            scale_div=float(self.scale_div),
        )

    @property
    def scale_params(self) -> ScaleParams:
        return ScaleParams(
            line_count=int(self.line_count),
            scale_gap=float(self.scale_gap),
            scale_div=float(self.scale_div),
        )

    @property
    def fore_rgb01(self) -> ColorRGB:
        return hex_to_rgb01(self.fore_color)

    @property
    def back_rgb01(self) -> ColorRGB:
        return hex_to_rgb01(self.back_color)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "AnimationConfig":
        """設定ファイル由来の mapping から生成する。未知キーは RuntimeError。"""

        defaults = {f.name: f.default for f in fields(cls)}
        unknown = sorted(str(k) for k in values if k not in defaults)
        if unknown:
            raise RuntimeError(f"animation に未知のキーがあります: {unknown}")

        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            default = defaults[key]
            try:
                if isinstance(default, str):
                    kwargs[key] = str(value)
                elif isinstance(default, int):
                    kwargs[key] = int(value)
                else:
                    kwargs[key] = float(value)
            except (TypeError, ValueError) as exc:
                raise RuntimeError(f"animation.{key} の型が不正です: got={value!r}") from exc
        return cls(**kwargs)


__all__ = ["AnimationConfig"]
