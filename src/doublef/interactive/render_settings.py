# どこで: `src/doublef/interactive/render_settings.py`。
# 何を: ライブ描画の設定値（キャンバス寸法・倍率・fps）をまとめるデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ち、ウィンドウとレンダラで同じ値を共有するため。

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    canvas_size: tuple[int, int] = (800, 800)
    render_scale: float = 1.0
    fps: float = 60.0
    caption: str = "doublef"

    def __post_init__(self) -> None:
        canvas_w, canvas_h = self.canvas_size
        if canvas_w <= 0 or canvas_h <= 0:
            raise ValueError("canvas_size は正の値である必要がある")
        if not float(self.render_scale) > 0.0:
            raise ValueError("render_scale は正の値である必要がある")
        if not float(self.fps) > 0.0:
            raise ValueError("fps は正の値である必要がある")

    @property
    def window_size(self) -> tuple[int, int]:
        """`canvas_size * render_scale` を整数に丸めたウィンドウ寸法 [px]。"""
        canvas_w, canvas_h = self.canvas_size
        scale = float(self.render_scale)
        return int(round(canvas_w * scale)), int(round(canvas_h * scale))
