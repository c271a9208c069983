"""
どこで: `src/doublef/core/scene.py`。
何を: 全ノードの scale から 1 フレーム分の描画内容（ポリライン + スタイル）を組み立てる。
なぜ: GL 描画と SVG export が同じ Frame を共有し、見た目の差を生まないようにするため。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from doublef.core.color import ColorRGB
from doublef.core.config import AnimationConfig
from doublef.core.glyph import double_f_node, stroke_width
from doublef.core.polylines import Polylines, concat_polylines


@dataclass(frozen=True, slots=True)
class Frame:
    """1 フレーム分の描画内容。

    Parameters
    ----------
    polylines : Polylines
        キャンバス座標のポリライン集合。
    color : ColorRGB
        線色 RGB（0..1）。
    background : ColorRGB
        背景色 RGB（0..1）。
    thickness : float
        線幅。`min(w, h) / 2` を 1 とするクリップ空間単位。
    canvas_size : tuple[int, int]
        キャンバス寸法。
    """

    polylines: Polylines
    color: ColorRGB
    background: ColorRGB
    thickness: float
    canvas_size: tuple[int, int]


def build_frame(
    config: AnimationConfig,
    scales: Sequence[float],
    canvas_size: tuple[int, int],
) -> Frame:
    """ノード順に double F を生成し、1 つの Frame にまとめて返す。

    Raises
    ------
    ValueError
        `scales` の長さが node_count と一致しない場合、またはキャンバス寸法が正でない場合。
    """

    if len(scales) != int(config.node_count):
        raise ValueError(
            f"scales の長さは node_count と一致する必要がある: got={len(scales)}, node_count={config.node_count}"
        )
    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    nodes = [
        double_f_node(i, scale, config, canvas_size) for i, scale in enumerate(scales)
    ]
    thickness = stroke_width(config, canvas_size) / (float(min(canvas_w, canvas_h)) / 2.0)
    return Frame(
        polylines=concat_polylines(*nodes),
        color=config.fore_rgb01,
        background=config.back_rgb01,
        thickness=float(thickness),
        canvas_size=(int(canvas_w), int(canvas_h)),
    )


__all__ = ["Frame", "build_frame"]
