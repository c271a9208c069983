"""
どこで: `src/doublef/core/glyph.py`。
何を: "F" グリフと、それを 2 つ組み合わせた double F ノードのポリラインを scale から生成する。
なぜ: canvas の save/translate/rotate 相当を 3x3 アフィン行列で表し、描画バックエンドから独立させるため。

座標系はキャンバス準拠（左上原点・y 下向き）。
"""

from __future__ import annotations

import math

import numpy as np

from doublef.core.config import AnimationConfig
from doublef.core.polylines import Polylines
from doublef.core.scale_math import bounded_progress


def translation(x: float, y: float) -> np.ndarray:
    return np.array(
        [
            [1.0, 0.0, float(x)],
            [0.0, 1.0, float(y)],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def rotation(theta: float) -> np.ndarray:
    """角度 theta [rad] の回転行列を返す（y 下向き座標では時計回り）。"""
    c = math.cos(float(theta))
    s = math.sin(float(theta))
    return np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def apply_affine(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """shape (K, 2) の点列に 3x3 アフィン行列を適用して返す。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    homo = np.concatenate([pts, np.ones((pts.shape[0], 1), dtype=np.float64)], axis=1)
    return (homo @ np.asarray(matrix, dtype=np.float64).T)[:, :2]


def f_glyph(size: float, scale: float, line_count: int) -> list[np.ndarray]:
    """F グリフ 1 つ分の線分列（グリフ座標）を返す。

    Parameters
    ----------
    size : float
        グリフの半高さ。縦線は `(0, -size)` から `(0, size)`。
    scale : float
        横線の伸び具合。横線 i は `bounded_progress(scale, i, line_count)` に比例して伸びる。
    line_count : int
        横線の本数。

    Returns
    -------
    list[np.ndarray]
        shape (2, 2) の線分列。長さ 0 の横線は含めない。
    """

    size_f = float(size)
    segments = [np.array([[0.0, -size_f], [0.0, size_f]], dtype=np.float64)]
    for i in range(int(line_count)):
        y = i * size_f - size_f
        length = size_f / 2.0 * (2 - i) * bounded_progress(scale, i, line_count)
        if length <= 0.0:
            continue
        segments.append(np.array([[0.0, y], [length, y]], dtype=np.float64))
    return segments


def node_spacing(config: AnimationConfig, canvas_size: tuple[int, int]) -> float:
    """ノード中心どうしの横間隔を返す。"""
    canvas_w, _ = canvas_size
    return float(canvas_w) / float(config.node_count + 1)


def stroke_width(config: AnimationConfig, canvas_size: tuple[int, int]) -> float:
    """ピクセル単位の線幅 `min(w, h) / stroke_factor` を返す。"""
    canvas_w, canvas_h = canvas_size
    return float(min(canvas_w, canvas_h)) / float(config.stroke_factor)


def double_f_node(
    index: int,
    scale: float,
    config: AnimationConfig,
    canvas_size: tuple[int, int],
) -> Polylines:
    """ノード `index` の double F をキャンバス座標のポリラインとして返す。

    Notes
    -----
    前半（sc1）で各グリフの横線が順に伸び、後半（sc2）で 2 つ目以降のグリフが
    反転しながら左へ移動して 1 つ目と向かい合う。
    """

    _, canvas_h = canvas_size
    gap = node_spacing(config, canvas_size)
    size = gap / float(config.size_factor)
    d_size = size / float(config.gap_size_factor)
    d_gap = size / float(config.gap_factor)
    sc1 = bounded_progress(scale, 0, 2)
    sc2 = bounded_progress(scale, 1, 2)
    line_count = int(config.line_count)

    origin = translation(gap * (int(index) + 1), float(canvas_h) / 2.0)
    segments: list[np.ndarray] = []
    for j in range(line_count):
        local = (
            origin
            @ translation(d_gap - 2.0 * d_gap * sc2 * j, 0.0)
            @ rotation(math.pi * j * (1.0 - sc2))
        )
        glyph_scale = bounded_progress(sc1, j, line_count)
        for seg in f_glyph(d_size, glyph_scale, line_count):
            segments.append(apply_affine(local, seg))
    return Polylines.from_segments(segments)


__all__ = [
    "apply_affine",
    "double_f_node",
    "f_glyph",
    "node_spacing",
    "rotation",
    "stroke_width",
    "translation",
]
