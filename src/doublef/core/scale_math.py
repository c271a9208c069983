"""
どこで: `src/doublef/core/scale_math.py`。
何を: 1 ノード分の scale から、線分ごとの進捗や 1 tick あたりの増分を計算する純粋関数群を提供する。
なぜ: 線の「順番に伸びる」見た目と、前半/後半で速度が変わるアニメーションを状態から切り離して検証するため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

LINE_COUNT = 2
SCALE_GAP = 0.05
SCALE_DIV = 0.51


@dataclass(frozen=True, slots=True)
class ScaleParams:
    """AnimationState の tick に必要な補間パラメータの束。

    Parameters
    ----------
    line_count : int
        前半レジームのレート分母。グリフの横線本数と同じ値を使う。
    scale_gap : float
        1 tick あたりの基準増分。
    scale_div : float
        レジーム切替の閾値（`floor(scale / scale_div)`）。
    """

    line_count: int = LINE_COUNT
    scale_gap: float = SCALE_GAP
    scale_div: float = SCALE_DIV

    def __post_init__(self) -> None:
        if int(self.line_count) < 1:
            raise ValueError("line_count は 1 以上である必要がある")
        if not float(self.scale_gap) > 0.0:
            raise ValueError("scale_gap は正の値である必要がある")
        if not float(self.scale_div) > 0.0:
            raise ValueError("scale_div は正の値である必要がある")


def max_scale(scale: float, i: int, n: int) -> float:
    """`scale` から区間 i の開始位置 `i/n` を引いた値（0 で下限クリップ）を返す。"""

    return max(0.0, float(scale) - float(i) / float(n))


def bounded_progress(scale: float, segment_index: int, segment_count: int) -> float:
    """区間 `segment_index` の進捗を [0, 1] で返す。

    Parameters
    ----------
    scale : float
        全体進捗。
    segment_index : int
        対象区間の番号（0 始まり）。
    segment_count : int
        区間数。

    Returns
    -------
    float
        `scale` が `i/n` を超えると増え始め、`(i+1)/n` で 1 に飽和する値。

    Notes
    -----
    複数の線分やグリフを同時ではなく順番に出現させるためのずらし（stagger）に使う。
    """

    n = float(segment_count)
    return min(1.0 / n, max_scale(scale, segment_index, segment_count)) * n


def phase_index(scale: float, scale_div: float = SCALE_DIV) -> int:
    """`floor(scale / scale_div)` を返す。"""

    return int(math.floor(float(scale) / float(scale_div)))


def blended_rate(
    scale: float,
    rate_a: float,
    rate_b: float,
    scale_div: float = SCALE_DIV,
) -> float:
    """レジーム k に応じて `(1-k)/rate_a + k/rate_b` を返す。

    k は `phase_index` を {0, 1} に丸めた値。
    [0, 1] の範囲では phase_index そのもので、範囲外でも 2 レジームの切替に留まる。
    """

    k = min(1, max(0, phase_index(scale, scale_div)))
    return (1 - k) / float(rate_a) + k / float(rate_b)


def tick_delta(
    scale: float,
    direction: int,
    rate_a: float,
    rate_b: float,
    gap: float,
    scale_div: float = SCALE_DIV,
) -> float:
    """1 tick で scale に加える符号付き増分を返す。"""

    return blended_rate(scale, rate_a, rate_b, scale_div) * int(direction) * float(gap)


__all__ = [
    "LINE_COUNT",
    "SCALE_DIV",
    "SCALE_GAP",
    "ScaleParams",
    "blended_rate",
    "bounded_progress",
    "max_scale",
    "phase_index",
    "tick_delta",
]
