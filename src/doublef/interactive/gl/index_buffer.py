# どこで: `src/doublef/interactive/gl/index_buffer.py`。
# 何を: Polylines.offsets から GL_LINE_STRIP + primitive restart 用のインデックス配列を生成する。
# なぜ: GL 無しで検証できる純粋関数として、描画側から切り離すため。

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from doublef.interactive.gl.line_mesh import LineMesh

_EMPTY = np.zeros((0,), dtype=np.uint32)
_EMPTY.setflags(write=False)


@dataclass(frozen=True, slots=True)
class LineIndexStats:
    """描いたポリラインの本数と頂点数。"""

    draw_vertices: int
    draw_lines: int


def build_line_indices(offsets: np.ndarray) -> np.ndarray:
    indices, _ = build_line_indices_and_stats(offsets)
    return indices


def build_line_indices_and_stats(offsets: np.ndarray) -> tuple[np.ndarray, LineIndexStats]:
    """offsets から読み取り専用の indices と描画統計を返す。

    Notes
    -----
    頂点 2 未満のポリラインは描かない。ポリライン間には `LineMesh.PRIMITIVE_RESTART_INDEX`
    を挟むため、全ノードを 1 draw call で描ける。double F は tick ごとに同じ構造を
    繰り返すので、offsets の内容をキーに LRU キャッシュする。
    """
    offsets_i32 = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_i32.size < 2:
        return _EMPTY, LineIndexStats(draw_vertices=0, draw_lines=0)
    return _cached_indices(offsets_i32.tobytes())


@lru_cache(maxsize=64)
def _cached_indices(offsets_bytes: bytes) -> tuple[np.ndarray, LineIndexStats]:
    offsets = np.frombuffer(offsets_bytes, dtype=np.int32)
    lengths = np.diff(offsets)
    drawn = lengths >= 2
    starts = offsets[:-1][drawn]
    counts = lengths[drawn]
    if counts.size == 0:
        return _EMPTY, LineIndexStats(draw_vertices=0, draw_lines=0)

    out = np.empty((int(counts.sum()) + counts.size - 1,), dtype=np.uint32)
    _fill_strips(out, starts, counts, np.uint32(LineMesh.PRIMITIVE_RESTART_INDEX))
    out.setflags(write=False)
    return out, LineIndexStats(draw_vertices=int(counts.sum()), draw_lines=int(counts.size))


@njit(cache=True)  # type: ignore[misc]
def _fill_strips(
    out: np.ndarray,
    starts: np.ndarray,
    counts: np.ndarray,
    restart_index: np.uint32,
) -> None:
    cursor = 0
    for k in range(starts.shape[0]):
        if k > 0:
            out[cursor] = restart_index
            cursor += 1
        for j in range(counts[k]):
            out[cursor] = starts[k] + j
            cursor += 1
