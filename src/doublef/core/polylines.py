# src/doublef/core/polylines.py
# 1 フレーム分のポリライン集合（coords/offsets 配列）と連結ユーティリティ。

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Polylines:
    """ポリライン列を頂点配列と開始インデックス配列で表現する。

    Parameters
    ----------
    coords : np.ndarray
        float32 型 shape (N, 3) の頂点配列。(N, 2) は z=0 を補完する。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    配列は writeable=False に固定する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        coords = np.asarray(self.coords, dtype=np.float32)
        offsets = np.asarray(self.offsets, dtype=np.int32)

        if coords.ndim == 2 and coords.shape[1] == 2:
            coords = np.concatenate(
                [coords, np.zeros((coords.shape[0], 1), dtype=np.float32)], axis=1
            )
        elif coords.ndim == 1 and coords.size == 0:
            coords = coords.reshape(0, 3)

        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError("coords は shape (N,3) の 2 次元配列である必要がある")
        if offsets.ndim != 1 or offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素の 1 次元配列である必要がある")
        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")
        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        # 呼び出し元の配列を巻き込まないよう、所有コピーを凍結する。
        coords = coords.copy()
        offsets = offsets.copy()
        coords.setflags(write=False)
        offsets.setflags(write=False)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def empty(cls) -> "Polylines":
        return cls(
            coords=np.zeros((0, 3), dtype=np.float32),
            offsets=np.zeros((1,), dtype=np.int32),
        )

    @classmethod
    def from_segments(cls, segments: Sequence[np.ndarray]) -> "Polylines":
        """点列（shape (K, 2|3)）のリストから生成する。"""

        if not segments:
            return cls.empty()
        parts = [np.asarray(s, dtype=np.float32) for s in segments]
        parts = [
            np.concatenate([p, np.zeros((p.shape[0], 1), dtype=np.float32)], axis=1)
            if p.ndim == 2 and p.shape[1] == 2
            else p
            for p in parts
        ]
        offsets = np.zeros((len(parts) + 1,), dtype=np.int32)
        offsets[1:] = np.cumsum([p.shape[0] for p in parts])
        return cls(coords=np.concatenate(parts, axis=0), offsets=offsets)

    @property
    def n_polylines(self) -> int:
        return int(self.offsets.size - 1)

    def iter_polylines(self) -> Iterator[np.ndarray]:
        """各ポリラインの coords ビューを順に返す。"""

        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[int(start) : int(end)]


def concat_polylines(*items: Polylines) -> Polylines:
    """複数の Polylines を連結して 1 つにまとめる。"""

    if not items:
        return Polylines.empty()

    coords = np.concatenate([p.coords for p in items], axis=0)
    new_offsets: list[int] = [0]
    base = 0
    for p in items:
        # 先頭 0 を除いた部分だけをシフトして足し込む。
        new_offsets.extend((p.offsets[1:] + base).tolist())
        base += int(p.offsets[-1])
    return Polylines(coords=coords, offsets=np.asarray(new_offsets, dtype=np.int32))


__all__ = ["Polylines", "concat_polylines"]
