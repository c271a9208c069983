"""
どこで: `src/doublef/export/svg.py`。
何を: 1 フレーム分の Frame を SVG として保存する関数を提供する。
なぜ: GPU/ウィンドウ無しで同じ見た目を書き出し、確認・比較できるようにするため。

出力は背景の `<rect>` と、共通の線スタイルを持つ `<g>` 内のポリラインごとの `<path>`。
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import numpy as np

from doublef.core.color import rgb01_to_hex
from doublef.core.scene import Frame

_SVG_NS = "http://www.w3.org/2000/svg"
_DECIMALS = 3


def _num(value: float) -> str:
    """小数 3 桁固定で整形する（`-0.000` は `0.000` に揃える）。"""
    text = f"{float(value):.{_DECIMALS}f}"
    return text[1:] if text.startswith("-") and float(text) == 0.0 else text


def _path_data(xy: np.ndarray) -> str:
    head, *rest = (f"{_num(x)} {_num(y)}" for x, y in xy)
    return " ".join([f"M {head}", *(f"L {p}" for p in rest)])


def _svg_lines(frame: Frame) -> Iterator[str]:
    w, h = (int(v) for v in frame.canvas_size)
    # Frame の線幅はクリップ空間（min(w, h) / 2 == 1）なので px へ戻す。
    stroke_width = _num(float(frame.thickness) * min(w, h) / 2.0)

    yield '<?xml version="1.0" encoding="UTF-8"?>'
    yield f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">'
    yield f'  <rect width="{w}" height="{h}" fill="{rgb01_to_hex(frame.background)}" />'
    yield (
        f'  <g fill="none" stroke="{rgb01_to_hex(frame.color)}" stroke-width="{stroke_width}" '
        'stroke-linecap="round" stroke-linejoin="round">'
    )
    for polyline in frame.polylines.iter_polylines():
        if polyline.shape[0] >= 2:
            yield f'    <path d="{_path_data(polyline[:, :2])}" />'
    yield "  </g>"
    yield "</svg>"


def export_svg(frame: Frame, path: str | Path) -> Path:
    """Frame を SVG として保存し、保存先パスを返す。

    同じ Frame からは常にバイト単位で同じファイルを書く。親ディレクトリは作成する。

    Raises
    ------
    ValueError
        frame.canvas_size が正でない場合。
    """
    canvas_w, canvas_h = frame.canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="\n") as f:
        for line in _svg_lines(frame):
            f.write(line + "\n")
    return out


__all__ = ["export_svg"]
