"""F グリフ / double F ノードのジオメトリのテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from doublef.core.config import AnimationConfig
from doublef.core.glyph import (
    apply_affine,
    double_f_node,
    f_glyph,
    node_spacing,
    rotation,
    stroke_width,
    translation,
)

CANVAS = (800, 800)


def test_affine_helpers_compose_like_canvas_transforms() -> None:
    m = translation(10.0, 20.0) @ rotation(math.pi / 2)

    out = apply_affine(m, np.array([[1.0, 0.0]]))

    np.testing.assert_allclose(out, [[10.0, 21.0]], atol=1e-9)


def test_f_glyph_at_zero_scale_is_only_the_stem() -> None:
    segments = f_glyph(10.0, 0.0, 2)

    assert len(segments) == 1
    np.testing.assert_allclose(segments[0], [[0.0, -10.0], [0.0, 10.0]])


def test_f_glyph_at_full_scale_has_staggered_bars() -> None:
    segments = f_glyph(10.0, 1.0, 2)

    assert len(segments) == 3
    np.testing.assert_allclose(segments[1], [[0.0, -10.0], [10.0, -10.0]])
    np.testing.assert_allclose(segments[2], [[0.0, 0.0], [5.0, 0.0]])


def test_f_glyph_second_bar_waits_for_first() -> None:
    segments = f_glyph(10.0, 0.25, 2)

    # 1 本目が半分伸びた時点で 2 本目はまだ出ない。
    assert len(segments) == 2
    np.testing.assert_allclose(segments[1], [[0.0, -10.0], [5.0, -10.0]])


def _d_gap(config: AnimationConfig) -> float:
    size = node_spacing(config, CANVAS) / config.size_factor
    return size / config.gap_factor


def test_double_f_node_at_rest_overlaps_both_stems() -> None:
    config = AnimationConfig()

    p = double_f_node(0, 0.0, config, CANVAS)

    assert p.n_polylines == 2
    expected_x = 400.0 + _d_gap(config)
    np.testing.assert_allclose(p.coords[:, 0], expected_x, rtol=0.0, atol=1e-3)


def test_double_f_node_at_full_scale_places_glyphs_symmetrically() -> None:
    config = AnimationConfig()

    p = double_f_node(0, 1.0, config, CANVAS)
    polylines = list(p.iter_polylines())

    assert len(polylines) == 6
    d_gap = _d_gap(config)
    np.testing.assert_allclose(polylines[0][:, 0], 400.0 + d_gap, atol=1e-3)
    np.testing.assert_allclose(polylines[3][:, 0], 400.0 - d_gap, atol=1e-3)
    # 縦方向はキャンバス中央を中心にする。
    assert polylines[0][:, 1].mean() == pytest.approx(400.0, abs=1e-3)


def test_nodes_are_spread_evenly_across_canvas() -> None:
    config = AnimationConfig(node_count=3)

    xs = [double_f_node(i, 0.0, config, CANVAS).coords[0, 0] for i in range(3)]

    gaps = np.diff(xs)
    np.testing.assert_allclose(gaps, node_spacing(config, CANVAS), atol=1e-3)


def test_stroke_width_uses_short_canvas_side() -> None:
    assert stroke_width(AnimationConfig(), (900, 450)) == pytest.approx(5.0)
