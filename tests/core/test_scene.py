"""build_frame による Frame 組み立てのテスト。"""

from __future__ import annotations

import pytest

from doublef.core.config import AnimationConfig
from doublef.core.scene import build_frame


def test_build_frame_concatenates_all_nodes() -> None:
    config = AnimationConfig(node_count=3)

    frame = build_frame(config, (0.0, 1.0, 0.0), (900, 300))

    assert frame.polylines.n_polylines == 2 + 6 + 2
    assert frame.canvas_size == (900, 300)
    assert frame.color == config.fore_rgb01
    assert frame.background == config.back_rgb01


def test_frame_thickness_is_in_clip_units() -> None:
    config = AnimationConfig(stroke_factor=90.0)

    frame = build_frame(config, (0.0,), (900, 300))

    assert frame.thickness == pytest.approx(2.0 / 90.0)


def test_build_frame_rejects_scale_count_mismatch() -> None:
    with pytest.raises(ValueError):
        build_frame(AnimationConfig(node_count=2), (0.0,), (100, 100))


def test_build_frame_rejects_non_positive_canvas() -> None:
    with pytest.raises(ValueError):
        build_frame(AnimationConfig(), (0.0,), (0, 100))
