from __future__ import annotations

import pytest

from doublef.interactive.render_settings import RenderSettings


def test_window_size_applies_render_scale() -> None:
    settings = RenderSettings(canvas_size=(1200, 400), render_scale=1.5)

    assert settings.window_size == (1800, 600)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"canvas_size": (0, 100)},
        {"render_scale": 0.0},
        {"fps": -1.0},
    ],
)
def test_rejects_non_positive_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        RenderSettings(**kwargs)
