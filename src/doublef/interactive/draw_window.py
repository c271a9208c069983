# どこで: `src/doublef/interactive/draw_window.py`。
# 何を: double F を描く固定サイズの pyglet ウィンドウを生成する。
# なぜ: pyglet 依存を interactive 層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import Config
from pyglet.window import Window

from doublef.interactive.render_settings import RenderSettings

_logger = logging.getLogger(__name__)

_MSAA_SAMPLES = 4


def _open(settings: RenderSettings, config: Config) -> Window:
    width, height = settings.window_size
    return pyglet.window.Window(  # type: ignore[abstract]
        width=width,
        height=height,
        resizable=False,
        caption=settings.caption,
        config=config,
    )


def create_draw_window(settings: RenderSettings) -> Window:
    """MSAA 付きの描画ウィンドウを返す。

    GPU/ドライバが MSAA 設定を受け付けない場合は、サンプル無しで作り直す。
    """
    msaa = Config(double_buffer=True, sample_buffers=1, samples=_MSAA_SAMPLES)  # type: ignore[abstract]
    try:
        return _open(settings, msaa)
    except pyglet.window.NoSuchConfigException:
        _logger.warning("MSAA x%d is unavailable; falling back to no multisampling", _MSAA_SAMPLES)
    return _open(settings, Config(double_buffer=True))  # type: ignore[abstract]
