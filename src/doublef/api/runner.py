"""
どこで: `src/doublef/api/runner.py`。公開 API のランナー実装。
何を: pyglet + ModernGL のウィンドウで double F アニメーションを表示し、クリックで 1 ノードずつ進める。
なぜ: `main.py` から設定を渡すだけでアニメーションを確認できる経路を用意するため。
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyglet

from doublef.core.config import AnimationConfig
from doublef.core.runtime_config import runtime_config, set_config_path
from doublef.interactive.render_settings import RenderSettings
from doublef.interactive.runtime.stage_window_system import StageWindowSystem
from doublef.interactive.runtime.window_loop import WindowLoop, WindowTask

_logger = logging.getLogger(__name__)


def run(
    config: AnimationConfig | None = None,
    *,
    config_path: str | Path | None = None,
    canvas_size: tuple[int, int] | None = None,
    render_scale: float = 1.0,
    fps: float = 60.0,
) -> None:
    """pyglet ウィンドウを生成し、閉じられるまでアニメーションを描画する。

    Parameters
    ----------
    config : AnimationConfig | None
        アニメーション設定。None の場合は config.yaml（同梱既定 + 探索 + 明示パス）の `animation` を使う。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    canvas_size : tuple[int, int] | None
        キャンバス寸法 [px]。None の場合は config.yaml の `canvas.size`。
    render_scale : float
        キャンバス寸法に掛けるピクセル倍率。
    fps : float
        画面更新の目標フレームレート。tick 周期（`interval_ms`）とは独立。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。
    """

    if config_path is not None:
        set_config_path(config_path)
    runtime = runtime_config()
    animation = config if config is not None else runtime.animation

    # vsync はウィンドウ作成時に参照されるため、ここで固定しておく。
    pyglet.options["vsync"] = True

    settings = RenderSettings(
        canvas_size=canvas_size if canvas_size is not None else runtime.canvas_size,
        render_scale=float(render_scale),
        fps=float(fps),
    )
    stage = StageWindowSystem(
        animation,
        settings=settings,
        svg_output_path=runtime.output_dir / "svg" / "doublef.svg",
    )
    stage.window.set_location(*runtime.window_position)
    _logger.info(
        "doublef: nodes=%d canvas=%s interval=%sms",
        animation.node_count,
        settings.canvas_size,
        animation.interval_ms,
    )

    loop = WindowLoop(WindowTask(window=stage.window, draw_frame=stage.draw_frame), fps=settings.fps)
    try:
        loop.run()
    finally:
        # 例外でも確実に後始末する。
        stage.close()
