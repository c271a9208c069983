# どこで: `src/doublef/interactive/runtime/stage_window_system.py`。
# 何を: double F アニメーションを描画ウィンドウへ描き、マウス/キー入力を AnimationController へ渡す。
# なぜ: `api/runner.py` の `run()` を「配線」に寄せ、描画と入力の責務を独立させるため。

from __future__ import annotations

import logging
from pathlib import Path

from pyglet.window import key

from doublef.core.config import AnimationConfig
from doublef.core.scene import Frame
from doublef.export.svg import export_svg
from doublef.interactive.controller import AnimationController
from doublef.interactive.draw_window import create_draw_window
from doublef.interactive.gl.draw_renderer import DrawRenderer
from doublef.interactive.render_settings import RenderSettings

_logger = logging.getLogger(__name__)


class StageWindowSystem:
    """描画ウィンドウのサブシステム。"""

    def __init__(
        self,
        config: AnimationConfig,
        *,
        settings: RenderSettings,
        svg_output_path: Path,
    ) -> None:
        self._config = config
        self._settings = settings
        self._svg_output_path = Path(svg_output_path)

        self.window = create_draw_window(settings)
        self._renderer = DrawRenderer(self.window, settings)
        self.controller = AnimationController(config)

        # render コールバックは「次の描画で Frame を作り直す」印を付けるだけ。
        self._frame: Frame | None = None
        self._dirty = True
        self.window.push_handlers(
            on_mouse_press=self._on_mouse_press,
            on_key_press=self._on_key_press,
        )

    def request_render(self) -> None:
        self._dirty = True

    def _on_mouse_press(self, _x: int, _y: int, _button: int, _modifiers: int) -> None:
        self.controller.handle_tap(self.request_render)

    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        if symbol == key.S:
            try:
                path = self.save_svg()
            except (OSError, ValueError):
                _logger.exception("Failed to save SVG")
                return
            _logger.info("Saved SVG: %s", path)

    def current_frame(self) -> Frame:
        """必要なら Frame を組み立て直して返す。"""
        if self._dirty or self._frame is None:
            self._frame = self.controller.frame(self._settings.canvas_size)
            self._dirty = False
        return self._frame

    def save_svg(self) -> Path:
        """現在のフレームを SVG として保存し、保存先パスを返す。"""
        return export_svg(self.current_frame(), self._svg_output_path)

    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""
        self._renderer.ctx.screen.use()
        fb_w, fb_h = self._framebuffer_size()
        self._renderer.viewport(fb_w, fb_h)

        frame = self.current_frame()
        self._renderer.clear(frame.background)
        self._renderer.render_frame(frame)

    def close(self) -> None:
        """Ticker を止め、GPU / window 資源を解放する。"""
        self.controller.close()
        try:
            self._renderer.release()
        finally:
            self.window.close()
