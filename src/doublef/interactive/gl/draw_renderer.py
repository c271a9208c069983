# どこで: `src/doublef/interactive/gl/draw_renderer.py`。
# 何を: ライブ描画用の ModernGL レンダラーをカプセル化する。
# なぜ: コンテキスト生成・シェーダ設定・メッシュ転送をウィンドウ側の配線から分離するため。

from __future__ import annotations

import moderngl
import numpy as np
from pyglet.window import Window

from doublef.core.scene import Frame
from doublef.interactive.gl.index_buffer import build_line_indices_and_stats
from doublef.interactive.gl.line_mesh import LineMesh
from doublef.interactive.gl.shader import Shader
from doublef.interactive.render_settings import RenderSettings


def build_projection(canvas_width: float, canvas_height: float) -> np.ndarray:
    """キャンバス座標（左上原点・y 下向き）の正射影行列（ModernGL 用の転置済み）を返す。"""
    return np.array(
        [
            [2.0 / canvas_width, 0.0, 0.0, -1.0],
            [0.0, -2.0 / canvas_height, 0.0, 1.0],
            [0.0, 0.0, -1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype="f4",
    ).T


class DrawRenderer:
    """Frame を 1 draw call で描くシンプルなレンダラー。"""

    def __init__(self, window: Window, settings: RenderSettings) -> None:
        window.switch_to()
        self.ctx = moderngl.create_context(require=410)
        self.program = Shader.create_shader(self.ctx)
        self._mesh = LineMesh(self.ctx, self.program)
        # 投影と等方化係数はキャンバス寸法にのみ依存するため初期化時に一度設定する。
        canvas_w, canvas_h = settings.canvas_size
        short = float(min(canvas_w, canvas_h))
        self.program["projection"].write(build_projection(float(canvas_w), float(canvas_h)).tobytes())
        self.program["aspect"].value = (float(canvas_w) / short, float(canvas_h) / short)
        self._uploaded: Frame | None = None
        self._draw_lines = 0

    def viewport(self, width: int, height: int) -> None:
        """ビューポートをフレームバッファサイズに合わせて更新する。"""
        self.ctx.viewport = (0, 0, int(width), int(height))

    def clear(self, color: tuple[float, float, float]) -> None:
        self.ctx.clear(*color, 1.0)

    def render_frame(self, frame: Frame) -> int:
        """Frame を描画し、描いたポリライン本数を返す。

        同じ Frame オブジェクトが続く間は upload を省略する。
        """
        if frame is not self._uploaded:
            indices, stats = build_line_indices_and_stats(frame.polylines.offsets)
            self._mesh.upload(vertices=frame.polylines.coords, indices=indices)
            self._uploaded = frame
            self._draw_lines = int(stats.draw_lines)
        if self._mesh.index_count == 0:
            return 0

        self.program["line_thickness"].value = float(frame.thickness)
        self.program["color"].value = (*frame.color, 1.0)
        self._mesh.vao.render(mode=self.ctx.LINE_STRIP, vertices=self._mesh.index_count)
        return self._draw_lines

    def release(self) -> None:
        """GPU リソースを解放する。"""
        self._mesh.release()
        self.program.release()
        self.ctx.release()
