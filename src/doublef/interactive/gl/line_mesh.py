"""
どこで: `src/doublef/interactive/gl/line_mesh.py`。
何を: 線描画用の VBO/IBO/VAO を 1 組保持し、フレームごとの書き込みと容量拡張を担う。
なぜ: GPU バッファの寿命管理を DrawRenderer から切り離すため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class LineMesh:
    """頂点とインデックスを GPU に送り、draw call に必要な VAO を保つ。"""

    PRIMITIVE_RESTART_INDEX = 0xFFFFFFFF

    def __init__(self, ctx: Any, program: Any, initial_reserve: int = 64 * 1024) -> None:
        self.ctx = ctx
        self.program = program
        self.initial_reserve = int(initial_reserve)
        self.vbo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.ibo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.vao = self._build_vao()
        self.index_count = 0
        self.ctx.primitive_restart = True  # type: ignore[attr-defined]
        self.ctx.primitive_restart_index = self.PRIMITIVE_RESTART_INDEX  # type: ignore[attr-defined]

    def _build_vao(self) -> Any:
        return self.ctx.simple_vertex_array(
            self.program, self.vbo, "in_vert", index_buffer=self.ibo
        )

    def _grow(self, vbo_size: int, ibo_size: int) -> None:
        """不足したバッファだけ作り直し、差し替えがあれば VAO も張り直す。"""
        rebuilt = False
        if vbo_size > self.vbo.size:
            self.vbo.release()
            self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve), dynamic=True)
            rebuilt = True
        if ibo_size > self.ibo.size:
            self.ibo.release()
            self.ibo = self.ctx.buffer(reserve=max(ibo_size, self.initial_reserve), dynamic=True)
            rebuilt = True
        if rebuilt:
            self.vao.release()
            self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray, indices: np.ndarray) -> None:
        vertices_f32 = np.ascontiguousarray(vertices, dtype=np.float32)
        indices_u32 = np.ascontiguousarray(indices, dtype=np.uint32)
        if indices_u32.size == 0:
            self.index_count = 0
            return
        self._grow(vertices_f32.nbytes, indices_u32.nbytes)

        self.vbo.orphan()
        self.vbo.write(vertices_f32)
        self.ibo.orphan()
        self.ibo.write(indices_u32)
        self.index_count = int(indices_u32.size)

    def release(self) -> None:
        self.vbo.release()
        self.ibo.release()
        self.vao.release()
