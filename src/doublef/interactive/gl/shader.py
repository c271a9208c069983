"""
どこで: `src/doublef/interactive/gl/shader.py`。
何を: 線分を太さ付きの四角形へ展開して描くシェーダプログラムを生成する。
なぜ: OpenGL core profile では glLineWidth が 1px に制限されるため、geometry shader で太らせる。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 410
in vec3 in_vert;
uniform mat4 projection;
void main() {
    gl_Position = projection * vec4(in_vert, 1.0);
}
"""

# line_thickness はクリップ空間（短辺の半分 = 1）基準の線幅。
# aspect = (w, h) / min(w, h) で等方空間へ移してから法線方向へ膨らませる。
GEOMETRY_SHADER = """
#version 410
layout(lines) in;
layout(triangle_strip, max_vertices = 4) out;
uniform float line_thickness;
uniform vec2 aspect;
void main() {
    vec2 a = gl_in[0].gl_Position.xy * aspect;
    vec2 b = gl_in[1].gl_Position.xy * aspect;
    vec2 dir = b - a;
    float len = length(dir);
    vec2 d = len > 0.0 ? dir / len : vec2(1.0, 0.0);
    float half_w = 0.5 * line_thickness;
    vec2 n = vec2(-d.y, d.x) * half_w;
    vec2 e = d * half_w;
    gl_Position = vec4((a - e + n) / aspect, 0.0, 1.0); EmitVertex();
    gl_Position = vec4((a - e - n) / aspect, 0.0, 1.0); EmitVertex();
    gl_Position = vec4((b + e + n) / aspect, 0.0, 1.0); EmitVertex();
    gl_Position = vec4((b + e - n) / aspect, 0.0, 1.0); EmitVertex();
    EndPrimitive();
}
"""

FRAGMENT_SHADER = """
#version 410
uniform vec4 color;
out vec4 frag_color;
void main() {
    frag_color = color;
}
"""


class Shader:
    """線描画用シェーダの生成窓口。"""

    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL の Program を生成して返す。"""
        return ctx.program(
            vertex_shader=VERTEX_SHADER,
            geometry_shader=GEOMETRY_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )
