"""
どこで: `src/doublef/core/color.py`。
何を: `#RRGGBB` 文字列と RGB255 / RGB01 タプルの相互変換を提供する。
なぜ: 設定ファイルは hex、GL/SVG は 0..1 / 0..255 を使うため、変換を一箇所に集約する。
"""

from __future__ import annotations

from typing import Any, cast

ColorRGB = tuple[float, float, float]


def parse_hex_color(text: str) -> tuple[int, int, int]:
    """`#RRGGBB`（`#RGB` も可）を RGB255 タプルに変換して返す。

    Raises
    ------
    ValueError
        hex 色として解釈できない場合。
    """

    s = str(text).strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"色は #RRGGBB 形式である必要がある: got={text!r}")
    try:
        value = int(s, 16)
    except ValueError as exc:
        raise ValueError(f"色は #RRGGBB 形式である必要がある: got={text!r}") from exc
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def coerce_rgb255(value: object) -> tuple[int, int, int]:
    """値を RGB255 タプル `(r, g, b)`（0..255 clamp 済み）に正規化して返す。"""

    try:
        r, g, b = value  # type: ignore[misc]
    except Exception as exc:
        raise ValueError(f"rgb value must be a length-3 sequence: {value!r}") from exc

    def _clamp(v: object) -> int:
        iv = int(cast(Any, v))
        return 0 if iv < 0 else 255 if iv > 255 else iv

    return _clamp(r), _clamp(g), _clamp(b)


def rgb255_to_rgb01(rgb255: tuple[int, int, int]) -> ColorRGB:
    r, g, b = coerce_rgb255(rgb255)
    return r / 255.0, g / 255.0, b / 255.0


def rgb01_to_rgb255(rgb01: ColorRGB) -> tuple[int, int, int]:
    r, g, b = rgb01
    return coerce_rgb255((round(float(r) * 255), round(float(g) * 255), round(float(b) * 255)))


def hex_to_rgb01(text: str) -> ColorRGB:
    """`#RRGGBB` を 0..1 float RGB に変換して返す。"""

    return rgb255_to_rgb01(parse_hex_color(text))


def rgb01_to_hex(rgb01: ColorRGB) -> str:
    """0..1 float RGB を `#RRGGBB` に変換して返す。"""

    r, g, b = rgb01_to_rgb255(rgb01)
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = [
    "ColorRGB",
    "coerce_rgb255",
    "hex_to_rgb01",
    "parse_hex_color",
    "rgb01_to_hex",
    "rgb01_to_rgb255",
    "rgb255_to_rgb01",
]
