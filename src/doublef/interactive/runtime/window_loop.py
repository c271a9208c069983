# どこで: `src/doublef/interactive/runtime/window_loop.py`。
# 何を: 1 つの pyglet ウィンドウを閉じられるまで一定 fps で描き続けるループを提供する。
# なぜ: tick（Ticker）と描画（on_draw）を同じ pyglet イベントループに載せるため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pyglet


@dataclass(frozen=True, slots=True)
class WindowTask:
    """ウィンドウと、その中身を描く関数（flip はしない）。"""

    window: Any
    draw_frame: Callable[[], None]


class WindowLoop:
    """`pyglet.app.run()` を 1 回だけ回すループ。ウィンドウを閉じると戻る。"""

    def __init__(self, task: WindowTask, *, fps: float) -> None:
        if not float(fps) > 0.0:
            raise ValueError("fps は正の値である必要がある")
        self._task = task
        self._interval = 1.0 / float(fps)

    def _redraw(self, dt: float) -> None:
        window = self._task.window
        # 閉じた直後に残った予約で描かない。
        if window in pyglet.app.windows:
            window.draw(dt)

    def _on_close(self, *_: object) -> None:
        pyglet.app.exit()

    def run(self) -> None:
        self._task.window.push_handlers(on_close=self._on_close, on_draw=self._task.draw_frame)
        pyglet.clock.schedule_interval(self._redraw, self._interval)
        try:
            # 描画タイミングは schedule_interval 側で決めるので interval=None。
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(self._redraw)
