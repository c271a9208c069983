# どこで: `src/doublef/interactive/ticker.py`。
# 何を: アニメーション中だけ一定周期でコールバックを呼ぶ Ticker を提供する。
# なぜ: tick の駆動を pyglet のクロックに任せ、二重起動や停止後の発火を防ぐため。

from __future__ import annotations

from typing import Any, Callable

import pyglet


class Ticker:
    """固定周期の繰り返しコールバック。

    Parameters
    ----------
    period_ms : float
        呼び出し周期 [ms]。
    clock : Any
        `schedule_interval(func, interval)` / `unschedule(func)` を持つクロック。既定は `pyglet.clock`。

    Notes
    -----
    pyglet のクロックは単一スレッドで動くため、コールバックが同時に 2 回走ることはない。
    """

    def __init__(self, *, period_ms: float = 50.0, clock: Any = None) -> None:
        period = float(period_ms)
        if period <= 0:
            raise ValueError("period_ms は正の値である必要がある")
        self._period_s = period / 1000.0
        self._clock = clock if clock is not None else pyglet.clock
        self._callback: Callable[[], None] | None = None

    @property
    def animated(self) -> bool:
        return self._callback is not None

    @property
    def period_s(self) -> float:
        return float(self._period_s)

    def _fire(self, _dt: float) -> None:
        callback = self._callback
        if callback is None:
            return
        callback()

    def start(self, callback: Callable[[], None]) -> bool:
        """未起動なら周期呼び出しを開始して True を返す。起動中は何もしない。"""

        if self._callback is not None:
            return False
        self._callback = callback
        self._clock.schedule_interval(self._fire, self._period_s)
        return True

    def stop(self) -> bool:
        """起動中なら周期呼び出しを止めて True を返す。"""

        if self._callback is None:
            return False
        self._callback = None
        self._clock.unschedule(self._fire)
        return True


__all__ = ["Ticker"]
