# どこで: `src/doublef/interactive/controller.py`。
# 何を: タップ入力・Sequence・Ticker を結線し、1 タップで 1 ノードを 1 スイープ動かす。
# なぜ: 状態機械（core）とタイマー（pyglet）の橋渡しをウィンドウ実装から切り離すため。

from __future__ import annotations

from typing import Any, Callable

from doublef.core.config import AnimationConfig
from doublef.core.node_chain import build_chain
from doublef.core.scene import Frame, build_frame
from doublef.core.sequence import Sequence
from doublef.interactive.ticker import Ticker


class AnimationController:
    """アニメーション進行の配線役。"""

    def __init__(self, config: AnimationConfig, *, clock: Any = None) -> None:
        self._config = config
        self.sequence = Sequence(build_chain(config.node_count), params=config.scale_params)
        self.ticker = Ticker(period_ms=config.interval_ms, clock=clock)

    @property
    def config(self) -> AnimationConfig:
        return self._config

    def handle_tap(self, render: Callable[[], None]) -> bool:
        """現在ノードのスイープを開始する。進行中のタップは無視して False を返す。"""

        def step() -> None:
            render()
            self.sequence.tick(on_render=render, on_stop=self.ticker.stop)

        return self.sequence.activate(on_started=lambda: self.ticker.start(step))

    def frame(self, canvas_size: tuple[int, int]) -> Frame:
        """現在の scale で Frame を組み立てて返す。"""

        return build_frame(self._config, self.sequence.scales(), canvas_size)

    def close(self) -> None:
        self.ticker.stop()


__all__ = ["AnimationController"]
