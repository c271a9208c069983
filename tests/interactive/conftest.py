from __future__ import annotations

from typing import Callable

import pytest


class FakeClock:
    """`pyglet.clock` の schedule_interval / unschedule だけを真似る手動クロック。"""

    def __init__(self) -> None:
        self.scheduled: dict[Callable[[float], None], float] = {}

    def schedule_interval(self, func: Callable[[float], None], interval: float) -> None:
        self.scheduled[func] = float(interval)

    def unschedule(self, func: Callable[[float], None]) -> None:
        self.scheduled.pop(func, None)

    def advance(self) -> None:
        """予約中の関数をそれぞれ 1 回ずつ呼ぶ。"""
        for func, interval in list(self.scheduled.items()):
            if func in self.scheduled:
                func(interval)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
