"""Ticker の開始・停止ガードのテスト。"""

from __future__ import annotations

import pytest

from doublef.interactive.ticker import Ticker


def test_start_schedules_at_period(fake_clock) -> None:
    ticker = Ticker(period_ms=50, clock=fake_clock)
    calls: list[int] = []

    assert ticker.start(lambda: calls.append(1)) is True
    assert ticker.animated
    assert list(fake_clock.scheduled.values()) == [pytest.approx(0.05)]

    fake_clock.advance()
    fake_clock.advance()
    assert calls == [1, 1]


def test_start_while_animated_is_ignored(fake_clock) -> None:
    ticker = Ticker(clock=fake_clock)
    first: list[int] = []
    second: list[int] = []

    ticker.start(lambda: first.append(1))
    assert ticker.start(lambda: second.append(1)) is False

    fake_clock.advance()
    assert first == [1]
    assert second == []
    assert len(fake_clock.scheduled) == 1


def test_stop_prevents_further_calls(fake_clock) -> None:
    ticker = Ticker(clock=fake_clock)
    calls: list[int] = []
    ticker.start(lambda: calls.append(1))

    assert ticker.stop() is True
    assert ticker.stop() is False
    fake_clock.advance()

    assert calls == []
    assert not ticker.animated
    assert fake_clock.scheduled == {}


def test_callback_may_stop_its_own_ticker(fake_clock) -> None:
    ticker = Ticker(clock=fake_clock)
    calls: list[int] = []

    def once() -> None:
        calls.append(1)
        ticker.stop()

    ticker.start(once)
    fake_clock.advance()
    fake_clock.advance()

    assert calls == [1]


def test_rejects_non_positive_period() -> None:
    with pytest.raises(ValueError):
        Ticker(period_ms=0)
