"""Sequence のチェーン走査（ping-pong）と tick 配線のテスト。"""

from __future__ import annotations

import pytest

from doublef.core.animation_state import TickStatus
from doublef.core.node_chain import build_chain
from doublef.core.sequence import Sequence

MAX_TICKS = 1000


def _run_activation(seq: Sequence) -> int:
    """1 回の起動要求を完了まで進め、動いたノード番号を返す。"""
    animated = seq.current.index
    assert seq.activate() is True
    for _ in range(MAX_TICKS):
        if seq.tick().completed:
            return animated
    raise AssertionError("sweep did not complete")


def test_sequence_starts_at_head_moving_forward() -> None:
    seq = Sequence(build_chain(3))

    assert seq.current is seq.chain.head
    assert seq.chain_dir == 1
    assert seq.scales() == (0.0, 0.0, 0.0)


def test_sequence_ping_pongs_through_chain() -> None:
    seq = Sequence(build_chain(3))

    order = [_run_activation(seq) for _ in range(8)]

    # 端のノードは往路（0→1）と復路（1→0）で 2 回続けて動く。
    assert order == [0, 1, 2, 2, 1, 0, 0, 1]


def test_sequence_scales_follow_traversal() -> None:
    seq = Sequence(build_chain(3))

    for _ in range(3):
        _run_activation(seq)
    assert seq.scales() == (1.0, 1.0, 1.0)
    assert seq.chain_dir == -1
    assert seq.current.index == 2

    for _ in range(3):
        _run_activation(seq)
    assert seq.scales() == (0.0, 0.0, 0.0)
    assert seq.chain_dir == 1
    assert seq.current.index == 0


def test_single_node_sequence_only_flips_chain_direction() -> None:
    seq = Sequence(build_chain(1))
    head = seq.current

    dirs = []
    for _ in range(4):
        _run_activation(seq)
        assert seq.current is head
        dirs.append(seq.chain_dir)

    assert dirs == [-1, 1, -1, 1]
    assert seq.scales() == (0.0,)


def test_activate_while_active_is_noop() -> None:
    seq = Sequence(build_chain(2))
    started: list[bool] = []

    assert seq.activate(lambda: started.append(True)) is True
    seq.tick()
    scale = seq.current.state.scale
    assert seq.activate(lambda: started.append(True)) is False

    assert started == [True]
    assert seq.current.state.scale == scale


def test_tick_invokes_render_then_stop_only_on_completion() -> None:
    seq = Sequence(build_chain(2))
    calls: list[str] = []
    seq.activate()

    statuses = []
    for _ in range(MAX_TICKS):
        result = seq.tick(
            on_render=lambda: calls.append("render"),
            on_stop=lambda: calls.append("stop"),
        )
        statuses.append(result.status)
        if result.completed:
            break

    assert statuses[-1] is TickStatus.COMPLETED
    assert all(s is TickStatus.CONTINUE for s in statuses[:-1])
    assert calls == ["render", "stop"]
    assert seq.current.index == 1


def test_tick_without_activation_reports_idle() -> None:
    seq = Sequence(build_chain(2))

    assert seq.tick().status is TickStatus.IDLE
    assert seq.current.index == 0


@pytest.mark.parametrize("count", [2, 4, 7])
def test_full_cycle_returns_every_node_to_zero(count: int) -> None:
    seq = Sequence(build_chain(count))

    for _ in range(2 * count):
        _run_activation(seq)

    assert seq.scales() == (0.0,) * count
    assert seq.current is seq.chain.head
    assert seq.chain_dir == 1
