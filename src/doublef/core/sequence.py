"""
どこで: `src/doublef/core/sequence.py`。
何を: ノードチェーン上で「現在ノード」を 1 つずつアニメーションさせ、完了ごとに次へ受け渡す。
なぜ: 入力 1 回 = 1 ノード 1 スイープという進行規則を、描画やタイマーから独立させるため。
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from doublef.core.animation_state import DEFAULT_SCALE_PARAMS, TickResult
from doublef.core.node_chain import Node, NodeChain
from doublef.core.scale_math import ScaleParams

_logger = logging.getLogger(__name__)


class Sequence:
    """チェーン走査の状態機械。

    Parameters
    ----------
    chain : NodeChain
        走査対象。`current` は先頭から始まる。
    params : ScaleParams
        各ノードの tick に渡す補間パラメータ。

    Notes
    -----
    `chain_dir` はチェーンの走査方向で、ノード自身のアニメーション方向とは別物。
    端に達すると `current` を据え置いたまま反転するため、端のノードは往路と復路で 2 回続けて動く。
    """

    def __init__(self, chain: NodeChain, *, params: ScaleParams = DEFAULT_SCALE_PARAMS) -> None:
        self._chain = chain
        self._params = params
        self._current: Node = chain.head
        self._chain_dir = 1

    @property
    def chain(self) -> NodeChain:
        return self._chain

    @property
    def current(self) -> Node:
        return self._current

    @property
    def chain_dir(self) -> int:
        return self._chain_dir

    @property
    def is_active(self) -> bool:
        return self._current.state.is_active

    def scales(self) -> tuple[float, ...]:
        """描画用に全ノードの scale をチェーン順で返す。"""

        return tuple(float(node.state.scale) for node in self._chain)

    def activate(self, on_started: Callable[[], None] | None = None) -> bool:
        """現在ノードのスイープ開始を要求する。

        進行中の要求は no-op。実際に開始した場合だけ `on_started` を呼び True を返す。
        """

        started = self._current.state.start()
        if started and on_started is not None:
            on_started()
        return started

    def tick(
        self,
        on_render: Callable[[], None] | None = None,
        on_stop: Callable[[], None] | None = None,
    ) -> TickResult:
        """現在ノードを 1 tick 進める。

        Parameters
        ----------
        on_render : Callable[[], None] | None
            スイープ完了時、走査を進めた後に呼ぶ。
        on_stop : Callable[[], None] | None
            スイープ完了時、`on_render` の直後に呼ぶ（tick ループ停止用）。

        Returns
        -------
        TickResult
            現在ノードの tick 結果。
        """

        result = self._current.state.tick(self._params)
        if not result.completed:
            return result

        finished = self._current
        neighbor = self._chain.traverse(finished, self._chain_dir)
        if neighbor is not None:
            self._current = neighbor
            _logger.debug(
                "node %d completed (prev_scale=%s); next=%d",
                finished.index,
                result.prev_scale,
                neighbor.index,
            )
        else:
            self._chain_dir *= -1
            _logger.debug(
                "node %d completed at chain boundary; chain_dir=%d",
                finished.index,
                self._chain_dir,
            )

        if on_render is not None:
            on_render()
        if on_stop is not None:
            on_stop()
        return result


__all__ = ["Sequence"]
