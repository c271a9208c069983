# どこで: `src/doublef/core/animation_state.py`。
# 何を: ノード 1 つ分のアニメーション状態（scale / direction / prev_scale）と tick 結果を定義する。
# なぜ: コールバック連鎖ではなく戻り値で「完了」を伝え、呼び出し側のループを素直に書けるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from doublef.core.scale_math import ScaleParams, tick_delta

DEFAULT_SCALE_PARAMS = ScaleParams()


class TickStatus(Enum):
    """`AnimationState.tick()` の結果種別。"""

    IDLE = "idle"
    CONTINUE = "continue"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class TickResult:
    """1 tick の結果。

    Parameters
    ----------
    status : TickStatus
        tick の結果種別。
    prev_scale : float | None
        COMPLETED のときだけ、新しく到達した整数 scale。
    """

    status: TickStatus
    prev_scale: float | None = None

    @property
    def completed(self) -> bool:
        return self.status is TickStatus.COMPLETED


IDLE = TickResult(TickStatus.IDLE)
CONTINUE = TickResult(TickStatus.CONTINUE)


@dataclass(slots=True)
class AnimationState:
    """1 ノードの可変アニメーション状態。

    Notes
    -----
    - `prev_scale` は常に最後に到達した整数値。
    - `direction == 0`（Idle）のとき `scale == prev_scale`。
    """

    scale: float = 0.0
    direction: int = 0
    prev_scale: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.direction != 0

    def start(self) -> bool:
        """Idle からスイープを開始する。

        Returns
        -------
        bool
            実際に Idle から遷移した場合 True。進行中なら何もせず False。
        """

        if self.direction != 0:
            return False
        # prev_scale=0 なら前進（+1）、1 なら後退（-1）。
        self.direction = int(1 - 2 * self.prev_scale)
        return True

    def tick(self, params: ScaleParams = DEFAULT_SCALE_PARAMS) -> TickResult:
        """scale を 1 tick 進め、スイープ完了時は COMPLETED を返す。"""

        if self.direction == 0:
            return IDLE

        self.scale += tick_delta(
            self.scale,
            self.direction,
            params.line_count,
            1,
            params.scale_gap,
            params.scale_div,
        )
        if abs(self.scale - self.prev_scale) > 1:
            # 行き過ぎを隣の整数へスナップして Idle に戻る。
            self.scale = float(self.prev_scale + self.direction)
            self.direction = 0
            self.prev_scale = self.scale
            return TickResult(TickStatus.COMPLETED, prev_scale=self.prev_scale)
        return CONTINUE


__all__ = [
    "AnimationState",
    "CONTINUE",
    "DEFAULT_SCALE_PARAMS",
    "IDLE",
    "TickResult",
    "TickStatus",
]
