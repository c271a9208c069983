# どこで: `src/doublef/core/node_chain.py`。
# 何を: 固定長のノード列（前後リンクはインデックスから導出）と traverse を提供する。
# なぜ: 再帰的な所有チェーンを避け、任意ノード数でも反復だけで走査・描画できるようにするため。

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from doublef.core.animation_state import AnimationState


@dataclass(slots=True, eq=False)
class Node:
    """チェーン内のノード。状態は `state` に保持する。"""

    index: int
    state: AnimationState = field(default_factory=AnimationState)


class NodeChain:
    """生成後に長さが変わらないノード列。"""

    def __init__(self, count: int) -> None:
        count_i = int(count)
        if count_i < 1:
            raise ValueError(f"node_count は 1 以上である必要がある: got={count!r}")
        self._nodes: tuple[Node, ...] = tuple(Node(index=i) for i in range(count_i))

    @property
    def head(self) -> Node:
        return self._nodes[0]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def _owns(self, node: Node) -> bool:
        i = node.index
        return 0 <= i < len(self._nodes) and self._nodes[i] is node

    def next_of(self, node: Node) -> Node | None:
        """後続ノード（末尾なら None）を返す。"""

        if not self._owns(node):
            raise ValueError("node はこのチェーンに属している必要がある")
        i = node.index + 1
        return self._nodes[i] if i < len(self._nodes) else None

    def prev_of(self, node: Node) -> Node | None:
        """先行ノード（先頭なら None）を返す。"""

        if not self._owns(node):
            raise ValueError("node はこのチェーンに属している必要がある")
        i = node.index - 1
        return self._nodes[i] if i >= 0 else None

    def traverse(self, node: Node, direction: int) -> Node | None:
        """direction == 1 なら next、それ以外は prev を返す。境界では None。"""

        if direction == 1:
            return self.next_of(node)
        return self.prev_of(node)


def build_chain(count: int) -> NodeChain:
    """`count` 個のノードを 0..count-1 の順に繋いだチェーンを返す。"""

    return NodeChain(count)


__all__ = ["Node", "NodeChain", "build_chain"]
