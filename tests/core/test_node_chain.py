"""NodeChain の構築と traverse のテスト。"""

from __future__ import annotations

import pytest

from doublef.core.node_chain import Node, build_chain


def test_build_chain_links_nodes_in_index_order() -> None:
    chain = build_chain(4)

    assert len(chain) == 4
    assert chain.head is chain[0]
    assert [node.index for node in chain] == [0, 1, 2, 3]
    assert chain.next_of(chain[1]) is chain[2]
    assert chain.prev_of(chain[1]) is chain[0]


def test_nodes_start_idle_with_independent_state() -> None:
    chain = build_chain(2)

    chain[0].state.start()

    assert chain[0].state.direction == 1
    assert chain[1].state.direction == 0
    assert chain[1].state.scale == 0.0


def test_traverse_follows_direction_and_stops_at_boundaries() -> None:
    chain = build_chain(3)

    assert chain.traverse(chain[0], 1) is chain[1]
    assert chain.traverse(chain[2], 1) is None
    assert chain.traverse(chain[2], -1) is chain[1]
    assert chain.traverse(chain[0], -1) is None


def test_single_node_chain_has_no_neighbors() -> None:
    chain = build_chain(1)

    assert chain.traverse(chain.head, 1) is None
    assert chain.traverse(chain.head, -1) is None


@pytest.mark.parametrize("count", [0, -3])
def test_build_chain_rejects_non_positive_count(count: int) -> None:
    with pytest.raises(ValueError):
        build_chain(count)


def test_traverse_rejects_foreign_node() -> None:
    chain = build_chain(2)

    with pytest.raises(ValueError):
        chain.traverse(Node(index=0), 1)
