"""Ranking of the numbers and the strategies that sort stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stack import Node, Stacks


def assign_indices(stacks: Stacks) -> None:
    """Give every node on ``a`` its rank among the values on ``a``."""
    if not stacks.a:
        return
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(node.value for node in stacks.a)):
        ranks.setdefault(value, rank)
    for node in stacks.a:
        node.index = ranks[node.value]


def is_sorted(nodes: Iterable[Node]) -> bool:
    """Return True if the values never decrease from top to bottom."""
    previous: Node | None = None
    for node in nodes:
        if previous is not None and previous.value > node.value:
            return False
        previous = node
    return True


def get_distance(nodes: Iterable[Node], index: int) -> int:
    """Return how far from the top the node ranked ``index`` lies.

    If no node has that rank, the number of nodes is returned.
    """
    distance = 0
    for node in nodes:
        if node.index == index:
            break
        distance += 1
    return distance


def get_min(nodes: Sequence[Node], excluded: int) -> int:
    """Return the smallest rank, skipping ``excluded`` below the top node."""
    if not nodes:
        raise ValueError("stack is empty")
    iterator = iter(nodes)
    smallest = next(iterator).index
    for node in iterator:
        if node.index < smallest and node.index != excluded:
            smallest = node.index
    return smallest


def get_max_bits(nodes: Sequence[Node]) -> int:
    """Return the number of bits needed to write the largest rank."""
    if not nodes:
        raise ValueError("stack is empty")
    return max(node.index for node in nodes).bit_length()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by the bits of the ranks, least significant bit first."""
    size = len(stacks.a)
    max_bits = get_max_bits(stacks.a)
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def _swap_if_descending(stacks: Stacks) -> None:
    if stacks.a[0].value > stacks.a[1].value:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three numbers."""
    top, mid, bottom = (node.value for node in list(stacks.a)[:3])
    if top > mid and top > bottom:
        stacks.ra()
        _swap_if_descending(stacks)
    elif mid > top and mid > bottom:
        stacks.rra()
        _swap_if_descending(stacks)
    elif bottom > top and bottom > mid:
        _swap_if_descending(stacks)


def sort_four(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four numbers, parking the smallest on ``b``."""
    if is_sorted(stacks.a):
        return
    distance = get_distance(stacks.a, get_min(stacks.a, -1))
    if distance == 1:
        stacks.ra()
    elif distance == 2:
        stacks.ra()
        stacks.ra()
    elif distance == 3:
        stacks.rra()
    if is_sorted(stacks.a):
        return
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack ``a`` of five numbers, parking the smallest on ``b``."""
    if is_sorted(stacks.a):
        return
    distance = get_distance(stacks.a, get_min(stacks.a, -1))
    if distance <= 2:
        for _ in range(distance):
            stacks.ra()
    else:
        for _ in range(5 - distance):
            stacks.rra()
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def sort_short(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two to five numbers."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)