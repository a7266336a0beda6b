"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Node:
    """One number on a stack, with its rank among all the numbers (-1 if unranked)."""

    value: int
    index: int = -1


def _swap_top(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of the operations applied.

    Every operation is appended to ``operations`` under its usual name. A push
    from an empty stack does nothing and is not recorded; swaps and rotations
    are recorded even when the stack is too short for them to change anything.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Node] = deque(Node(value) for value in values)
        self.b: deque[Node] = deque()
        self.operations: list[str] = []

    def _stack(self, which: str) -> deque[Node]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"no stack named {which!r}")

    def values(self, which: str) -> list[int]:
        """Return the values on stack ``which`` ("a" or "b"), top first."""
        return [node.value for node in self._stack(which)]

    def indices(self, which: str) -> list[int]:
        """Return the ranks on stack ``which`` ("a" or "b"), top first."""
        return [node.index for node in self._stack(which)]

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap_top(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap_top(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        _swap_top(self.a)
        _swap_top(self.b)
        self.operations.append("ss")

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``; return False if ``b`` was empty."""
        if not self.b:
            return False
        self.a.appendleft(self.b.popleft())
        self.operations.append("pa")
        return True

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``; return False if ``a`` was empty."""
        if not self.a:
            return False
        self.b.appendleft(self.a.popleft())
        self.operations.append("pb")
        return True

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self.operations.append("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append("rrr")


def find_max_pb(size: int) -> int:
    """Return half of ``size``, rounded up, and 1 for a size of 1."""
    if size == 1:
        return 1
    if size % 2 == 0:
        return size // 2
    return int(size / 2) + 1