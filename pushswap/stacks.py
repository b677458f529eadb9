"""The two push_swap stacks and the eleven operations defined on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

_OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stack ``a`` holding the input, an empty stack ``b``, and the log of operations.

    The top of each stack is its first element. Every operation that takes
    effect is appended to :attr:`operations` under its instruction name.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the first two elements of ``a``."""
        _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the first two elements of ``b``."""
        _swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the first two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; does nothing when ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; does nothing when ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self) -> None:
        """Shift ``a`` up by one: the top element becomes the bottom one."""
        _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Shift ``b`` up by one: the top element becomes the bottom one."""
        _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks up by one."""
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Shift ``a`` down by one: the bottom element becomes the top one."""
        _reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Shift ``b`` down by one: the bottom element becomes the top one."""
        _reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks by one."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record("rrr")

    def apply(self, name: str) -> None:
        """Run the operation called ``name``; raise ValueError for an unknown one."""
        if name not in _OPERATIONS:
            raise ValueError(f"unknown operation: {name!r}")
        getattr(self, name)()