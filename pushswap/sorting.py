"""Choosing the operations that sort stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.costs import Moves, cheapest, costs_to_a, costs_to_b, rotation_cost
from pushswap.stacks import Stacks


def compress(numbers: Iterable[int]) -> list[int]:
    """Replace every number by its rank among all of them, counting from zero."""
    values = list(numbers)
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(values)):
        ranks.setdefault(value, rank)
    return [ranks[value] for value in values]


def is_sorted(numbers: Sequence[int]) -> bool:
    """Tell whether the numbers are in ascending order, top first."""
    values = list(numbers)
    return all(first <= second for first, second in zip(values, values[1:]))


def _require_size(stacks: Stacks, size: int) -> None:
    if len(stacks.a) != size:
        raise ValueError(f"stack a holds {len(stacks.a)} numbers, expected {size}")


def sort_two(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two numbers."""
    _require_size(stacks, 2)
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three numbers in at most two operations."""
    _require_size(stacks, 3)
    first, second, third = stacks.a
    if first <= second <= third:
        return
    if second <= first <= third:
        stacks.sa()
    elif third <= first <= second:
        stacks.rra()
    elif second <= third <= first:
        stacks.ra()
    elif first <= third <= second:
        stacks.rra()
        stacks.sa()
    elif third <= second <= first:
        stacks.sa()
        stacks.rra()


def push_smallest(stacks: Stacks) -> None:
    """Rotate the smallest number of ``a`` to the top and push it onto ``b``."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    smallest = min(stacks.a)
    while stacks.a[0] != smallest:
        stacks.ra()
    stacks.pb()


def sort_four(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four numbers."""
    _require_size(stacks, 4)
    push_smallest(stacks)
    sort_three(stacks)
    stacks.pa()


def apply_moves(stacks: Stacks, moves: Moves) -> None:
    """Perform the rotations of ``moves``: rr, rrr, ra, rra, rb, rrb in turn."""
    steps = (
        (moves.rr, stacks.rr),
        (moves.rrr, stacks.rrr),
        (moves.ra, stacks.ra),
        (moves.rra, stacks.rra),
        (moves.rb, stacks.rb),
        (moves.rrb, stacks.rrb),
    )
    for count, operation in steps:
        for _ in range(count):
            operation()


def turk_push_to_b(stacks: Stacks) -> None:
    """Push the cheapest element onto ``b`` until three remain in ``a``."""
    while len(stacks.a) > 3:
        apply_moves(stacks, cheapest(costs_to_b(stacks.a, stacks.b)))
        stacks.pb()


def turk_push_to_a(stacks: Stacks) -> None:
    """Push the cheapest element back onto ``a`` until ``b`` is empty."""
    while stacks.b:
        apply_moves(stacks, cheapest(costs_to_a(stacks.a, stacks.b)))
        stacks.pa()


def _bring_smallest_to_top(stacks: Stacks) -> None:
    index = stacks.a.index(min(stacks.a))
    up, down = rotation_cost(index, len(stacks.a))
    for _ in range(up):
        stacks.ra()
    for _ in range(down):
        stacks.rra()


def sort_five_or_more(stacks: Stacks) -> None:
    """Sort a stack ``a`` of five or more numbers; ``a`` ends up holding ranks."""
    if len(stacks.a) < 5:
        raise ValueError(f"stack a holds {len(stacks.a)} numbers, expected 5 or more")
    ranks = compress(stacks.a)
    stacks.a.clear()
    stacks.a.extend(ranks)
    stacks.pb()
    stacks.pb()
    turk_push_to_b(stacks)
    sort_three(stacks)
    turk_push_to_a(stacks)
    _bring_smallest_to_top(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` with the method suited to its size."""
    size = len(stacks.a)
    if size <= 1 or is_sorted(stacks.a):
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    else:
        sort_five_or_more(stacks)


def solve(numbers: Iterable[int]) -> list[str]:
    """The operations that sort ``numbers``, given top first."""
    stacks = Stacks(numbers)
    sort_stacks(stacks)
    return stacks.operations