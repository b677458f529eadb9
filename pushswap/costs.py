"""Counting the rotations that bring an element and its place to the tops."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class Moves:
    """Rotations to perform before a push, by instruction name."""

    ra: int = 0
    rra: int = 0
    rb: int = 0
    rrb: int = 0
    rr: int = 0
    rrr: int = 0

    def merged(self) -> Moves:
        """Fold rotations of both stacks in the same direction into rr and rrr."""
        both_up = max(0, min(self.ra, self.rb))
        both_down = max(0, min(self.rra, self.rrb))
        return replace(
            self,
            ra=self.ra - both_up,
            rb=self.rb - both_up,
            rr=self.rr + both_up,
            rra=self.rra - both_down,
            rrb=self.rrb - both_down,
            rrr=self.rrr + both_down,
        )

    def total(self) -> int:
        """The number of instructions these moves take."""
        return sum(getattr(self, field.name) for field in fields(self))


def rotation_cost(index: int, size: int) -> tuple[int, int]:
    """Return ``(up, down)``: the cheaper way to bring ``index`` to the top.

    Exactly one of the two is used; rotating up wins a tie.
    """
    if not 0 <= index < size:
        raise ValueError(f"index {index} outside a stack of {size}")
    down = size - index
    return (index, 0) if index <= down else (0, down)


def nearest_below(values: Iterable[int], target: int) -> int:
    """The largest value smaller than ``target``; ValueError if there is none."""
    below = [value for value in values if value < target]
    if not below:
        raise ValueError(f"no value below {target}")
    return max(below)


def nearest_above(values: Iterable[int], target: int) -> int:
    """The smallest value larger than ``target``; ValueError if there is none."""
    above = [value for value in values if value > target]
    if not above:
        raise ValueError(f"no value above {target}")
    return min(above)


def costs_to_b(a: Sequence[int], b: Sequence[int]) -> list[Moves]:
    """Moves placing each element of ``a`` on top, above its place in ``b``.

    Stack ``b`` is kept in descending order: an element goes above the
    nearest smaller one, or above the largest when it is a new extreme.
    """
    a_values, b_values = list(a), list(b)
    if not b_values:
        raise ValueError("stack b is empty")
    highest, lowest = max(b_values), min(b_values)
    result = []
    for index, value in enumerate(a_values):
        ra, rra = rotation_cost(index, len(a_values))
        if value > highest or value < lowest:
            target = highest
        else:
            target = nearest_below(b_values, value)
        rb, rrb = rotation_cost(b_values.index(target), len(b_values))
        result.append(Moves(ra=ra, rra=rra, rb=rb, rrb=rrb).merged())
    return result


def costs_to_a(a: Sequence[int], b: Sequence[int]) -> list[Moves]:
    """Moves placing each element of ``b`` on top, above its place in ``a``.

    Stack ``a`` is kept in ascending order: an element goes above the
    nearest larger one, or above the smallest when it is a new extreme.
    """
    a_values, b_values = list(a), list(b)
    if not a_values:
        raise ValueError("stack a is empty")
    highest, lowest = max(a_values), min(a_values)
    result = []
    for index, value in enumerate(b_values):
        rb, rrb = rotation_cost(index, len(b_values))
        if value > highest or value < lowest:
            target = lowest
        else:
            target = nearest_above(a_values, value)
        ra, rra = rotation_cost(a_values.index(target), len(a_values))
        result.append(Moves(ra=ra, rra=rra, rb=rb, rrb=rrb).merged())
    return result


def cheapest(moves: Iterable[Moves]) -> Moves:
    """The first of ``moves`` with the smallest total; ValueError if empty."""
    return min(moves, key=Moves.total)