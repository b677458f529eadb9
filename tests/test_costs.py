import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.costs import (
    Moves,
    cheapest,
    costs_to_a,
    costs_to_b,
    nearest_above,
    nearest_below,
    rotation_cost,
)
from pushswap.stacks import Stacks

_ORDER = ("rr", "rrr", "ra", "rra", "rb", "rrb")


def _perform(stacks, moves):
    for name in _ORDER:
        for _ in range(getattr(moves, name)):
            stacks.apply(name)


def _cyclic_descents(seq):
    values = list(seq)
    return sum(1 for x, y in zip(values, values[1:] + values[:1]) if x > y)


def _is_rotated_ascending(seq):
    return len(seq) < 2 or _cyclic_descents(seq) <= 1


def _is_rotated_descending(seq):
    return _is_rotated_ascending([-x for x in seq])


@st.composite
def _split_stacks(draw, keep_a_sorted):
    numbers = draw(
        st.lists(st.integers(-1000, 1000), min_size=2, max_size=12, unique=True)
    )
    cut = draw(st.integers(1, len(numbers) - 1))
    first, second = numbers[:cut], numbers[cut:]
    shift = draw(st.integers(0, len(numbers)))
    if keep_a_sorted:
        ordered = sorted(first)
        shift %= len(ordered)
        return ordered[shift:] + ordered[:shift], second
    ordered = sorted(second, reverse=True)
    shift %= len(ordered)
    return first, ordered[shift:] + ordered[:shift]


def test_moves_default_total_is_zero():
    assert Moves().total() == 0


def test_moves_total_counts_single_field():
    assert Moves(rrr=7).total() == 7


def test_moves_merged_without_overlap_is_unchanged():
    moves = Moves(ra=3, rrb=4)
    assert moves.merged() == moves


@given(*(st.integers(0, 30) for _ in range(6)))
def test_moves_merged_invariants(ra, rra, rb, rrb, rr, rrr):
    moves = Moves(ra=ra, rra=rra, rb=rb, rrb=rrb, rr=rr, rrr=rrr)
    merged = moves.merged()
    assert merged.ra == 0 or merged.rb == 0
    assert merged.rra == 0 or merged.rrb == 0
    assert merged.rr + merged.ra == rr + ra
    assert merged.rr + merged.rb == rr + rb
    assert merged.rrr + merged.rra == rrr + rra
    assert merged.rrr + merged.rrb == rrr + rrb
    assert merged.total() <= moves.total()


def test_rotation_cost_top_needs_nothing():
    assert rotation_cost(0, 5) == (0, 0)


@given(st.integers(1, 200).flatmap(lambda n: st.tuples(st.integers(0, n - 1), st.just(n))))
def test_rotation_cost_picks_cheaper_direction(case):
    index, size = case
    up, down = rotation_cost(index, size)
    assert (up, down) in {(index, 0), (0, size - index)}
    assert up + down == min(index, size - index)
    if index <= size - index:
        assert down == 0


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=10, unique=True), st.data())
def test_rotation_cost_brings_index_to_top(values, data):
    index = data.draw(st.integers(0, len(values) - 1))
    up, down = rotation_cost(index, len(values))
    stacks = Stacks(values)
    _perform(stacks, Moves(ra=up, rra=down))
    assert stacks.a[0] == values[index]


@pytest.mark.parametrize(("index", "size"), [(-1, 3), (3, 3), (0, 0)])
def test_rotation_cost_rejects_bad_index(index, size):
    with pytest.raises(ValueError):
        rotation_cost(index, size)


def test_nearest_below_and_above():
    assert nearest_below([5, 1, 3], 4) == 3
    assert nearest_above([5, 1, 8], 4) == 5


def test_nearest_without_candidate_raises():
    with pytest.raises(ValueError):
        nearest_below([5, 6], 4)
    with pytest.raises(ValueError):
        nearest_above([1, 2], 4)


@given(_split_stacks(keep_a_sorted=False))
def test_costs_to_b_keep_b_rotated_descending(case):
    a, b = case
    moves = costs_to_b(a, b)
    assert len(moves) == len(a)
    for index, move in enumerate(moves):
        stacks = Stacks(a)
        stacks.b.extend(b)
        _perform(stacks, move)
        assert stacks.a[0] == a[index]
        stacks.pb()
        assert _is_rotated_descending(stacks.b)


@given(_split_stacks(keep_a_sorted=True))
def test_costs_to_a_keep_a_rotated_ascending(case):
    a, b = case
    moves = costs_to_a(a, b)
    assert len(moves) == len(b)
    for index, move in enumerate(moves):
        stacks = Stacks(a)
        stacks.b.extend(b)
        _perform(stacks, move)
        assert stacks.b[0] == b[index]
        stacks.pa()
        assert _is_rotated_ascending(stacks.a)


def test_costs_need_a_non_empty_target():
    with pytest.raises(ValueError):
        costs_to_b([1, 2], [])
    with pytest.raises(ValueError):
        costs_to_a([], [1, 2])


def test_cheapest_prefers_first_of_equal_totals():
    options = [Moves(ra=2), Moves(rb=1), Moves(rra=1)]
    assert cheapest(options) is options[1]


@given(st.lists(st.builds(Moves, ra=st.integers(0, 9), rrb=st.integers(0, 9)), min_size=1))
def test_cheapest_has_minimal_total(options):
    best = cheapest(options)
    assert best in options
    assert all(best.total() <= option.total() for option in options)


def test_cheapest_of_nothing_raises():
    with pytest.raises(ValueError):
        cheapest([])