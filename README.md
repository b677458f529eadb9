# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. It prints the operations it uses, one per line.

The operations:

| name  | effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: its top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: its bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

Pass the numbers as arguments; the first number is the top of stack `a`.
One argument may hold several numbers separated by whitespace.

```
$ push-swap 2 1 3
sa
$ push-swap "3 2 1"
sa
rra
```

The same command is available as `python -m pushswap.cli`.

A list that is already sorted, or has a single number, prints nothing.
With no arguments the command prints nothing and exits with status 1.
It prints `Error` on standard error and exits with status 1 when an
argument is not a whitespace-separated list of integers (an argument that
is empty, blank or ends in whitespace counts as malformed), when a number
is outside the 32-bit signed range, or when a number repeats.

Lists of up to three numbers are solved directly, four numbers by setting
the smallest aside, and five or more by repeatedly moving the element that
needs the fewest rotations between the stacks.

## Library

```python
from pushswap.sorting import solve

moves = solve([5, 1, 4, 2, 3])   # the list of operation names
```

The stacks can be driven by hand; every operation that takes effect is
recorded in `operations`:

```python
from pushswap.stacks import Stacks

stacks = Stacks([3, 1, 2])
stacks.sa()
stacks.apply("ra")
print(list(stacks.a), stacks.operations)   # [3, 2, 1] ['sa', 'ra']
```

`Stacks.apply` raises `ValueError` for an unknown operation name; `pa` and
`pb` do nothing when the stack they take from is empty.

Modules:

- `pushswap.stacks`: the `Stacks` class and its eleven operations.
- `pushswap.parsing`: `parse_arguments` turns command-line arguments into
  numbers and raises `InputError` on bad input; also `parse_int`,
  `check_format` and `has_duplicates`.
- `pushswap.costs`: the `Moves` record and the rotation-cost functions
  (`rotation_cost`, `costs_to_b`, `costs_to_a`, `cheapest`,
  `nearest_below`, `nearest_above`).
- `pushswap.sorting`: `solve`, `sort_stacks` and the per-size sorting
  steps, plus `compress` and `is_sorted`.
- `pushswap.cli`: `main`, the command-line entry point.

When five or more numbers are sorted, stack `a` ends up holding the ranks
of the numbers (0 for the smallest) rather than the numbers themselves;
the printed operations are the same either way.

## What it does not do

There is no checker: the package does not read a list of operations from
input to verify that they sort a given list.

## Tests

```
pip install ".[test]"
pytest
```