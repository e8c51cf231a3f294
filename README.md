# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small set of
operations. It prints the operations it used, one per line.

## The operations

`pushswap.operations.Operation` names all eleven operations:

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` at once                             |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top element becomes the last   |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` at once                             |
| `rra` | rotate `a` down: the last element becomes the top |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` at once                           |

An operation with nothing to act on, such as `pa` while `b` is empty, leaves
the stacks unchanged. The solver itself only emits `sa`, `pa`, `pb`, `ra`,
`rb` and `rra`.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments; the first is the top of stack `a`:

```
push-swap 3 2 1
```

prints

```
ra
sa
```

Lists of two to five numbers are sorted with hand-written sequences; longer
lists are ranked and sorted with a binary radix sort. Input that is already
sorted prints nothing, and so does a call with zero or one argument (a single
argument is not checked).

Each argument must consist of ASCII digits only: signs, including `-` and
`+`, are rejected, so only non-negative numbers are accepted. An empty
argument counts as zero. If an argument contains anything other than digits,
is greater than 2147483647, or a value appears twice, the command writes
`Error` to standard error and exits with status 1.

## Library

```python
from pushswap.cli import solve
from pushswap.operations import Stacks

moves = solve([5, 1, 4, 2, 3])

stacks = Stacks([5, 1, 4, 2, 3])
stacks.apply(*moves)
assert stacks.is_sorted()
```

- `pushswap.cli.solve(values)` returns the list of `Operation`s that sort
  `values`; it raises `InputError` if a value repeats.
- `pushswap.operations.Stacks(values)` holds stacks `a` and `b` (as deques,
  top first) and an `operations` list recording everything applied.
  `apply(*ops)` takes `Operation` members or their names as strings;
  `is_sorted()` is true when `b` is empty and `a` ascends from the top.
- `pushswap.parsing.parse_arguments(args)` turns command-line strings into
  integers and raises `pushswap.parsing.InputError` on bad input;
  `parse_number`, `check_duplicates` and `is_sorted` are available on their
  own.
- `pushswap.minisort` has `three_sort`, `four_sort`, `five_sort` and
  `mini_sort`, which act on a `Stacks` with two to five numbers on `a`.
- `pushswap.radix.normalize(values)` replaces each value by its rank in
  sorted order; `radix_sort(stacks)` sorts `a` by those ranks.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input. To verify a sequence, apply it to a `Stacks` and call
`is_sorted()`, as in the example above.