"""Hard-coded sorts for stacks of two to five numbers."""

from __future__ import annotations

from collections.abc import Sequence

from .operations import Operation, Stacks
from .parsing import is_sorted

_MAX_MINI = 5


def _min_position(values: Sequence[int]) -> int:
    return values.index(min(values))


def _a_is_sorted(stacks: Stacks) -> bool:
    return is_sorted(list(stacks.a))


def three_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three numbers using only operations on ``a``."""
    a = stacks.a
    if _a_is_sorted(stacks):
        return
    if a[0] < a[1] and a[1] > a[2] and a[0] < a[2]:
        stacks.apply(Operation.RRA, Operation.SA)
    if a[0] > a[1] and a[1] < a[2] and a[2] > a[0]:
        stacks.apply(Operation.SA)
    if a[0] < a[1] and a[1] > a[2] and a[2] < a[0]:
        stacks.apply(Operation.RRA)
    if a[0] > a[1] and a[1] < a[2] and a[2] < a[0]:
        stacks.apply(Operation.RA)
    if a[0] > a[1] and a[1] > a[2] and a[2] < a[0]:
        stacks.apply(Operation.RA, Operation.SA)


def four_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four numbers, parking the smallest on ``b``."""
    position = _min_position(stacks.a)
    if position != 0:
        if position == 3:
            stacks.apply(Operation.RRA)
        elif position == 1:
            stacks.apply(Operation.RA)
        else:
            stacks.apply(Operation.RRA, Operation.RRA)
        if _a_is_sorted(stacks):
            return
    stacks.apply(Operation.PB)
    three_sort(stacks)
    stacks.apply(Operation.PA)


def five_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of five numbers, parking the smallest on ``b``."""
    position = _min_position(stacks.a)
    if position != 0:
        if position == 4:
            stacks.apply(Operation.RRA)
        elif position == 1:
            stacks.apply(Operation.SA)
        elif position == 2:
            stacks.apply(Operation.RA, Operation.RA)
        else:
            stacks.apply(Operation.RRA, Operation.RRA)
        if _a_is_sorted(stacks):
            return
    stacks.apply(Operation.PB)
    four_sort(stacks)
    stacks.apply(Operation.PA)


def mini_sort(stacks: Stacks) -> None:
    """Sort an unsorted stack ``a`` of two to five distinct numbers."""
    size = len(stacks.a)
    if size == 2:
        stacks.apply(Operation.SA)
    elif size == 3:
        three_sort(stacks)
    elif size == 4:
        four_sort(stacks)
    elif size == _MAX_MINI:
        five_sort(stacks)
    else:
        raise ValueError(f"mini_sort handles 2 to {_MAX_MINI} numbers, got {size}")