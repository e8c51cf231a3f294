"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction, named as it is printed."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of every operation applied."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, *args: Operation | str) -> None:
        """Apply the given operations in order and record them.

        Operations that have nothing to act on leave the stacks unchanged
        but are still recorded.
        """
        for arg in args:
            operation = Operation(arg)
            self._perform(operation)
            self.operations.append(operation)

    def _perform(self, operation: Operation) -> None:
        a, b = self.a, self.b
        if operation is Operation.SA:
            _swap(a)
        elif operation is Operation.SB:
            _swap(b)
        elif operation is Operation.SS:
            _swap(a)
            _swap(b)
        elif operation is Operation.PA:
            _push(b, a)
        elif operation is Operation.PB:
            _push(a, b)
        elif operation is Operation.RA:
            _rotate(a)
        elif operation is Operation.RB:
            _rotate(b)
        elif operation is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif operation is Operation.RRA:
            _reverse_rotate(a)
        elif operation is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order from the top."""
        if self.b:
            return False
        return all(lower <= upper for lower, upper in zip(self.a, list(self.a)[1:]))