"""Binary radix sort of stack ``a`` using stack ``b`` as the bucket."""

from __future__ import annotations

from collections.abc import Sequence

from .operations import Operation, Stacks


def normalize(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, 0 for the smallest."""
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]


def radix_sort(stacks: Stacks) -> None:
    """Sort stack ``a`` by the ranks of its values, one bit per pass.

    Each pass sends the numbers whose current bit is 0 to ``b``; numbers on
    ``b`` whose next bit is 1 are returned to ``a`` straight away, which
    saves moving them twice.
    """
    values = list(stacks.a)
    rank = dict(zip(values, normalize(values)))
    bits = max(len(values) - 1, 0).bit_length()

    for bit in range(bits):
        for _ in range(len(stacks.a)):
            if (rank[stacks.a[0]] >> bit) & 1:
                stacks.apply(Operation.RA)
            else:
                stacks.apply(Operation.PB)
        for _ in range(len(stacks.b)):
            if (rank[stacks.b[0]] >> (bit + 1)) & 1:
                stacks.apply(Operation.PA)
            else:
                stacks.apply(Operation.RB)

    while stacks.b:
        stacks.apply(Operation.PA)