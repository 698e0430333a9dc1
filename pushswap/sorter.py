"""Choosing a sequence of operations that sorts stack a."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .stacks import Stacks

_ROTATIONS = ("ra", "rb", "rr", "rra", "rrb", "rrr")


@dataclass
class MoveCount:
    """Rotations needed to bring one element of b and its place in a to the top."""

    ra: int = 0
    rb: int = 0
    rra: int = 0
    rrb: int = 0
    rr: int = 0
    rrr: int = 0

    def score(self) -> int:
        """Merge matching single rotations into double ones; return the total.

        Calling it again changes nothing.
        """
        shared = min(self.ra, self.rb)
        self.rr += shared
        self.ra -= shared
        self.rb -= shared
        shared = min(self.rra, self.rrb)
        self.rrr += shared
        self.rra -= shared
        self.rrb -= shared
        return self.rr + self.ra + self.rb + self.rrr + self.rra + self.rrb

    def perform(self, stacks: Stacks) -> None:
        """Carry out the counted rotations on ``stacks``."""
        for name in _ROTATIONS:
            for _ in range(getattr(self, name)):
                stacks.apply(name)


def median(stack: list[int]) -> int:
    """Pivot used to split stack a, taken from every element but the top.

    The lower of the two bottom elements stays first and the rest are put
    in order; the element in the middle of that arrangement is returned.
    """
    body = stack[:-1]
    if len(body) < 2:
        raise ValueError("median needs a stack of at least three elements")
    first, second = body[0], body[1]
    ordered = [min(first, second), *sorted([max(first, second), *body[2:]])]
    return ordered[len(body) // 2]


def smallest_index(stack: list[int]) -> int:
    """Index of the smallest element; the top wins a tie."""
    best = len(stack) - 1
    for index, value in enumerate(stack[:-1]):
        if value < stack[best]:
            best = index
    return best


def closest_greater(stack: list[int], num: int) -> int:
    """Index of the smallest element greater than ``num``, or 0 if there is none."""
    best = 0
    best_gap: int | None = None
    for index, value in enumerate(stack):
        if value > num:
            gap = value - num
            if best_gap is None or gap <= best_gap:
                best, best_gap = index, gap
    return best


def count_moves(index_b: int, target_a: int, stacks: Stacks) -> MoveCount:
    """Rotations that bring ``b[index_b]`` and ``a[target_a]`` to their tops."""
    top_a = len(stacks.a) - 1
    top_b = len(stacks.b) - 1
    moves = MoveCount()
    if index_b > top_b // 2:
        moves.rb = top_b - index_b
    else:
        moves.rrb = index_b + 1
    if target_a > top_a // 2:
        moves.ra = top_a - target_a
    else:
        moves.rra = target_a + 1
    return moves


def bring_to_top(stacks: Stacks, index: int) -> None:
    """Rotate stack a until the element at ``index`` is on top."""
    top = len(stacks.a) - 1
    if index == top:
        return
    if index >= top // 2:
        for _ in range(top - index):
            stacks.ra()
    else:
        for _ in range(index + 1):
            stacks.rra()


def partition_by_median(stacks: Stacks) -> None:
    """Push elements to b, lower halves first, until three are left in a."""
    if len(stacks.a) < 3:
        raise ValueError("partition needs at least three elements in stack a")
    while len(stacks.a) != 3:
        pivot = median(stacks.a)
        remaining = sum(1 for value in stacks.a[1:] if value <= pivot)
        while remaining and len(stacks.a) != 3:
            if stacks.a[-1] <= pivot:
                stacks.pb()
                remaining -= 1
            else:
                stacks.ra()


def sort_two(stacks: Stacks) -> None:
    """Sort a stack a of two elements."""
    if stacks.a[0] < stacks.a[1]:
        stacks.sa()


def _top_three(stacks: Stacks) -> tuple[int, int, int]:
    return stacks.a[-1], stacks.a[-2], stacks.a[-3]


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of stack a."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs three elements in stack a")
    top, mid, bot = _top_three(stacks)
    if top > mid and bot > top and mid < bot:
        stacks.sa()
    top, mid, bot = _top_three(stacks)
    if top > mid and top > bot and bot > mid:
        stacks.ra()
    top, mid, bot = _top_three(stacks)
    if top < mid and top > bot and mid > bot:
        stacks.rra()
    top, mid, bot = _top_three(stacks)
    if top > mid and top > bot and mid > bot:
        stacks.sa()
        stacks.rra()
    top, mid, bot = _top_three(stacks)
    if top < mid and top < bot and mid > bot:
        stacks.sa()
        stacks.ra()


def _push_smallest(stacks: Stacks, count: int) -> None:
    for _ in range(count):
        bring_to_top(stacks, smallest_index(stacks.a))
        stacks.pb()


def sort_four(stacks: Stacks) -> None:
    """Sort four elements: park the smallest in b, sort three, bring it back."""
    _push_smallest(stacks, 1)
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort five elements: park the two smallest in b, sort three, bring them back."""
    _push_smallest(stacks, 2)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def _insert_cheapest(stacks: Stacks) -> None:
    candidates = [
        count_moves(index, closest_greater(stacks.a, value), stacks)
        for index, value in enumerate(stacks.b)
    ]
    best = min(candidates, key=MoveCount.score)
    best.perform(stacks)
    stacks.pa()


def best_move(stacks: Stacks) -> None:
    """Sort more than five elements by partitioning then cheapest insertion."""
    remaining = stacks.size - 3
    partition_by_median(stacks)
    sort_three(stacks)
    for _ in range(remaining):
        _insert_cheapest(stacks)
    bring_to_top(stacks, smallest_index(stacks.a))


def sort_values(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``, the first value being the top."""
    stacks = Stacks(values)
    if stacks.is_sorted():
        return []
    count = len(stacks.a)
    if count == 2:
        sort_two(stacks)
    elif count == 3:
        sort_three(stacks)
    elif count == 4:
        sort_four(stacks)
    elif count == 5:
        sort_five(stacks)
    else:
        best_move(stacks)
    return list(stacks.moves)