"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from typing import Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def _swap_top(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[-1], stack[-2] = stack[-2], stack[-1]
    return True


def _rotate(stack: list[int]) -> None:
    if stack:
        stack.insert(0, stack.pop())


def _reverse_rotate(stack: list[int]) -> None:
    if stack:
        stack.append(stack.pop(0))


class Stacks:
    """Stacks ``a`` and ``b``, each stored bottom first with the top element last.

    With ``checked`` set, the checker's rules apply: a move that cannot be
    made is silently skipped. Otherwise pushing from an empty stack raises
    :class:`IndexError`. Every move that is carried out is appended to
    :attr:`moves`.
    """

    def __init__(self, values: Iterable[int], checked: bool = False) -> None:
        # The first value given ends up on top of stack a.
        self.a: list[int] = list(reversed(list(values)))
        self.b: list[int] = []
        self.checked = checked
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r}, checked={self.checked!r})"

    @property
    def size(self) -> int:
        """Total number of elements held by both stacks."""
        return len(self.a) + len(self.b)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if _swap_top(self.a):
            self.moves.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if _swap_top(self.b):
            self.moves.append("sb")

    def ss(self) -> None:
        """Swap the top pair of both stacks."""
        _swap_top(self.a)
        _swap_top(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            if self.checked:
                return
            raise IndexError("pa: stack b is empty")
        self.a.append(self.b.pop())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            if self.checked:
                return
            raise IndexError("pb: stack a is empty")
        self.b.append(self.a.pop())
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate a: its top element goes to the bottom."""
        if self.a:
            _rotate(self.a)
            self.moves.append("ra")

    def rb(self) -> None:
        """Rotate b: its top element goes to the bottom."""
        if self.b:
            _rotate(self.b)
            self.moves.append("rb")

    def _both_rotatable(self) -> bool:
        # The checker only rotates both stacks when a is not empty and
        # b holds more than two elements.
        return not self.checked or (bool(self.a) and len(self.b) > 2)

    def rr(self) -> None:
        """Rotate both stacks."""
        if not self._both_rotatable():
            return
        _rotate(self.a)
        _rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Reverse-rotate a: its bottom element goes to the top."""
        if self.a:
            _reverse_rotate(self.a)
            self.moves.append("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom element goes to the top."""
        if self.b:
            _reverse_rotate(self.b)
            self.moves.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        if not self._both_rotatable():
            return
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.moves.append("rrr")

    def apply(self, name: str) -> None:
        """Carry out the operation called ``name``."""
        if name not in OPERATIONS:
            raise ValueError(f"unknown operation: {name!r}")
        getattr(self, name)()

    def is_sorted(self) -> bool:
        """True when b is empty and a reads in ascending order from the top."""
        if self.b:
            return False
        return all(lower >= upper for lower, upper in zip(self.a, self.a[1:]))