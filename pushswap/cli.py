"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence, TextIO

from .parsing import InputError, parse_arguments
from .sorter import sort_values
from .stacks import OPERATIONS, Stacks

_OK = "\033[0;32mOK\n"
_KO = "\033[0;31mKO\n"
# The checker does not accept "ss".
_CHECKER_OPERATIONS = frozenset(OPERATIONS) - {"ss"}


def read_instructions(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` one at a time, each with its newline if it had one."""
    yield from stream


def check(values: Iterable[int], instructions: Iterable[str]) -> bool:
    """Apply newline-terminated instructions and tell whether ``values`` end up sorted.

    Raises :class:`InputError` on the first line that is not an instruction.
    """
    stacks = Stacks(values, checked=True)
    for line in instructions:
        name = line[:-1]
        if not line.endswith("\n") or name not in _CHECKER_OPERATIONS:
            raise InputError()
        stacks.apply(name)
    return stacks.is_sorted()


def _arguments(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in sort_values(values)))
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and report OK or KO."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        if len(values) == 1:
            return 0
        result = check(values, read_instructions(sys.stdin))
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(_OK if result else _KO)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())