# pushswap

Sort a list of integers with two stacks, `a` and `b`, using only a small set
of instructions, and check whether a sequence of instructions sorts a list.

## Instructions

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element becomes the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element becomes the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

### push_swap

`push_swap` takes the numbers as arguments, the first one being the top of
stack `a`, and prints the instructions that sort them in ascending order,
one per line:

```
$ push_swap 2 1 3
sa
```

Numbers may also be given in one quoted argument: `push_swap "3 2 1"`.
Nothing is printed when the input is already sorted or when no arguments
are given. Invalid input prints `Error` on standard error: a token that is
not a number, a sign not directly followed by a digit, a value outside the
32-bit signed integer range, or a duplicate value.

### checker

`checker` takes the same arguments, reads instructions from standard input,
one per line, and prints `OK` (in green) if they leave `a` sorted and `b`
empty, `KO` (in red) otherwise.

```
$ push_swap 2 1 3 | checker 2 1 3
OK
```

The checker accepts every instruction above except `ss`; any other line,
or a last line without a newline, prints `Error` on standard error. It
skips moves that cannot be made: `pa` or `pb` from an empty stack, and
`rr` or `rrr` unless `a` is not empty and `b` holds more than two
elements. Given a single number, it prints nothing.

Both commands always exit with status 0. `python -m pushswap.cli` runs
`push_swap`.

## Library

```python
from pushswap.sorter import sort_values
from pushswap.cli import check

moves = sort_values([3, 1, 2])
assert check([3, 1, 2], (move + "\n" for move in moves))
```

- `pushswap.sorter.sort_values(values)` returns the list of instruction
  names that sorts `values` (the first value being the top of `a`).
- `pushswap.cli.check(values, instructions)` applies newline-terminated
  instruction lines under the checker's rules and returns whether the
  result is sorted; it raises `InputError` on a line that is not an
  instruction.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments
  into a list of integers, raising `pushswap.parsing.InputError` on bad
  input.
- `pushswap.stacks.Stacks(values, checked=False)` holds the two stacks,
  applies instructions by name with `Stacks.apply`, records every move
  carried out in `Stacks.moves`, and reports `Stacks.is_sorted()`. Without
  `checked`, pushing from an empty stack raises `IndexError`.

## Tests

```
pip install .[test]
pytest
```