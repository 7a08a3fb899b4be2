# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of moves. The `push-swap` command prints the moves it used, one
per line.

## Moves

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A single-stack move that would change nothing (for example `sa` with fewer
than two values in `a`, or `pa` with `b` empty) is neither carried out nor
recorded. The combined moves `ss`, `rr` and `rrr` are always recorded.

## Command line

```
pip install .
push-swap 3 2 1
```

prints

```
sa
rra
```

Numbers may be given as separate arguments or within one argument,
separated by spaces (`push-swap "4 67 3" 87 23`). The first number is the
top of stack `a`. Input that is already sorted produces no output.

If a number is not a plain decimal integer (an optional `+` or `-`
followed by digits), lies outside the 32-bit signed range, or repeats an
earlier number, the command writes `Error` to standard error and exits
with status 1. A single empty argument is also an error. Run with no
arguments, it exits with status 1 and prints nothing.

Two values are sorted with at most one `sa`, three with at most two moves;
for four and five values the smallest ones are parked on `b` while the
remaining three are sorted. Longer lists are sorted with a binary radix
sort over the ranks of the values.

## Library use

```python
import io

from pushswap.parsing import parse_args
from pushswap.sorting import sort
from pushswap.stacks import PushSwap

out = io.StringIO()
machine = PushSwap(parse_args(["5 1 4", "2", "3"]), out)
sort(machine)
print(out.getvalue())
print(list(machine.a))      # [1, 2, 3, 4, 5]
print(machine.operations)   # the moves as Operation members
```

- `pushswap.parsing`: `parse_args` turns arguments into a list of values
  and raises `InputError` (a `ValueError`) on invalid input; also
  `is_valid_number`, `atol`, `split_words` and `count_words`.
- `pushswap.stacks`: `Stack`, the `Operation` enum of move names, and
  `PushSwap`, which holds stacks `a` and `b`, records each move in
  `operations`, writes it to `out` when one is given, and can replay a
  move by name with `apply("ra")`.
- `pushswap.sorting`: `sort` and the strategies behind it (`sort_three`,
  `sort_four`, `sort_five`, `radix_sort`), plus `is_sorted`,
  `assign_index`, `max_bits`, `smallest_position` and `push_smallest_top`.
- `pushswap.cli`: `main(argv=None)`, the entry point of `push-swap`.

The `pushswap.libft` package holds small helpers: `characters` (ASCII
classes, case mapping, `atoi`, `itoa`, writing to a stream), `strings`
(splitting, searching, trimming, bounded copies into byte buffers),
`memory` (filling, searching, comparing and copying byte buffers) and
`lists` (a singly linked `LinkedList` of `Node` objects).

## What it does not do

There is no command that reads a list of moves and checks whether they
sort the numbers. `PushSwap.apply` together with `is_sorted` can be used
to replay and check moves from Python.

## Tests

```
pip install .[test]
pytest
```