# pushswap

Sorts a list of distinct integers using two stacks, **a** and **b**, and a
small fixed set of operations, printing each operation on its own line.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the first two elements of a                |
| `sb`  | swap the first two elements of b                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of b onto a                        |
| `pb`  | move the top of a onto b                        |
| `ra`  | rotate a upwards (first element becomes last)   |
| `rb`  | rotate b upwards                                |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate a downwards (last element becomes first) |
| `rrb` | rotate b downwards                              |
| `rrr` | `rra` and `rrb` together                        |

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, or as one argument separated by
spaces:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The program prints the operations that sort stack a in ascending order.
Input that is already sorted produces no output. Two to five numbers are
sorted with dedicated routines; larger inputs use a binary radix sort on the
numbers' ranks.

The program prints `Error` and exits with status 1 when:

- an argument is not an optional minus sign followed by digits (a leading
  `+` is rejected, and so is a lone `-`);
- a number lies outside the 32-bit signed range;
- two arguments read as the same number (so `1` and `01` count as repeats);
- a single argument is empty or holds only whitespace.

Called with no arguments, it prints nothing and exits with a non-zero status.

## Library use

```python
from pushswap.cli import solve

solve(["3", "2", "1"])   # ['ra', 'sa']
```

- `pushswap.cli` — `solve(args)` returns the list of operations; `main(argv=None)`
  is the command's entry point.
- `pushswap.stack` — `Stacks` holds the two stacks (`a` and `b`, top first) and
  exposes each operation as a method (`sa`, `pb`, `rra`, ...). Every operation
  applied is appended to `Stacks.operations`; `values("a")` and `indices("a")`
  list a stack's numbers and ranks.
- `pushswap.sorting` — ranking (`assign_indices`), the small-input routines
  (`sort_short`, `sort_three`, `sort_four`, `sort_five`) and `radix_sort`.
- `pushswap.parsing` — the argument checks (`validate`, `read_values`, ...),
  which raise `pushswap.parsing.InputError` on bad input.

## What it does not do

The package only produces a list of operations. It has no command that reads
a list of operations and checks whether they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```