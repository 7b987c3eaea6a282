# pushswap

You get two stacks, `a` and `b`, and a list of integers that starts on `a`.
Eleven instructions are allowed. The goal is to leave `a` sorted in
ascending order, with the smallest value on top, and `b` empty. The
instructions are:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b` or both up, so the top goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b` or both down, so the bottom goes to the top |

An instruction applied to a stack that is too small for it does nothing.

This package has two commands:

- `push_swap` prints a list of instructions that sorts the numbers, one per
  line on standard output.
- `checker` reads instructions from standard input, one per line, runs them,
  and says whether the numbers end up sorted.

## Installation

```
pip install .
```

## Usage

Numbers can be given as separate arguments, as one quoted argument with
spaces between them, or as a mix of both:

```
push_swap 3 2 1
push_swap "4 67 3" 87 23
```

To check a solution, pipe its output into `checker` with the same numbers:

```
push_swap 5 1 4 2 3 | checker 5 1 4 2 3
```

`checker` writes `OK` to standard error when `a` ends up sorted and `b` is
empty, and `KO` otherwise. Both commands do nothing when given no numbers,
and `push_swap` prints nothing when the numbers are already sorted.

Bad input is reported as `ERROR` on standard error. That covers an empty
argument, a value that is not an integer, a value whose magnitude exceeds
2147483647, and a duplicate value. `checker` also rejects numbers holding
any character other than a digit or a sign, an instruction it does not know,
and a last instruction that is not ended by a newline.

## Library use

```python
from pushswap.checker import check
from pushswap.sorting import solve
from pushswap.stacks import Stacks

values = [5, 1, 4, 2, 3]
operations = solve(values)

stacks = Stacks(values)
stacks.run(operations)
assert stacks.is_sorted()

assert check(values, operations)
assert not check([2, 1], ["ra\n"])
```

- `pushswap.stacks` has the `Operation` enum of the eleven instructions and
  the `Stacks` class, with `apply`, `run`, `is_sorted` and a `history` of
  the operations applied.
- `pushswap.parsing` turns command-line arguments into integers with
  `parse_int`, `parse_argument` and `parse_arguments`, checks for repeats
  with `check_duplicates`, and raises `InputError` when the input is bad.
- `pushswap.sorting` has `solve`, which picks a strategy by the number of
  values, along with the strategies themselves (`sort_two`, `sort_three`,
  `sort_four`, `sort_five`, `sort_chunks`) and the `ranks` helper.
- `pushswap.checker` has `parse_instruction`, `read_instructions` and
  `check`, which runs instruction lines or operations against a list of
  values.

## Tests

```
pip install .[test]
pytest
```