# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of moves, printing each move on its own line.

## Installation

```
pip install .
```

## Usage

Numbers may be given as separate arguments or together in one quoted
argument; arguments are split on spaces:

```
push_swap 3 2 1
push_swap "5 1 4 2 3"
```

The output is a sequence of moves that sorts stack `a` in ascending order,
with the top of the stack being the first element:

| Move  | Effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the first two elements of `a`           |
| `sb`  | swap the first two elements of `b`           |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` upwards: the first becomes last   |
| `rra` | rotate `a` downwards: the last becomes first |

Input that is already sorted prints nothing. Values are first replaced by
their ranks (0 for the smallest). Two, three, and four or five numbers are
handled by dedicated routines; longer lists are sorted with a binary radix
sort over the ranks.

### Errors

`Error` is written to standard error, and nothing to standard output, when:

- no arguments are given, or an argument is empty or holds only blanks or
  control characters;
- a word is not an optionally signed decimal integer;
- a value lies outside the 32-bit signed range;
- a value appears more than once;
- fewer than two numbers are given.

The exit status is 0 in every case, errors included.

## Library use

```python
from pushswap.cli import solve
from pushswap.parsing import parse_numbers

values = parse_numbers(["4 2 3 1"])   # [4, 2, 3, 1]
solve(values)   # ['ra', 'pb', 'ra', 'pb', 'sb', 'rra', 'pa', 'pa']
```

- `pushswap.parsing`: `parse_numbers` turns arguments into integers and
  raises `InputError` (a `ValueError`) on bad input; `get_args`, `is_valid`,
  `has_overflow`, `is_duplicate` and `is_array_sorted` are the checks it uses.
- `pushswap.stacks`: `Stacks` holds `a` and `b`, performs the moves
  (`swap_a`, `swap_b`, `push_a`, `push_b`, `rotate_a`, `reverse_rotate_a`),
  records them in `operations` and optionally writes them to a stream;
  `index_stack` ranks a list of values.
- `pushswap.sort`: `sort_three`, `sort_four_to_five` and `radix_sort` operate
  on a `Stacks` of ranks.
- `pushswap.cli`: `solve` returns the moves for a list of distinct values
  (raising `ValueError` on duplicates); `main` is the `push_swap` command.
- `pushswap.printf`: `format_string` and `printf` handle the `c`, `s`, `p`,
  `d`, `i`, `u`, `x`, `X` and `%` conversions; `number_in_base` and
  `format_pointer` are its helpers.
- `pushswap.libft`: small helpers in `chars` (ASCII classification and case),
  `search` (string length, comparison, search, bounded copy and mapping),
  `convert` (`atoi`, `atol`, `itoa`, `split`, `strjoin`, `substr`,
  `strtrim`), `memory` (byte-buffer fill, copy, move, search, compare and
  `calloc`), `lists` (`LinkedList` and `Node`) and `output` (`put_char`,
  `put_str`, `put_endl`, `put_nbr`).

## What it does not do

There is no checker: nothing reads a list of moves and verifies that it sorts
the input. The moves `ss`, `rb`, `rr`, `rrb` and `rrr` are not implemented,
and the solver does not search for a shortest sequence of moves.

## Tests

```
pip install .[test]
pytest
```