# algokit

Classic beginner algorithms as plain Python functions: number theory,
sorting, searching and a few small record and file helpers, plus an
`algokit` command that runs them from the shell.

It has no dependencies beyond the standard library and needs Python 3.10 or
later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `algokit.numbers`

| Function | Purpose |
| --- | --- |
| `ackermann(m, n)` | The Ackermann function, evaluated with an explicit stack rather than recursion |
| `factorial(n)` | `n!` |
| `fibonacci(n)` | The n-th Fibonacci number, with `fibonacci(0) == 0` |
| `fibonacci_series(count)` | A generator of the first `count` Fibonacci numbers (nothing when `count <= 0`) |
| `hcf(a, b)` | Highest common factor of two positive integers |
| `lcm(a, b)` | Least common multiple of two positive integers |
| `is_prime(n)` | True when `n` has exactly two positive divisors |
| `is_even(n)` | True when `n` is divisible by two |
| `fahrenheit_to_celsius(fahrenheit)` | Temperature conversion |
| `bitwise_summary(a, b)` | A dict with keys `and`, `or`, `xor`, `not` (of `a`), `left_shift` (`a << 2`) and `right_shift` (`a >> 1`) |

`ackermann`, `factorial` and `fibonacci` raise `ValueError` for negative
arguments; `hcf` and `lcm` raise `ValueError` unless both arguments are
positive.

```python
from algokit.numbers import ackermann, factorial, hcf, lcm, fahrenheit_to_celsius

ackermann(2, 3)              # 9
factorial(5)                 # 120
hcf(5, 15)                   # 5
lcm(5, 15)                   # 15
fahrenheit_to_celsius(212)   # 100.0
```

### `algokit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` and
`quick_sort` each take an iterable of comparable items and return a new list
in ascending order; the input is left untouched. `quick_sort` uses Lomuto
partitioning around the last element and works through its ranges with an
explicit stack.

```python
from algokit.sorting import merge_sort, quick_sort

merge_sort([5, 2, 9, 1, 6, 3])     # [1, 2, 3, 5, 6, 9]
quick_sort([29, 10, 14, 37, 13])   # [10, 13, 14, 29, 37]
```

### `algokit.searching`

- `binary_search(items, key)` halves a sorted sequence and returns an index
  of `key`, or `None` when it is absent.
- `linear_search(items, key)` returns the index of the first occurrence of
  `key`, or `None`.
- `is_palindrome(text)` is True when `text` reads the same backwards
  (case-sensitive).

```python
from algokit.searching import binary_search, is_palindrome

binary_search([2, 4, 6, 8, 10, 12, 14], 10)   # 4
is_palindrome("level")                         # True
```

### `algokit.records`

- `Student` is a dataclass with `name`, `roll` and `marks`.
  `Student.parse("Asha 7 91.5")` builds one from three whitespace-separated
  fields (raising `ValueError` on anything else), and `describe()` returns
  `"Name: Asha, Roll No: 7, Marks: 91.50"`.
- `Node` is a singly linked node with `data` and `next`; iterating a node
  yields the data of it and every node after it. `link(values)` chains values
  into nodes and returns the head, or `None` for no values.
- `swap(a, b)` returns `(b, a)`.
- `offset_values(items, count)` returns the first `count` items, raising
  `ValueError` for a negative count and `IndexError` when `count` exceeds the
  length.
- `write_profile(path, name, age)` writes `Name: <name>` and `Age: <age>` lines
  to a file; the name must be a single non-empty word.
- `read_token_pairs(path)` reads a file's whitespace-separated tokens two at a
  time. A trailing unpaired token is paired with the previous second token,
  or with an empty string when there is none.

## Command line

Installing the package adds an `algokit` command with one subcommand per
demonstration. Each takes its input as arguments and prints the result:

| Subcommand | Arguments |
| --- | --- |
| `ackermann` | `[m] [n]` (default 2 and 3) |
| `binary-search` | `[key]` (default 10), `--items` (default `2 4 6 8 10 12 14`) |
| `bitwise` | `[a] [b]` (default 12 and 5) |
| `even-odd` | `number` |
| `fibonacci` | `count` |
| `linear-search` | `key`, `--items` (default `10 20 30 40 50`) |
| `palindrome` | `text` |
| `prime` | `number` |
| `temperature` | `fahrenheit` |
| `students` | `name roll marks` for each student |
| `profile` | `name age`, `--path` (default `data.txt`) |

```
algokit ackermann            # Ackermann(2, 3) = 9
algokit prime 7              # 7 is a Prime number
algokit students Asha 7 91.5 Ravi 8 78
algokit --help
```

`profile` writes the name and age to the file and reads it back as token
pairs. Invalid input to a handler (a malformed student record, an unreadable
file and the like) prints `error: ...` to standard error and exits with
status 1.

The command does not prompt for input interactively; everything is passed on
the command line.