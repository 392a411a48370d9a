# algo

A collection of small, classic algorithms with plain Python interfaces:
number-base conversion, basic arithmetic, list searches, FizzBuzz, a handful
of Big O illustrations and two elementary sorting algorithms. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algo.bases`: number bases (2 to 16)

Digits are `0123456789ABCDEF` (upper case only).

```python
from algo.bases import base_to_dec, dec_to_base, base_to_base

base_to_dec("E", 16)               # 14
base_to_dec("1110", 2)             # 14
dec_to_base(14, 16)                # "E"
dec_to_base(14, 2)                 # "1110"
base_to_base("E", 16, 2)           # "1110"
base_to_base("8831A383B", 12, 16)  # "DEADBEEF"
```

A base outside 2 to 16, or a character that is not one of the digits, raises
`ValueError`. `dec_to_base` returns an empty string for zero and for negative
numbers.

### `algo.arith`: arithmetic

```python
from algo.arith import factor, fibonacci, gcd, total

factor([2, 3, 5], 28)    # [2, 2, 7]; a remainder above 1 is kept as a factor
factor([], 4)            # [4]
fibonacci(14)            # 377
gcd(30, 9)               # 3
total([1, 2, 3, 4, 5])   # 15
```

`factor` raises `ValueError` when asked to factor zero. `fibonacci` returns
`n` itself for `n` below 2 and is computed iteratively.

### `algo.lists`: searching and reversing

```python
from algo.lists import find_two_that_sum, num_in_list, reverse

find_two_that_sum([1, 2, 3, 4], 7)   # (2, 3): indices i < j of two entries summing to 7
find_two_that_sum([0, 1, 1], 0)      # None when no pair exists
num_in_list([1, 2, 3], 2)            # True
reverse("alphabet")                  # "tebahpla"
```

`find_two_that_sum` never modifies its input and uses each entry at most once.

### `algo.fizzbuzz`

```python
import io
from algo.fizzbuzz import fizz_buzz_items, fizz_buzz_line, fizz_buzz

list(fizz_buzz_items(5))   # ["1", "2", "Fizz", "4", "Buzz"]
fizz_buzz_line(5)          # "1, 2, Fizz, 4, Buzz"
fizz_buzz(15)              # prints "1, 2, Fizz, ..., 14, Fizz Buzz" and a newline

buffer = io.StringIO()
fizz_buzz(3, file=buffer)  # buffer holds "1, 2, Fizz\n"
```

Numbers divisible by both 3 and 5 become `"Fizz Buzz"`.

### `algo.bigo`: Big O illustrations

Functions of different complexity classes, useful for timing experiments:

- `add(a, b)`: O(1)
- `sum_to_max(maximum)`: 1 + ... + maximum by counting, O(N)
- `sum_to_max_v2(maximum)`: the same by formula, O(1)
- `sum_vals(vals)`: sum of an iterable, O(N)
- `find(items, x)`: index of the first `x`, or -1, O(N)
- `grid(x, y)`: `y` rows of `x` alternating `x`/`o` characters, O(XY)
- `print_list(word, n, file=None)`: prints the code points of `word` run
  together, `n` times, O(N*M)
- `cube(n)`: every `(x, y, z)` triple below `n`, one per line, O(N^3)

```python
from algo.bigo import grid, cube, sum_to_max_v2

grid(3, 3)          # "xox\noxo\nxox\n"
cube(1)             # "(0, 0, 0)\n"
sum_to_max_v2(100)  # 5050
```

### `algo.sorting`: bubble sort and insertion sort

Both sorts work in place on a mutable sequence, are stable, and take an
optional `key` function.

```python
from algo.sorting import (
    Person, bubble_sort, insertion_sort,
    bubble_sort_people, insertion_sort_people,
)

numbers = [10, 9, 8, 3, 5]
bubble_sort(numbers)              # numbers is now [3, 5, 8, 9, 10]

words = ["dog", "cat", "ball"]
insertion_sort(words, key=len)    # ["dog", "cat", "ball"] sorted by length, stably

people = [
    Person(age=45, first_name="Johnny", last_name="Testuser"),
    Person(age=12, first_name="Billy", last_name="Tables"),
]
bubble_sort_people(people)        # by age, then last name, then first name
insertion_sort_people(people)
```

`Person` is a frozen dataclass; `Person.sort_key()` returns the
`(age, last_name, first_name)` tuple used by the people sorts.

## Command line

`algo-gcd` reads a count `n` from standard input, then `n` pairs of integers,
and prints the greatest common divisor of each pair, one per line:

```
$ printf '2\n30 9\n100 9\n' | algo-gcd
3
1
```

If fewer pairs are given than announced, or a value is not an integer, it
reports an error and exits with status 2. The same logic is available as
`algo.gcd_cli.run(stdin, stdout)` for any pair of text streams.