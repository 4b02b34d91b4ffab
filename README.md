# abcsolve

Solutions to a collection of beginner contest problems. Each problem is a
plain Python function. The `abcsolve` command reads a problem's input in the
usual contest format and prints its answer.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the library

The problems are grouped by difficulty into three modules:

- `abcsolve.contest_a` holds the simplest problems: `count_increasing_pairs`,
  `is_long_enough`, `count_eligible_races`, `shared_free_day`,
  `fits_intervals`, `first_missing_letter`, `sum_odd_positions`,
  `ends_with_tea`, `trim`, `all_open`, `contains`, `count_covering` and
  `within_budget`.
- `abcsolve.contest_b` holds `abbreviations_covered`, `pairwise_distances`,
  `assign_balls`, `h_index`, `distinct_sorted`, `min_rotation_cost`,
  `count_abc_triples`, `max_t_density`, `remove_each`, `place_markers`,
  `expand_runs`, `pair_hash_marks` and `count_distinct_concatenations`.
- `abcsolve.contest_c` holds the harder problems: `min_domino_chain`,
  `toggle_segments` (a generator), `is_single_cycle`, `count_matching_pairs`,
  `kth_concatenation`, `is_palindrome_in_base`, `sum_double_palindromes` and
  `can_mix_safely`. It also has two classes, `DisjointSet` (union–find) and
  `SegmentQueue`.

Each function takes already-parsed Python values and returns its answer:

```python
from abcsolve.contest_a import trim, first_missing_letter
from abcsolve.contest_b import h_index, distinct_sorted

trim("abcdef", 1, 2)           # "bcd"
first_missing_letter("abc")    # "d"
h_index([3, 3, 3])             # 3
distinct_sorted([3, 1, 3])     # [1, 3]
```

Invalid input, such as a range outside a string or a ball naming a box that
does not exist, raises `ValueError`. A few answers use `None` for "no answer":
`first_missing_letter` when every letter is present, and `expand_runs` once
the result would pass 100 characters.

`DisjointSet` joins the elements 1 through `n` into sets. An element outside
that range raises `IndexError`:

```python
from abcsolve.contest_c import DisjointSet

sets = DisjointSet(4)
sets.merge(1, 2)
sets.size(1)                   # 2
```

`SegmentQueue` holds runs of equal values and takes elements from the front:

```python
from abcsolve.contest_c import SegmentQueue

queue = SegmentQueue()
queue.push(2, 3)               # two 3s
queue.push(3, 5)               # three 5s
queue.pop_sum(3)               # 11
len(queue)                     # 2
```

## Using the command

`abcsolve` takes the name of a problem and, optionally, an input file. With
no file it reads standard input. It prints the answer:

```
abcsolve <problem> [input-file]
abcsolve <problem> < input.txt
```

For example:

```
echo "3 1 2 3 4 5 1" | abcsolve count_increasing_pairs
2
```

The problem names are the function names listed above, except that
`is_palindrome_in_base` has no command of its own. There is one more,
`segment_queue`, which runs a series of queries against a `SegmentQueue`:
`1 length value` pushes, and `2 k` prints the sum of the first `k` elements.
Yes/no problems print `Yes` or `No`. When the input is malformed or
invalid, the command writes `abcsolve: error: ...` to standard error and
exits with status 1.

`abcsolve.cli.solve(problem, text)` does the same from Python. It takes the
input as a string and returns the output text. An unknown problem name raises
`ValueError`.