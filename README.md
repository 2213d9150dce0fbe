# arraykit

Plain functions for common questions about integer sequences. Everything works
on ordinary Python lists. Some functions return a new value. Others rewrite the
list they are given, and for those this is stated below.

Requires Python 3.10 or later and has no third-party dependencies.

## Installation

```
pip install arraykit
```

## Searching (`arraykit.searching`)

- `search(arr, x)`: index of the first `x` in `arr`, or `-1` if it is absent.
- `linear_search(arr, target)`: index of the first `target`. Returns `0` when
  `target` is absent, so a miss looks the same as a hit at index 0.
- `find_missing_ap(arr)`: the single missing inner term of an arithmetic
  progression whose first and last terms are present. Returns `-1` if no gap is
  found. Raises `ValueError` for an empty sequence.
- `search_matrix(matrix, target)`: binary search in a matrix whose rows, read
  one after another, form a sorted sequence. Returns `False` for an empty
  matrix.
- `peak_element(arr)`: index of an element that is not smaller than its
  neighbours. Raises `ValueError` for an empty sequence.
- `transition_point(arr)`: index of the first `1` in a sorted 0/1 sequence, or
  `-1` if there is no `1`.

```python
from arraykit.searching import search, find_missing_ap, search_matrix, peak_element

search([1, 2, 3, 4], 3)                       # 2
find_missing_ap([2, 4, 8, 10, 12, 14])        # 6
find_missing_ap([1, 6, 11, 16, 21, 31])       # 26
search_matrix([[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]], 13)  # False
peak_element([1, 2, 3])                       # 2
```

## Aggregates (`arraykit.aggregates`)

- `arrays_equal(arr1, arr2)`: `True` when both hold the same elements with the
  same counts, in any order. The inputs are not modified.
- `min_max(arr)`: a `(minimum, maximum)` tuple. Raises `ValueError` for an
  empty sequence.
- `missing_number(n, arr)`: the number from `1..n` that is missing. Only the
  first `n - 1` items of `arr` are used.
- `total_fine(date, cars, fines)`: the total fine collected on `date`.
  Odd-numbered cars pay on even dates, and even-numbered cars pay on odd dates.
  `cars` and `fines` must have the same length, and a `ValueError` is raised if
  they do not.
- `subarray_sum(arr, s)`: the 1-based `[left, right]` bounds of the first
  contiguous run of positive numbers that sums to `s`, or `[-1]` if there is no
  such run.
- `equilibrium_point(arr)`: the first 1-based position where the sum on its
  left equals the sum on its right, or `-1`.

```python
from arraykit.aggregates import min_max, subarray_sum, total_fine, equilibrium_point

min_max([3, 2, 1, 56, 10000, 167])                                 # (1, 10000)
subarray_sum([1, 2, 3, 7, 5], 12)                                  # [2, 4]
total_fine(12, [2375, 7682, 2325, 2352], [250, 500, 350, 200])     # 600
equilibrium_point([1, 3, 5, 2, 2])                                 # 3
```

## Rearranging (`arraykit.rearranging`)

All of these change the list in place except `next_greatest`, which returns a
new list.

- `rotate(arr)`: rotates one position clockwise, so the last item moves to the
  front. Returns `None`.
- `sort_binary(arr)`: rewrites the list as its zeros followed by ones and also
  returns it. Any non-zero item counts as a one.
- `segregate_negatives(arr)`: moves negative numbers to the end and keeps the
  order within each group. Returns `None`.
- `next_greatest(arr)`: a new list where each item is replaced by the greatest
  item to its right. The last item becomes `-1`.
- `remove_duplicates(arr)`: for a sorted list, moves the distinct values to the
  front and returns how many there are. Positions past that count keep their
  old values.
- `sort012(arr)`: sorts a list of 0s, 1s and 2s in one pass. Any other value is
  treated as a 2. Returns `None`.
- `alternate_signs(arr)`: interleaves non-negative and negative numbers,
  starting with a non-negative one and keeping the order within each group.
  Whatever is left over once one group runs out goes at the end. Returns
  `None`.

```python
from arraykit.rearranging import rotate, alternate_signs, next_greatest, remove_duplicates

data = [1, 2, 3, 4, 5]
rotate(data)
data                                 # [5, 1, 2, 3, 4]

values = [9, 4, -2, -1, 5, 0, -5, -3, 2]
alternate_signs(values)
values                               # [9, -2, 4, -1, 5, -5, 0, -3, 2]

next_greatest([16, 17, 4, 3, 5, 2])  # [17, 5, 5, 5, 2, -1]

items = [1, 2, 2, 4]
remove_duplicates(items)             # 3
items[:3]                            # [1, 2, 4]
```

## Scope

arraykit is a library only. It provides no command-line program, and it reads
and writes no files.

## Running the tests

```
pip install -e ".[test]"
pytest
```