"""Searching within plain sequences and sorted matrices."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def search(arr: Sequence[int], x: int) -> int:
    """Return the index of the first occurrence of ``x`` in ``arr``, or -1."""
    return next((index for index, value in enumerate(arr) if value == x), -1)


def linear_search(arr: Sequence[int], target: int) -> int:
    """Return the index of the first ``target`` in ``arr``.

    Returns 0 when ``target`` is absent, so a miss cannot be told apart
    from a hit at the first position.
    """
    return next((index for index, value in enumerate(arr) if value == target), 0)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def find_missing_ap(arr: Sequence[int]) -> int:
    """Return the term missing from an arithmetic progression.

    ``arr`` is the progression with exactly one inner term removed; its first
    and last terms are present.  Returns -1 if no gap is found.
    """
    if not arr:
        raise ValueError("find_missing_ap() needs a non-empty sequence")
    n = len(arr)
    step = _trunc_div(arr[-1] - arr[0], n)
    low, high = 0, n - 1
    while low <= high:
        mid = low + (high - low) // 2
        if mid + 1 < n and arr[mid + 1] - arr[mid] != step:
            return arr[mid] + step
        if mid > 0 and arr[mid] - arr[mid - 1] != step:
            return arr[mid] - step
        if arr[mid] == arr[0] + mid * step:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a row-major sorted matrix."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = low + (high - low) // 2
        row, col = divmod(mid, cols)
        element = matrix[row][col]
        if element == target:
            return True
        if element < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def peak_element(arr: Sequence[int]) -> int:
    """Return the index of an element not smaller than its neighbours."""
    if not arr:
        raise ValueError("peak_element() needs a non-empty sequence")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def transition_point(arr: Sequence[int]) -> int:
    """Return the index of the first 1 in a sorted 0/1 sequence, or -1."""
    index = bisect_left(arr, True, key=lambda value: value != 0)
    return index if index < len(arr) else -1