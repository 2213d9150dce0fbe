"""Sums, counts and comparisons over whole sequences."""

from __future__ import annotations

from collections.abc import Sequence


def arrays_equal(arr1: Sequence[int], arr2: Sequence[int]) -> bool:
    """Tell whether two sequences hold the same elements with the same counts."""
    return sorted(arr1) == sorted(arr2)


def min_max(arr: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest element of ``arr``."""
    if not arr:
        raise ValueError("min_max() needs a non-empty sequence")
    return min(arr), max(arr)


def missing_number(n: int, arr: Sequence[int]) -> int:
    """Return the number from 1..n absent from the first n-1 items of ``arr``."""
    return n * (n + 1) // 2 - sum(arr[: n - 1])


def total_fine(date: int, cars: Sequence[int], fines: Sequence[int]) -> int:
    """Total fine collected on ``date``.

    Odd-numbered cars pay on even dates and even-numbered cars on odd dates.
    """
    collect_from_odd = date % 2 == 0
    return sum(
        fine
        for car, fine in zip(cars, fines, strict=True)
        if (car % 2 == 1) == collect_from_odd
    )


def subarray_sum(arr: Sequence[int], s: int) -> list[int]:
    """Return the 1-based bounds of the first run of ``arr`` summing to ``s``.

    ``arr`` holds positive integers.  Returns ``[-1]`` when no run matches.
    """
    total = 0
    start = 0
    for end, value in enumerate(arr):
        total += value
        while total > s and start < end:
            total -= arr[start]
            start += 1
        if total == s:
            return [start + 1, end + 1]
    return [-1]


def equilibrium_point(arr: Sequence[int]) -> int:
    """Return the first 1-based position whose left and right sums match, or -1."""
    remaining = sum(arr)
    left = 0
    for position, value in enumerate(arr, start=1):
        remaining -= value
        if left == remaining:
            return position
        left += value
    return -1