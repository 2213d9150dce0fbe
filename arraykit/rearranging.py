"""Reordering and rewriting sequences in place."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def rotate(arr: list[int]) -> None:
    """Rotate ``arr`` one step clockwise in place: the last item moves to the front."""
    if arr:
        arr[:] = arr[-1:] + arr[:-1]


def sort_binary(arr: list[int]) -> list[int]:
    """Rewrite ``arr`` in place as its zeros followed by ones, and return it.

    Every non-zero item is counted as a one.
    """
    zeros = arr.count(0)
    arr[:] = [0] * zeros + [1] * (len(arr) - zeros)
    return arr


def segregate_negatives(arr: list[int]) -> None:
    """Move negative items to the end of ``arr`` in place, keeping relative order."""
    arr[:] = [value for value in arr if value >= 0] + [
        value for value in arr if value < 0
    ]


def next_greatest(arr: Sequence[int]) -> list[int]:
    """Return, for each item, the greatest item to its right, or -1 for the last."""
    result: list[int] = []
    greatest = -1
    for value in reversed(arr):
        result.append(greatest)
        greatest = max(greatest, value)
    result.reverse()
    return result


def remove_duplicates(arr: list[int]) -> int:
    """Compact the distinct items of sorted ``arr`` to its front in place.

    Returns how many distinct items there are; positions past that count
    keep their old values.
    """
    if len(arr) <= 1:
        return len(arr)
    distinct = [arr[0]] + [cur for prev, cur in pairwise(arr) if cur != prev]
    arr[: len(distinct)] = distinct
    return len(distinct)


def sort012(arr: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass.

    Any item other than 0 or 1 is treated as a 2.
    """
    low, mid, high = 0, 0, len(arr) - 1
    while mid <= high:
        if arr[mid] == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif arr[mid] == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def alternate_signs(arr: list[int]) -> None:
    """Interleave non-negative and negative items of ``arr`` in place.

    Starts with a non-negative item, keeps the relative order within each
    sign, and appends whatever is left over once one sign runs out.
    """
    positives = [value for value in arr if value >= 0]
    negatives = [value for value in arr if value < 0]
    interleaved = [value for pair in zip(positives, negatives) for value in pair]
    arr[:] = interleaved + positives[len(negatives):] + negatives[len(positives):]