from collections import Counter

import pytest

from arraykit.rearranging import (
    alternate_signs,
    next_greatest,
    remove_duplicates,
    rotate,
    segregate_negatives,
    sort012,
    sort_binary,
)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([1, 2, 3, 4, 5], [5, 1, 2, 3, 4]),
        ([9, 8, 7, 6, 4, 2, 1, 3], [3, 9, 8, 7, 6, 4, 2, 1]),
    ],
)
def test_rotate_examples(data, expected):
    rotate(data)
    assert data == expected


def test_rotate_full_cycle_restores():
    original = [4, 7, 1, 9, 3]
    data = list(original)
    for _ in original:
        rotate(data)
    assert data == original


def test_rotate_empty_and_single():
    empty = []
    rotate(empty)
    assert empty == []
    single = [42]
    rotate(single)
    assert single == [42]


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([1, 0, 1, 1, 0], [0, 0, 1, 1, 1]),
        ([1, 0, 1, 1, 1, 1, 1, 0, 0, 0], [0, 0, 0, 0, 1, 1, 1, 1, 1, 1]),
    ],
)
def test_sort_binary_examples(data, expected):
    result = sort_binary(data)
    assert result == expected
    assert result is data


def test_sort_binary_matches_sorted():
    data = [0, 1, 1, 0, 1, 0, 0]
    assert sort_binary(list(data)) == sorted(data)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([1, -1, 3, 2, -7, -5, 11, 6], [1, 3, 2, 11, 6, -1, -7, -5]),
        ([-5, 7, -3, -4, 9, 10, -1, 11], [7, 9, 10, 11, -5, -3, -4, -1]),
    ],
)
def test_segregate_negatives_examples(data, expected):
    segregate_negatives(data)
    assert data == expected


def test_segregate_negatives_keeps_elements():
    original = [3, -2, 0, -8, 5, -1]
    data = list(original)
    segregate_negatives(data)
    assert Counter(data) == Counter(original)
    split = sum(1 for value in original if value >= 0)
    assert all(value >= 0 for value in data[:split])
    assert all(value < 0 for value in data[split:])


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([16, 17, 4, 3, 5, 2], [17, 5, 5, 5, 2, -1]),
        ([2, 3, 1, 9], [9, 9, 9, -1]),
    ],
)
def test_next_greatest_examples(data, expected):
    original = list(data)
    assert next_greatest(data) == expected
    assert data == original


def test_next_greatest_invariant():
    data = [5, 1, 8, 2, 7, 3]
    result = next_greatest(data)
    assert len(result) == len(data)
    for index, value in enumerate(result[:-1]):
        assert value == max(data[index + 1:])
    assert result[-1] == -1


def test_next_greatest_empty():
    assert next_greatest([]) == []


def test_remove_duplicates_examples():
    data = [1, 2, 2, 4]
    count = remove_duplicates(data)
    assert count == 3
    assert data[:count] == [1, 2, 4]

    same = [2, 2, 2, 2, 2]
    count = remove_duplicates(same)
    assert count == 1
    assert same[:count] == [2]


def test_remove_duplicates_invariant():
    original = [1, 1, 2, 3, 3, 3, 5, 8, 8]
    data = list(original)
    count = remove_duplicates(data)
    assert data[:count] == sorted(set(original))
    assert len(data) == len(original)


@pytest.mark.parametrize("data", [[], [7]])
def test_remove_duplicates_short(data):
    original = list(data)
    assert remove_duplicates(data) == len(original)
    assert data == original


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([0, 2, 1, 2, 0], [0, 0, 1, 2, 2]),
        ([0, 1, 0], [0, 0, 1]),
    ],
)
def test_sort012_examples(data, expected):
    sort012(data)
    assert data == expected


def test_sort012_matches_sorted():
    original = [2, 2, 1, 0, 1, 2, 0, 0, 1, 2, 0]
    data = list(original)
    sort012(data)
    assert data == sorted(original)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([9, 4, -2, -1, 5, 0, -5, -3, 2], [9, -2, 4, -1, 5, -5, 0, -3, 2]),
        ([-5, -2, 5, 2, 4, 7, 1, 8, 0, -8], [5, -5, 2, -2, 4, -8, 7, 1, 8, 0]),
    ],
)
def test_alternate_signs_examples(data, expected):
    alternate_signs(data)
    assert data == expected


def test_alternate_signs_preserves_order_within_sign():
    original = [-1, -2, -3, 4, -5, 6]
    data = list(original)
    alternate_signs(data)
    assert Counter(data) == Counter(original)
    assert [v for v in data if v >= 0] == [v for v in original if v >= 0]
    assert [v for v in data if v < 0] == [v for v in original if v < 0]
    assert data[0] >= 0
    assert data[1] < 0