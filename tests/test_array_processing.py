"""Tests for the single-threaded array utilities."""

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from algorithms.errors import InvalidArgumentError
from algorithms.array_processing.single_threaded import (
    all_match,
    as_int_array,
    copy_values,
    distinct,
    filter_values,
    find_second_max,
    insert_values,
    merge_sorted_arrays,
    none_match,
    rearrange,
    replace,
    some_match,
)

int32_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=30)


@pytest.mark.parametrize(
    "numbers,expected",
    [
        ([1, 2, 3], True),
        ([1, 20, 3], False),
        ([-30, 7], False),
        ([0], False),
        ([-15, 15, 101], True),
        ([], True),
    ],
)
def test_none_match(numbers, expected):
    assert none_match(numbers) is expected


def test_some_match():
    assert some_match([1, 2, 3], lambda value: value > 2) is True
    assert some_match([1, 2, 3], lambda value: value > 3) is False
    assert some_match([], lambda value: True) is False


def test_some_match_passes_python_ints():
    seen = []
    some_match(np.array([4, 5]), lambda value: seen.append(value) or False)
    assert seen == [4, 5]
    assert all(type(value) is int for value in seen)


def test_all_match():
    assert all_match(["1", "22", "333"], len, lambda value: value < 4) is True
    assert all_match(["1", "4444"], len, lambda value: value < 4) is False
    assert all_match(["10", "-3"], int, lambda value: value % 2 == 0) is False
    assert all_match([], len, lambda value: False) is True


def test_all_match_stops_at_first_failure():
    calls = []

    def to_int(s):
        calls.append(s)
        return int(s)

    assert all_match(["1", "-1", "2"], to_int, lambda value: value > 0) is False
    assert calls == ["1", "-1"]


def test_copy_values():
    np.testing.assert_array_equal(copy_values([1, 2, 3, 4, 5], 1, 3), [2, 3])
    np.testing.assert_array_equal(copy_values([1, 2, 3, 4, 5], 0, 4), [1, 2, 3, 4])
    assert copy_values([1, 2, 3], 1, 1).size == 0


@pytest.mark.parametrize(
    "start,end",
    [
        (3, 1),
        (-1, 2),
        (0, 5),
        (2, 6),
    ],
)
def test_copy_values_invalid_range(start, end):
    with pytest.raises(InvalidArgumentError, match="Invalid copy range"):
        copy_values([1, 2, 3, 4, 5], start, end)


def test_copy_values_end_may_not_equal_length():
    with pytest.raises(InvalidArgumentError):
        copy_values([1, 2, 3], 0, 3)


def test_copy_values_returns_copy():
    source = np.array([1, 2, 3, 4], dtype=np.int32)
    copied = copy_values(source, 0, 2)
    copied[0] = 99
    assert source[0] == 1


def test_replace():
    np.testing.assert_array_equal(replace([1, 2, 3, 4, 5]), [2, -2, 6, -4, 10])
    assert replace([]).size == 0


def test_replace_wraps_on_overflow():
    result = replace([2 ** 30, -(2 ** 31)])
    np.testing.assert_array_equal(result, [-(2 ** 31), -(2 ** 31)])


@pytest.mark.parametrize(
    "numbers,expected",
    [
        ([1, 5, 3, 5], 3),
        ([9, -2, 4], 4),
        ([-1, -5, -3], -3),
        ([7, 7, 7], 0),
        ([4], 0),
        ([], 0),
    ],
)
def test_find_second_max(numbers, expected):
    assert find_second_max(numbers) == expected


def test_find_second_max_does_not_sort_input():
    numbers = np.array([5, 1, 4], dtype=np.int32)
    find_second_max(numbers)
    np.testing.assert_array_equal(numbers, [5, 1, 4])


def test_rearrange():
    np.testing.assert_array_equal(rearrange([3, -5, 4, -7, 2, 9]), [-7, -5, 9, 2, 4, 3])
    np.testing.assert_array_equal(rearrange([1, 2, 3]), [3, 2, 1])
    np.testing.assert_array_equal(rearrange([-1, -2]), [-2, -1])
    assert rearrange([]).size == 0


def test_rearrange_does_not_mutate_input():
    numbers = [3, -5, 4]
    rearrange(numbers)
    assert numbers == [3, -5, 4]


def test_filter_values():
    np.testing.assert_array_equal(filter_values([-20, -10, -9, -1, 0, 5]), [-20, -10, 0, 5])
    np.testing.assert_array_equal(filter_values([1, -3, 2]), [1, 2])


def test_filter_values_custom_band():
    np.testing.assert_array_equal(filter_values([1, 2, 3, 4, 5], lower=1, upper=4), [1, 4, 5])


@pytest.mark.parametrize(
    "start,expected",
    [
        (0, [9, 8, 1, 2, 3]),
        (1, [1, 9, 8, 2, 3]),
        (3, [1, 2, 3, 9, 8]),
    ],
)
def test_insert_values(start, expected):
    np.testing.assert_array_equal(insert_values([1, 2, 3], start, [9, 8]), expected)


@pytest.mark.parametrize("start", [-1, 4])
def test_insert_values_invalid_start(start):
    with pytest.raises(InvalidArgumentError, match="out of bounds"):
        insert_values([1, 2, 3], start, [9])


def test_merge_sorted_arrays():
    np.testing.assert_array_equal(merge_sorted_arrays([1, 3, 5], [2, 2, 6]), [1, 2, 2, 3, 5, 6])
    np.testing.assert_array_equal(merge_sorted_arrays([], [1, 2]), [1, 2])
    np.testing.assert_array_equal(merge_sorted_arrays([-4, 10], []), [-4, 10])
    assert merge_sorted_arrays([], []).size == 0


@pytest.mark.parametrize(
    "first,second",
    [
        ([3, 1], [1, 2]),
        ([1, 2], [5, 4, 6]),
    ],
)
def test_merge_sorted_arrays_rejects_unsorted(first, second):
    with pytest.raises(InvalidArgumentError, match="not sorted ascending"):
        merge_sorted_arrays(first, second)


def test_distinct():
    np.testing.assert_array_equal(distinct([3, 1, 3, 2, 1]), [3, 1, 2])
    np.testing.assert_array_equal(distinct([5, 5, 5]), [5])
    assert distinct([]).size == 0


def test_results_use_fixed_width_dtype():
    assert replace([1]).dtype == np.int32
    assert distinct([1, 1]).dtype == np.int32
    assert merge_sorted_arrays([1], [2]).dtype == np.int32


def test_as_int_array_rejects_bad_input():
    with pytest.raises(TypeError, match="cannot be None"):
        as_int_array(None)
    with pytest.raises(InvalidArgumentError, match="1-dimensional"):
        as_int_array([[1, 2], [3, 4]])


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


@settings(max_examples=50)
@given(int32_lists, int32_lists)
def test_merge_matches_sorted_concatenation(first, second):
    merged = merge_sorted_arrays(sorted(first), sorted(second))
    assert merged.tolist() == sorted(first + second)


@settings(max_examples=50)
@given(int32_lists)
def test_distinct_keeps_first_occurrences(numbers):
    assert distinct(numbers).tolist() == list(dict.fromkeys(numbers))


@settings(max_examples=50)
@given(int32_lists)
def test_rearrange_partitions_reversed_input(numbers):
    result = rearrange(numbers).tolist()
    reversed_numbers = numbers[::-1]
    expected = [n for n in reversed_numbers if n < 0] + [n for n in reversed_numbers if n >= 0]
    assert result == expected
