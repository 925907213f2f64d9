import numpy as np

from algorithms.errors import InvalidArgumentError
from constants.params import DATA_TYPE, FILTER_LOWER_BOUND, FILTER_UPPER_BOUND, NONE_MATCH_DIVISOR


def as_int_array(values, name="numbers"):
    """Converts a 1-D sequence of ints to a fresh DATA_TYPE NumPy array."""
    if values is None:
        raise TypeError(f"{name} cannot be None")
    arr = np.array(values, dtype=DATA_TYPE)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be 1-dimensional, got shape {arr.shape}")
    return arr


def none_match(numbers):
    """Returns True if no value in numbers divides by NONE_MATCH_DIVISOR."""
    for number in as_int_array(numbers):
        if number % NONE_MATCH_DIVISOR == 0:
            return False
    return True


def some_match(numbers, predicate):
    """Returns True if predicate(value) holds for at least one value."""
    for number in as_int_array(numbers):
        if predicate(int(number)):
            return True
    return False


def all_match(strings, function, predicate):
    """
    Returns True if every string in strings, mapped through function to an int,
    satisfies predicate. An empty sequence matches.
    """
    if strings is None:
        raise TypeError("strings cannot be None")
    for s in strings:
        value = function(s)
        if not predicate(value):
            return False
    return True


def copy_values(numbers, start_inclusive, end_exclusive):
    """
    Copies numbers[start_inclusive:end_exclusive] into a new array.

    Raises:
        InvalidArgumentError: start_inclusive > end_exclusive, start_inclusive < 0,
            or end_exclusive past the last index of numbers.
    """
    arr = as_int_array(numbers)
    if start_inclusive > end_exclusive or start_inclusive < 0 or end_exclusive > arr.size - 1:
        raise InvalidArgumentError(
            f"Invalid copy range [{start_inclusive}, {end_exclusive}) for array of length {arr.size}"
        )
    return arr[start_inclusive:end_exclusive].copy()


def replace(numbers):
    """Doubles values at even indexes and negates values at odd indexes."""
    arr = as_int_array(numbers)
    result = np.empty_like(arr)
    result[0::2] = arr[0::2] * 2
    result[1::2] = -arr[1::2]
    return result


def find_second_max(numbers):
    """Returns the largest value below the maximum, or 0 when there is none."""
    arr = np.sort(as_int_array(numbers))
    second_max = 0

    for i in range(arr.size - 2, -1, -1):
        if arr[i] != arr[-1]:
            second_max = int(arr[i])
            break
    return second_max


def rearrange(numbers):
    """
    Reverses numbers, then moves negative numbers ahead of the rest while keeping
    the reversed order inside both groups.

    [3, -5, 4, -7, 2, 9] -> [-7, -5, 9, 2, 4, 3]
    """
    reversed_arr = as_int_array(numbers)[::-1]
    negatives = reversed_arr[reversed_arr < 0]
    non_negatives = reversed_arr[reversed_arr >= 0]
    return np.concatenate((negatives, non_negatives))


def filter_values(numbers, lower=FILTER_LOWER_BOUND, upper=FILTER_UPPER_BOUND):
    """Drops values strictly between lower and upper; the result has no gaps."""
    arr = as_int_array(numbers)
    in_band = (arr > lower) & (arr < upper)
    return arr[~in_band]


def insert_values(numbers, start_inclusive, values):
    """
    Returns a new array with values inserted into numbers at start_inclusive.

    Raises:
        InvalidArgumentError: start_inclusive is outside [0, len(numbers)].
    """
    arr = as_int_array(numbers)
    to_insert = as_int_array(values, "values")
    if start_inclusive < 0 or start_inclusive > arr.size:
        raise InvalidArgumentError(
            f"Insert index {start_inclusive} out of bounds for array of length {arr.size}"
        )
    return np.concatenate((arr[:start_inclusive], to_insert, arr[start_inclusive:]))


def check_sorted_ascending(arr, name):
    for i in range(arr.size - 1):
        if arr[i] > arr[i + 1]:
            raise InvalidArgumentError(f"{name} is not sorted ascending at index {i}")


def merge_sorted_arrays(numbers, other):
    """
    Merges two ascending arrays into one ascending array.

    Raises:
        InvalidArgumentError: Either array is not sorted ascending.
    """
    first = as_int_array(numbers)
    second = as_int_array(other, "other")
    check_sorted_ascending(first, "numbers")
    check_sorted_ascending(second, "other")

    result = np.empty(first.size + second.size, dtype=DATA_TYPE)
    i = i1 = i2 = 0

    while i1 < first.size and i2 < second.size:
        if first[i1] < second[i2]:
            result[i] = first[i1]
            i1 += 1
        else:
            result[i] = second[i2]
            i2 += 1
        i += 1

    result[i:i + first.size - i1] = first[i1:]
    i += first.size - i1
    result[i:] = second[i2:]

    return result


def distinct(numbers):
    """Returns the distinct values of numbers in order of first appearance."""
    arr = as_int_array(numbers)
    seen = set()
    unique = []

    for number in arr.tolist():
        if number not in seen:
            seen.add(number)
            unique.append(number)

    return np.array(unique, dtype=DATA_TYPE)
