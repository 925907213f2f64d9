"""Tests for the data generation and reporting helpers."""

import io
import time

import numpy as np

import utils.utils as utils_module
from algorithms.matrix_multiplication.validation import validate_for_multiplication
from constants.params import DATA_TYPE, MAX_RANDOM_VALUE
from utils.utils import (
    generate_array,
    generate_matrices,
    get_formatted_elapsed_time,
    get_ram_info,
    write_result_header,
)


def test_generate_matrices_shapes_and_dtype():
    A, B = generate_matrices(3, 4, 5, seed=1)
    assert A.shape == (3, 4)
    assert B.shape == (4, 5)
    assert A.dtype == DATA_TYPE
    assert B.dtype == DATA_TYPE


def test_generate_matrices_have_no_zero_cells():
    A, B = generate_matrices(20, 20, 20, seed=7)
    assert np.all(A != 0)
    assert np.all(B != 0)
    assert np.all(np.abs(A) < MAX_RANDOM_VALUE)
    assert validate_for_multiplication(A, B) is None


def test_generate_matrices_is_seeded():
    first = generate_matrices(4, 4, 4, seed=3)
    second = generate_matrices(4, 4, 4, seed=3)
    np.testing.assert_array_equal(first[0], second[0])
    np.testing.assert_array_equal(first[1], second[1])


def test_generate_array():
    arr = generate_array(100, seed=5)
    assert arr.shape == (100,)
    assert arr.dtype == DATA_TYPE
    assert arr.min() >= -MAX_RANDOM_VALUE
    assert arr.max() < MAX_RANDOM_VALUE
    np.testing.assert_array_equal(arr, generate_array(100, seed=5))


def test_get_formatted_elapsed_time():
    assert get_formatted_elapsed_time(time.time()) == "00:00:00"
    assert get_formatted_elapsed_time(time.time() - 3725) == "01:02:05"


def test_get_ram_info():
    assert get_ram_info().startswith("Total:")


def test_write_result_header(monkeypatch):
    monkeypatch.setattr(utils_module, "get_cpu_info", lambda: "Test CPU")
    buffer = io.StringIO()
    write_result_header(buffer, metric="MElements/s")
    assert buffer.getvalue() == "# CPU Info: Test CPU\nRun,Timestamp,Time(s),Data Size (MB),MElements/s\n"
